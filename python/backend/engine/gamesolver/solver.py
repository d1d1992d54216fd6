"""Agent block puzzle solver.

Both strategies share one expansion loop and differ only in the frontier
they pull nodes from:

* ``bfs``: FIFO frontier, uninformed breadth-first search.
* ``astar``: priority frontier ordered by the heuristic score alone.  There
  is no path-cost term, so this is greedy best-first search and the path it
  returns is not guaranteed to be the shortest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from backend.engine.gamesolver.frontier import FifoFrontier, Frontier, PriorityFrontier
from backend.engine.gamesolver.moves import try_move
from backend.models.board import Board, Move
from backend.models.node import SearchNode

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 10_000


class Strategy(StrEnum):
    BREADTH_FIRST = "bfs"
    BEST_FIRST = "astar"


@dataclass
class SolverConfig:
    strategy: Strategy = Strategy.BEST_FIRST
    # Skip boards already enqueued anywhere in the tree, not just on the
    # current path.
    track_visited: bool = False
    # Stop expanding after this many nodes; ``None`` searches until the
    # frontier is empty.
    max_iterations: int | None = None


@dataclass
class SolverStats:
    iterations: int = 0
    generated: int = 0
    pruned: int = 0
    frontier_peak: int = 0
    solution_depth: int | None = None

    def __str__(self) -> str:
        depth = "-" if self.solution_depth is None else self.solution_depth
        return (
            f"Expanded: {self.iterations}, "
            f"Generated: {self.generated}, "
            f"Pruned: {self.pruned}, "
            f"Frontier peak: {self.frontier_peak}, "
            f"Depth: {depth}"
        )


class Solver:
    """Runs one search per :meth:`solve` call; ``stats`` describes the last."""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()
        self.stats = SolverStats()

    def _frontier(self, goal: Board) -> Frontier:
        if self.config.strategy is Strategy.BREADTH_FIRST:
            return FifoFrontier()
        return PriorityFrontier(goal)

    def solve(self, start: Board, goal: Board) -> SearchNode | None:
        """Return the node whose board matches *goal*, or ``None`` on failure."""
        self.stats = SolverStats()
        stats = self.stats
        goal_digest = goal.digest

        logger.info(
            "Searching %r -> %r (strategy=%s, track_visited=%s)",
            str(start), str(goal), self.config.strategy.value,
            self.config.track_visited,
        )

        root = SearchNode(start)
        if root.digest == goal_digest:
            stats.solution_depth = 0
            logger.info("Start board already matches the goal")
            return root

        frontier = self._frontier(goal)
        frontier.push(root)
        visited: set[str] | None = {root.digest} if self.config.track_visited else None
        limit = self.config.max_iterations

        while frontier:
            if limit is not None and stats.iterations >= limit:
                logger.warning("Stopped after %d iterations without a solution", limit)
                return None

            parent = frontier.pop()
            for move in Move:
                child = try_move(parent, move)
                if child is None or (visited is not None and child.digest in visited):
                    stats.pruned += 1
                    continue

                stats.generated += 1
                if child.digest == goal_digest:
                    stats.iterations += 1
                    stats.solution_depth = child.depth
                    logger.info("Goal found. %s", stats)
                    return child

                if visited is not None:
                    visited.add(child.digest)
                frontier.push(child)

            stats.iterations += 1
            stats.frontier_peak = max(stats.frontier_peak, len(frontier))
            if stats.iterations % PROGRESS_EVERY == 0:
                logger.debug("Progress: %s", stats)

        logger.info("Search exhausted. %s", stats)
        return None


def breadth_first(start: Board, goal: Board, track_visited: bool = False) -> SearchNode | None:
    return Solver(SolverConfig(Strategy.BREADTH_FIRST, track_visited)).solve(start, goal)


def best_first(start: Board, goal: Board, track_visited: bool = False) -> SearchNode | None:
    return Solver(SolverConfig(Strategy.BEST_FIRST, track_visited)).solve(start, goal)
