"""Frontier containers that decide which node the search expands next."""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from typing import NamedTuple

from backend.engine.gamesolver.heuristic import score
from backend.models.board import Board
from backend.models.node import SearchNode


class Frontier(ABC):
    """Nodes waiting to be expanded."""

    @abstractmethod
    def push(self, node: SearchNode) -> None: ...

    @abstractmethod
    def pop(self) -> SearchNode: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0


class FifoFrontier(Frontier):
    """Oldest node first (breadth-first order)."""

    def __init__(self) -> None:
        self._queue: deque[SearchNode] = deque()

    def push(self, node: SearchNode) -> None:
        self._queue.appendleft(node)

    def pop(self) -> SearchNode:
        return self._queue.pop()

    def __len__(self) -> int:
        return len(self._queue)


class ScoredNode(NamedTuple):
    score: int
    # Insertion counter; keeps heap entries comparable without comparing nodes.
    order: int
    node: SearchNode


class PriorityFrontier(Frontier):
    """Lowest heuristic score first (greedy best-first order).

    Each node is scored once when pushed.  Ties between equal scores are
    not part of the contract.
    """

    def __init__(self, goal: Board) -> None:
        self.goal = goal
        self._heap: list[ScoredNode] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(
            self._heap, ScoredNode(score(node, self.goal), next(self._counter), node)
        )

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap).node

    def __len__(self) -> int:
        return len(self._heap)
