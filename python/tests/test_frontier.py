"""Frontier ordering."""

from __future__ import annotations

from backend.engine.gamesolver.frontier import FifoFrontier, PriorityFrontier, ScoredNode
from backend.engine.gamesolver.heuristic import score
from backend.models.board import Board, Move
from backend.models.node import SearchNode


def test_fifo_pops_oldest_first(start: Board) -> None:
    frontier = FifoFrontier()
    nodes = [SearchNode(start.apply_move(m)) for m in (Move.UP, Move.RIGHT, Move.DOWN)]
    for node in nodes:
        frontier.push(node)

    assert len(frontier) == 3
    assert [frontier.pop() for _ in range(3)] == nodes
    assert not frontier


def test_priority_pops_lowest_score_first(start: Board, goal: Board) -> None:
    frontier = PriorityFrontier(goal)
    far = SearchNode(start)
    near = SearchNode(goal.apply_move(Move.DOWN))
    exact = SearchNode(goal)
    for node in (far, near, exact):
        frontier.push(node)

    assert [frontier.pop() for _ in range(3)] == [exact, near, far]
    assert not frontier


def test_scored_node_orders_by_score() -> None:
    a = Board.from_string("*               ")
    low = ScoredNode(1, 5, SearchNode(a))
    high = ScoredNode(2, 0, SearchNode(a))
    assert low < high


def test_priority_follows_heuristic_score(start: Board, goal: Board) -> None:
    frontier = PriorityFrontier(goal)
    boards = [start] + [start.apply_move(m) for m in (Move.UP, Move.RIGHT, Move.DOWN)]
    for board in boards:
        frontier.push(SearchNode(board))

    scores = [score(frontier.pop(), goal) for _ in boards]
    assert scores == sorted(scores)
    assert not frontier
