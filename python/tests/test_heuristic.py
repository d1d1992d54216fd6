"""Heuristic scorer."""

from __future__ import annotations

from backend.engine.gamesolver.heuristic import score
from backend.models.board import Board, Move
from backend.models.node import SearchNode


def test_goal_scores_zero(goal: Board) -> None:
    assert score(SearchNode(goal), goal) == 0


def test_score_is_positive_away_from_goal(start: Board, goal: Board) -> None:
    assert score(SearchNode(start), goal) > 0


def test_score_uses_flattened_index_distance() -> None:
    goal = Board.from_string("a*              ")
    # 'a' sits 5 cells further along the flattened board; the agent moved
    # one cell left; cell 0 now holds a blank that the goal does not expect.
    board = Board.from_string("*    a          ")
    # i=0: goal 'a' found at 5 -> 5
    # i=1: goal '*' found at 0 -> 1
    # i=5: goal ' ' found first at 1 -> 4
    assert score(SearchNode(board), goal) == 10


def test_score_lower_one_move_from_goal() -> None:
    goal = Board.from_string("ab*             ")
    near = goal.apply_move(Move.DOWN)
    far = Board.from_string("a   *   b       ")
    assert score(SearchNode(near), goal) == 8
    assert score(SearchNode(far), goal) == 19


def test_missing_symbol_counts_past_last_cell() -> None:
    goal = Board.from_string("a*              ")
    board = Board.from_string("*               ")
    # i=0: 'a' absent -> |16 - 0|; i=1: '*' at 0 -> 1
    assert score(SearchNode(board), goal) == 17
