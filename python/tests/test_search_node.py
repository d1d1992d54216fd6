"""Search nodes and the per-path cycle guard in the move generator."""

from __future__ import annotations

from backend.engine.gamesolver.moves import try_move
from backend.models.board import Board, Move
from backend.models.node import SearchNode


def test_root_node(start: Board) -> None:
    root = SearchNode(start)
    assert root.parent is None
    assert root.depth == 0
    assert root.digest == start.digest
    assert list(root.ancestors()) == []


def test_ancestors_walk_to_root(start: Board) -> None:
    root = SearchNode(start)
    child = try_move(root, Move.RIGHT)
    grandchild = try_move(child, Move.RIGHT)
    assert grandchild.depth == 2
    assert list(grandchild.ancestors()) == [child, root]


def test_try_move_out_of_bounds() -> None:
    root = SearchNode(Board.from_string("*               "))
    assert try_move(root, Move.LEFT) is None
    assert try_move(root, Move.UP) is None


def test_try_move_links_parent(start: Board) -> None:
    root = SearchNode(start)
    child = try_move(root, Move.DOWN)
    assert child is not None
    assert child.parent is root
    assert child.board == start.apply_move(Move.DOWN)


def test_siblings_share_parent() -> None:
    # Agent at (1, 1) so every direction stays on the board.
    root = SearchNode(Board.from_string("a    *   b c    "))
    children = [try_move(root, m) for m in Move]
    assert all(c is not None and c.parent is root for c in children)


def test_undo_of_previous_move_is_rejected(start: Board) -> None:
    root = SearchNode(start)
    child = try_move(root, Move.RIGHT)
    # Going back left recreates the root, the child's grandparent-to-be.
    assert try_move(child, Move.LEFT) is None


def test_returning_to_older_ancestor_is_rejected() -> None:
    # Walk the agent around a 2x2 square of blanks; the fourth step
    # recreates the root.
    root = SearchNode(Board.from_string("*               "))
    node = root
    for move in (Move.RIGHT, Move.DOWN, Move.LEFT):
        node = try_move(node, move)
        assert node is not None
    assert try_move(node, Move.UP) is None


def test_cycle_guard_is_per_path() -> None:
    # The same board reached along two different branches is allowed.
    root = SearchNode(Board.from_string("*               "))
    via_right = try_move(try_move(root, Move.RIGHT), Move.DOWN)
    via_down = try_move(try_move(root, Move.DOWN), Move.RIGHT)
    assert via_right is not None and via_down is not None
    assert via_right.board == via_down.board
    assert via_right is not via_down
