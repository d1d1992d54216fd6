"""Successor generation with a per-path cycle guard."""

from __future__ import annotations

from backend.models.board import Move
from backend.models.node import SearchNode


def try_move(parent: SearchNode, move: Move) -> SearchNode | None:
    """Return the node reached from *parent* by *move*, or ``None``.

    ``None`` means the move leaves the grid or recreates a board already
    on this node's path.  The check starts at the grandparent and only
    covers the current path, so the same board can still be reached
    through another branch.
    """
    board = parent.board.apply_move(move)
    if board is None:
        return None

    digest = board.digest
    # parent.ancestors() starts at the new node's grandparent.
    for ancestor in parent.ancestors():
        if ancestor.digest == digest:
            return None

    return SearchNode(board, parent)
