"""Distance-to-goal estimate used by best-first search."""

from __future__ import annotations

from backend.models.board import CELLS, Board
from backend.models.node import SearchNode


def score(node: SearchNode, goal: Board) -> int:
    """Sum of flattened index distances between misplaced symbols and the goal.

    For each goal cell holding a different symbol on *node*'s board, the
    first occurrence of the goal symbol on the board is located and the
    1-D index difference is added.  A symbol missing from the board counts
    as sitting one past the last cell.  This is a city-block estimate on the
    flattened grid, not exact 2-D Manhattan distance.  A board scores 0
    against itself.
    """
    cells = node.board.cells
    total = 0
    for i, symbol in enumerate(goal.cells):
        if cells[i] != symbol:
            j = cells.index(symbol) if symbol in cells else CELLS
            total += abs(j - i)
    return total
