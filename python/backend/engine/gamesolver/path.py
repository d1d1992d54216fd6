"""Turn a terminal search node back into a start-to-goal sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.models.board import Board, Move
from backend.models.node import SearchNode


def reconstruct(node: SearchNode) -> Iterator[Board]:
    """Return a one-shot iterator over the boards from the root to *node*.

    Call again with the same node to iterate a second time.
    """
    boards = [node.board]
    boards.extend(ancestor.board for ancestor in node.ancestors())
    return reversed(boards)


def moves_of(boards: Iterable[Board]) -> list[Move]:
    """Return the agent move between each consecutive pair of *boards*."""
    moves: list[Move] = []
    previous: Board | None = None
    for i, board in enumerate(boards):
        if previous is not None:
            move = previous.move_to(board)
            if move is None:
                raise ValueError(
                    f"Boards {i - 1} and {i} are not one agent move apart: "
                    f"{str(previous)!r} -> {str(board)!r}"
                )
            moves.append(move)
        previous = board
    return moves
