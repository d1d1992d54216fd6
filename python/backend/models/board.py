"""Board model for the agent block puzzle.

The board is a fixed 4×4 grid flattened row-major into 16 single-character
cells.  Letters are movable blocks, a space is an empty cell and ``*`` is
the agent.  A move swaps the agent with the neighbouring cell.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import StrEnum

SIZE = 4
CELLS = SIZE * SIZE
AGENT = "*"
BLANK = " "


class InvalidBoardError(ValueError):
    """Raised when a board fails validation at construction time."""


class Move(StrEnum):
    # Declaration order is the order successors are generated in.
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def inverse(self) -> Move:
        return _INVERSES[self]


_OFFSETS: dict[Move, tuple[int, int]] = {
    Move.LEFT: (0, -1),
    Move.UP: (-1, 0),
    Move.RIGHT: (0, 1),
    Move.DOWN: (1, 0),
}

_INVERSES: dict[Move, Move] = {
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
}


@dataclass(frozen=True)
class Board:
    """Immutable 16-cell puzzle snapshot.

    Build boards through :meth:`from_string`, which validates the layout.
    The constructor itself trusts its input so the search can create
    successors without re-checking them.
    """

    cells: tuple[str, ...]
    digest: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "digest",
            hashlib.sha256("".join(self.cells).encode()).hexdigest(),
        )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Create a board from a 16-character row-major string.

        Example::

            Board.from_string("a   *    b c    ")
        """
        if len(text) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} cells for a {SIZE}×{SIZE} board, "
                f"got {len(text)}."
            )
        agents = text.count(AGENT)
        if agents != 1:
            raise InvalidBoardError(
                f"Expected exactly one agent {AGENT!r}, got {agents}."
            )
        return cls(cells=tuple(text))

    # -- queries --------------------------------------------------------------

    @property
    def agent_index(self) -> int:
        return self.cells.index(AGENT)

    def rows(self) -> list[tuple[str, ...]]:
        return [self.cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def __str__(self) -> str:
        return "".join(self.cells)

    # -- movement -------------------------------------------------------------

    def apply_move(self, move: Move) -> Board | None:
        """Return the board after the agent swaps in *move*'s direction.

        Returns ``None`` if the agent would leave the grid.  ``self`` is
        left untouched.
        """
        index = self.agent_index
        row, col = divmod(index, SIZE)
        dr, dc = move.offset
        tr, tc = row + dr, col + dc

        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None

        target = tr * SIZE + tc
        cells = list(self.cells)
        cells[index], cells[target] = cells[target], cells[index]
        return Board(cells=tuple(cells))

    def move_to(self, other: Board) -> Move | None:
        """Return the single move that turns this board into *other*."""
        for move in Move:
            if self.apply_move(move) == other:
                return move
        return None
