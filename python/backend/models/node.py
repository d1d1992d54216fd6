"""Search tree nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from backend.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board snapshot plus a link to the node it was reached from.

    Links only ever point toward the root, so the tree cannot contain
    cycles.  Siblings share their parent object.
    """

    board: Board
    parent: SearchNode | None = None
    digest: str = field(init=False)
    depth: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "digest", self.board.digest)
        object.__setattr__(
            self, "depth", 0 if self.parent is None else self.parent.depth + 1
        )

    def ancestors(self) -> Iterator[SearchNode]:
        """Yield the parent, grandparent, ... up to and including the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent
