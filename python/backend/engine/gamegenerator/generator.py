"""Generates start boards that are reachable from a goal board."""

from __future__ import annotations

import random

from backend.models.board import Board, Move


class GameGenerator:
    """Builds puzzles by walking the agent away from a known board."""

    @staticmethod
    def scramble(board: Board, steps: int, seed: int | None = None) -> Board:
        """Return *board* after *steps* random agent moves.

        The walk never immediately undoes its previous move unless that is
        the only move left.  *board* is not modified.
        """
        rng = random.Random(seed)
        previous: Move | None = None

        for _ in range(steps):
            options = [
                (move, nxt)
                for move in Move
                if (nxt := board.apply_move(move)) is not None
            ]
            if previous is not None and len(options) > 1:
                options = [o for o in options if o[0] is not previous.inverse]
            previous, board = rng.choice(options)

        return board
