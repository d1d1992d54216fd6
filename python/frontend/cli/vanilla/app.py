"""Vanilla terminal frontend, plain ``print`` output with no dependencies."""

from __future__ import annotations

from backend.engine.gamesolver import SolverStats, moves_of, reconstruct
from backend.models.board import Board
from backend.models.node import SearchNode


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the board as four ``|a, b, ...|`` rows."""
    return "\n".join(
        "|" + "".join(f"{cell}, " for cell in row) + "|" for row in board.rows()
    )


# -- solution output ----------------------------------------------------------


def show_solution(
    node: SearchNode | None,
    goal: Board,
    stats: SolverStats,
    elapsed: float,
) -> None:
    if node is None:
        print("Failed")
        print(f"  {stats}")
        return

    boards = list(reconstruct(node))
    moves = moves_of(boards)

    print("Finish!")
    for i, board in enumerate(boards):
        if i:
            print(f"  {i}. {moves[i - 1].value}")
        print(render_board(board))
        print()
    print(f"Solved in {len(moves)} moves ({elapsed * 1000:.1f}ms)")
    print(f"  {stats}")


def show_benchmark(repeat: int, elapsed: float) -> None:
    print(f"Time taken: {elapsed * 1000:.1f}ms for {repeat} runs "
          f"({elapsed * 1000 / repeat:.3f}ms each)")
