#!/usr/bin/env python3
"""Agent Block Puzzle Solver.

Usage::

    python main.py                          # solve the default puzzle (astar)
    python main.py -s bfs -f rich           # breadth-first, Rich output
    python main.py --scramble 30 --seed 7   # solve a random walk away from the goal
    python main.py --bench 1000             # time 1000 searches
"""

import importlib
import logging
import sys
from collections import Counter
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.benchmark import Timer, benchmark  # noqa: E402
from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver, SolverConfig, Strategy  # noqa: E402
from backend.models.board import Board, InvalidBoardError  # noqa: E402

#                "1234567890123456"
DEFAULT_START = "a   *    b c    "
DEFAULT_GOAL = "abc*            "


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_board(text: str, name: str) -> Board:
    try:
        return Board.from_string(text)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint=f"--{name}") from exc


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: str = typer.Option(
        DEFAULT_START, "--start",
        help="16-character start board, row-major ('*' agent, ' ' blank).",
    ),
    goal: str = typer.Option(
        DEFAULT_GOAL, "--goal",
        help="16-character goal board.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.BEST_FIRST, "-s", "--strategy",
        help="Search strategy.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output renderer.",
    ),
    visited: bool = typer.Option(
        False, "--visited",
        help="Skip boards already reached through any branch.",
    ),
    max_iterations: Optional[int] = typer.Option(
        None, "--max-iterations",
        min=1,
        help="Give up after expanding this many nodes.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Ignore --start and scramble the goal with this many moves.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    bench: Optional[int] = typer.Option(
        None, "--bench",
        min=1,
        help="Run the search this many times and report the elapsed time.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Agent Block Puzzle Solver."""
    _setup_logging(verbose)

    goal_board = _parse_board(goal, "goal")
    if scramble is not None:
        start_board = GameGenerator.scramble(goal_board, scramble, seed)
    else:
        start_board = _parse_board(start, "start")
        if Counter(start_board.cells) != Counter(goal_board.cells):
            raise typer.BadParameter(
                "Start and goal must hold the same blocks.", param_hint="--start"
            )

    solver = Solver(SolverConfig(strategy, visited, max_iterations))
    mod = importlib.import_module(_RUNNERS[frontend])

    if bench is not None:
        elapsed = benchmark(lambda: solver.solve(start_board, goal_board), bench)
        mod.show_benchmark(bench, elapsed)
        return

    with Timer() as timer:
        finish = solver.solve(start_board, goal_board)
    mod.show_solution(finish, goal_board, solver.stats, timer.elapsed)

    if finish is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
