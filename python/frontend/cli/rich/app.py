"""Rich terminal frontend: tables, colours and panels.

Uses the ``rich`` library for styled output while showing the same
information as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SolverStats, moves_of, reconstruct
from backend.models.board import AGENT, BLANK, SIZE, Board
from backend.models.node import SearchNode

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Board | None = None) -> Table:
    """Return a Rich Table for *board*; cells already matching *goal* are green."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif val == AGENT:
                cells.append(f"[bold yellow]{val}[/bold yellow]")
            elif goal is not None and goal.cells[r * SIZE + c] == val:
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _stats_text(stats: SolverStats) -> Text:
    text = Text()
    text.append("  Expanded: ", style="dim")
    text.append(str(stats.iterations), style="bold yellow")
    text.append("    Generated: ", style="dim")
    text.append(str(stats.generated), style="bold yellow")
    text.append("    Pruned: ", style="dim")
    text.append(str(stats.pruned), style="bold yellow")
    return text


# -- solution output ----------------------------------------------------------


def show_solution(
    node: SearchNode | None,
    goal: Board,
    stats: SolverStats,
    elapsed: float,
) -> None:
    if node is None:
        panel = Panel(
            Group(Align.center(Text("No solution found.", style="bold red")),
                  Align.center(_stats_text(stats))),
            title="[bold red]Failed[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        return

    boards = list(reconstruct(node))
    moves = moves_of(boards)

    steps = []
    for i, board in enumerate(boards):
        label = "start" if i == 0 else f"{i}. {moves[i - 1].value}"
        steps.append(Group(Text(label, style="dim"), render_board(board, goal)))

    summary = Text()
    summary.append(f"  Solved in {len(moves)} moves ", style="bold green")
    summary.append(f"({elapsed * 1000:.1f}ms)", style="dim")

    panel = Panel(
        Group(Columns(steps, padding=(1, 2)), Text(""), summary, _stats_text(stats)),
        title="[bold cyan]Finish![/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(panel)


def show_benchmark(repeat: int, elapsed: float) -> None:
    text = Text()
    text.append("  Time taken: ", style="dim")
    text.append(f"{elapsed * 1000:.1f}ms", style="bold yellow")
    text.append(f" for {repeat} runs ", style="dim")
    text.append(f"({elapsed * 1000 / repeat:.3f}ms each)", style="dim")
    console.print(text)
