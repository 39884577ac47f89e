"""Rich terminal frontend: grid tables, solve reports, and animated replay.

Uses the ``rich`` library for styled output.  The solver core never
imports this module; it only consumes grids and move lists.
"""

from __future__ import annotations

import logging
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilesolver.engine.gameplay import GamePlay, ReplayReport
from tilesolver.engine.gamesolver import SearchResult
from tilesolver.models.grid import Grid

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- grid rendering -----------------------------------------------------------


def render_grid(grid: Grid, highlight: int | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(grid.blank))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(grid.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == grid.blank:
                cells.append("[dim]·[/dim]")
            elif val == highlight:
                cells.append(f"[bold cyan]{val:>{width}}[/bold cyan]")
            elif grid.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def show_grid(grid: Grid, title: str) -> None:
    panel = Panel(
        Align.center(render_grid(grid)),
        title=f"[bold]{title}[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


# -- solve report -------------------------------------------------------------


def show_result(result: SearchResult) -> None:
    stats = Text()
    stats.append("  Outcome: ", style="dim")
    stats.append(result.outcome.value, style="bold green" if result.found else "bold red")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")
    stats.append("    Generated: ", style="dim")
    stats.append(str(result.generated), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.elapsed:.3f}s", style="bold yellow")

    body: list[Text] = [stats]
    if result.moves is not None:
        moves = Text()
        moves.append(f"  {len(result.moves)} moves: ", style="bold cyan")
        moves.append(" ".join(str(m) for m in result.moves) or "(already solved)")
        body.append(moves)

    console.print(Panel(Group(*body), title="[bold]A* Search[/bold]", border_style="cyan"))


# -- replay -------------------------------------------------------------------


def animate(grid: Grid, moves: list[int], delay: float = 0.15) -> ReplayReport:
    """Replay *moves* on *grid*, redrawing the grid after every slide."""
    game = GamePlay.from_grid(grid)
    total = len(moves)

    def draw(i: int, tile: int, current: GamePlay) -> None:
        console.clear()
        size = current.size
        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{total} ", style="bold cyan")
        progress.append(f"(tile {tile})", style="dim")

        panel = Panel(
            Align.center(render_grid(current.state.grid, highlight=tile)),
            title=f"[bold cyan]Auto-Solve  {size}×{size}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        if delay > 0:
            time.sleep(delay)

    report = game.replay(moves, on_step=draw)
    if report.solved:
        console.print(
            f"[bold green]Solved in {len(report.applied)} moves "
            f"({game.state.elapsed_time:.1f}s)![/bold green]"
        )
    else:
        console.print(
            f"[red]Replay ended unsolved ({len(report.skipped)} steps skipped).[/red]"
        )
    return report
