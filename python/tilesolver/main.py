"""Sliding-tile puzzle solver.

Usage::

    tilesolver solve 1 2 0 3 4 5 6 7 8   # solve a 3×3 grid, row-major
    tilesolver shuffle -s 4 -m 30        # print a scrambled 4×4 grid
    tilesolver demo -s 3 --seed 7        # shuffle, solve, animate
"""

from __future__ import annotations

import math
import random
from typing import Optional

import typer
from rich.markup import escape

from tilesolver.engine.gamegenerator import GameGenerator
from tilesolver.engine.gamesolver import Solver
from tilesolver.frontend.cli import app as frontend
from tilesolver.models.grid import Grid, InvalidGridError

EXIT_INVALID = 1
EXIT_NO_SOLUTION = 2

DEFAULT_MAX_EXPANSIONS = 2_000_000
DEFAULT_DELAY = 0.15

app = typer.Typer(add_completion=False, help="Optimal A* solver for sliding-tile puzzles.")


# -- helpers ------------------------------------------------------------------


def _grid_from_args(tiles: list[int]) -> Grid:
    size = math.isqrt(len(tiles))
    if size * size != len(tiles):
        raise InvalidGridError(f"{len(tiles)} tiles do not form a square grid.")
    return Grid.from_flat(size, tiles)


def _search(grid: Grid, max_expansions: int) -> None:
    if not Solver.is_solvable(grid):
        frontend.console.print("[red]Grid fails the parity check: no solution.[/red]")
        raise typer.Exit(code=EXIT_NO_SOLUTION)
    result = Solver.search(grid, max_expansions=max_expansions)
    frontend.show_result(result)
    if result.moves is None:
        raise typer.Exit(code=EXIT_NO_SOLUTION)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log search details."),
) -> None:
    """Sliding-tile puzzle solver."""
    frontend.configure_logging(verbose)


# -- commands -----------------------------------------------------------------


@app.command()
def solve(
    tiles: list[int] = typer.Argument(
        ..., help="Tile identifiers in row-major order; N²-1 is the blank."
    ),
    max_expansions: int = typer.Option(
        DEFAULT_MAX_EXPANSIONS, "-e", "--max-expansions",
        min=1, envvar="TILESOLVER_MAX_EXPANSIONS",
        help="Give up after expanding this many states.",
    ),
) -> None:
    """Solve a grid and print the tiles to slide, in order."""
    try:
        grid = _grid_from_args(tiles)
    except InvalidGridError as exc:
        frontend.console.print(f"[red]Invalid grid:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID) from exc

    frontend.show_grid(grid, f"Start  {grid.size}×{grid.size}")
    _search(grid, max_expansions)


@app.command()
def shuffle(
    size: int = typer.Option(3, "-s", "--size", min=2, max=8, help="Grid size."),
    moves: int = typer.Option(30, "-m", "--moves", min=0, help="Random moves to apply."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
) -> None:
    """Print a grid scrambled by random legal moves from the goal."""
    grid, _ = GameGenerator.scramble(GameGenerator.solved(size), moves, random.Random(seed))
    frontend.show_grid(grid, f"Shuffled  {size}×{size}")
    frontend.console.print(" ".join(str(v) for v in grid.cells))


@app.command()
def demo(
    size: int = typer.Option(3, "-s", "--size", min=2, max=5, help="Grid size."),
    moves: int = typer.Option(30, "-m", "--moves", min=1, help="Random moves to apply."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed."),
    delay: float = typer.Option(
        DEFAULT_DELAY, "-d", "--delay", min=0.0, envvar="TILESOLVER_DELAY",
        help="Seconds between animated moves.",
    ),
    max_expansions: int = typer.Option(
        DEFAULT_MAX_EXPANSIONS, "-e", "--max-expansions",
        min=1, envvar="TILESOLVER_MAX_EXPANSIONS",
        help="Give up after expanding this many states.",
    ),
) -> None:
    """Shuffle a grid, solve it, and animate the solution."""
    grid = GameGenerator.generate(size, moves, seed)
    frontend.show_grid(grid, f"Shuffled  {size}×{size}")
    result = Solver.search(grid, max_expansions=max_expansions)
    frontend.show_result(result)
    if result.moves is None:
        raise typer.Exit(code=EXIT_NO_SOLUTION)
    frontend.animate(grid, result.moves, delay=delay)


if __name__ == "__main__":
    app()
