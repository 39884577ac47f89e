"""Optimal A* solver for the N×N sliding-tile puzzle."""

from tilesolver.engine.gamesolver import SearchOutcome, SearchResult, Solver
from tilesolver.models.grid import Grid, InvalidGridError

__all__ = [
    "Grid",
    "InvalidGridError",
    "SearchOutcome",
    "SearchResult",
    "Solver",
]
