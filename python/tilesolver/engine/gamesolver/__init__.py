from tilesolver.engine.gamesolver.heuristic import heuristic, moved_tile, neighbors
from tilesolver.engine.gamesolver.solver import SearchOutcome, SearchResult, Solver

__all__ = [
    "SearchOutcome",
    "SearchResult",
    "Solver",
    "heuristic",
    "moved_tile",
    "neighbors",
]
