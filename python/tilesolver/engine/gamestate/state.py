"""Tracks the state of a solution replay in progress."""

from __future__ import annotations

import time

from tilesolver.models.grid import Grid


class GameState:
    """Holds the current grid, move and skip counters, and elapsed time."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.moves: int = 0
        self.skipped: int = 0
        self._start_time: float = time.time()

    @property
    def elapsed_time(self) -> float:
        return time.time() - self._start_time

    def apply(self, grid: Grid) -> None:
        self.grid = grid
        self.moves += 1

    def skip(self) -> None:
        self.skipped += 1

    @property
    def is_solved(self) -> bool:
        return self.grid.is_solved()
