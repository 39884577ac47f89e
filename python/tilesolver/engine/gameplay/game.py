"""Applies solver output to a grid one tile at a time."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from tilesolver.engine.gamestate import GameState
from tilesolver.models.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class ReplayReport:
    applied: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    solved: bool = False


class GamePlay:
    """Owns the grid a move list is replayed against."""

    def __init__(self, grid: Grid) -> None:
        self.size = grid.size
        self.state = GameState(grid)

    @classmethod
    def from_grid(cls, grid: Grid) -> GamePlay:
        return cls(grid)

    # -- movement -------------------------------------------------------------

    def move_tile(self, tile: int) -> bool:
        """Slide *tile* into the blank if it is orthogonally adjacent.

        Returns True if the move was applied.  Unknown identifiers and the
        blank itself are rejected the same way as non-adjacent tiles.
        """
        grid = self.state.grid
        if not 0 <= tile < grid.blank:
            return False

        row, col = grid.position_of(tile)
        br, bc = grid.blank_pos
        if abs(row - br) + abs(col - bc) != 1:
            return False

        self.state.apply(grid.swap_with_blank(row, col))
        return True

    def replay(
        self,
        moves: Iterable[int],
        on_step: Callable[[int, int, GamePlay], None] | None = None,
    ) -> ReplayReport:
        """Apply *moves* in order, skipping any step that is not legal.

        A skipped step leaves the grid untouched and is logged as a
        warning.  *on_step* is called with ``(index, tile, self)`` after
        every applied move.
        """
        report = ReplayReport()
        for i, tile in enumerate(moves):
            if not self.move_tile(tile):
                logger.warning(
                    "Move %d (tile %d) is not adjacent to the blank; skipping.", i, tile
                )
                self.state.skip()
                report.skipped.append(tile)
                continue
            report.applied.append(tile)
            if on_step is not None:
                on_step(i, tile, self)
        report.solved = self.is_won
        return report

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
