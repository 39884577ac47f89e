"""Grid model for the sliding-tile puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class InvalidGridError(ValueError):
    """Raised when a grid is not a square permutation of ``0..N²-1``."""


@dataclass(frozen=True)
class Grid:
    """Immutable N×N arrangement of tile identifiers.

    Identifiers run from ``0`` to ``N²-1``; the largest one is the blank.
    In the goal layout identifier ``k`` sits at row ``k // N``, column
    ``k % N``, so the blank ends up in the bottom-right corner.

    Cells are stored row-major in a flat tuple.  Any move produces a new
    grid, which keeps states referenced by search bookkeeping stable.
    """

    size: int
    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        if not _is_int(self.size) or self.size < 2:
            raise InvalidGridError(
                f"Grid size must be an integer of at least 2, got {self.size!r}."
            )
        if not isinstance(self.cells, tuple):
            try:
                object.__setattr__(self, "cells", tuple(self.cells))
            except TypeError as exc:
                raise InvalidGridError(f"Tiles must be a sequence: {exc}") from exc
        expected = self.size * self.size
        if len(self.cells) != expected:
            raise InvalidGridError(
                f"Expected {expected} tiles for a {self.size}×{self.size} grid, "
                f"got {len(self.cells)}."
            )
        bad = [v for v in self.cells if not _is_int(v)]
        if bad:
            raise InvalidGridError(f"Tiles must be integers, got {bad!r}.")
        if sorted(self.cells) != list(range(expected)):
            raise InvalidGridError(
                f"Tiles must be a permutation of 0..{expected - 1}, got {list(self.cells)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Grid:
        """Create a grid from a flat row-major tile list.

        Example::

            Grid.from_flat(3, [1, 2, 0, 3, 4, 5, 6, 7, 8])
        """
        try:
            cells = tuple(flat)
        except TypeError as exc:
            raise InvalidGridError(f"Tiles must be a sequence: {exc}") from exc
        return cls(size=size, cells=cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Create a grid from a list of rows, rejecting ragged input."""
        if not _is_row(rows):
            raise InvalidGridError(f"Grid must be a sequence of rows, got {rows!r}.")
        size = len(rows)
        for r, row in enumerate(rows):
            if not _is_row(row):
                raise InvalidGridError(f"Row {r} is not a sequence of tiles: {row!r}.")
            if len(row) != size:
                raise InvalidGridError(
                    f"Grid must be square: row {r} has {len(row)} tiles, expected {size}."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def goal(cls, size: int) -> Grid:
        """Return the canonical solved layout for *size*."""
        return cls(size=size, cells=tuple(range(size * size)))

    # -- queries --------------------------------------------------------------

    @property
    def blank(self) -> int:
        return self.size * self.size - 1

    @property
    def key(self) -> tuple[int, ...]:
        """Canonical content key used wherever grids are compared or stored."""
        return self.cells

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position_of(self.blank)

    def position_of(self, tile: int) -> tuple[int, int]:
        try:
            index = self.cells.index(tile)
        except ValueError:
            raise InvalidGridError(f"Tile {tile} is not on the grid.") from None
        return divmod(index, self.size)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * self.size + col]

    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.cells[r * n : (r + 1) * n]) for r in range(n)]

    def is_solved(self) -> bool:
        return all(v == i for i, v in enumerate(self.cells))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.get_tile(row, col) == row * self.size + col

    # -- transitions ----------------------------------------------------------

    def swap_with_blank(self, row: int, col: int) -> Grid:
        """Return a new grid with the tile at (row, col) slid into the blank.

        The caller is responsible for checking adjacency.
        """
        br, bc = self.blank_pos
        cells = list(self.cells)
        bi, ti = br * self.size + bc, row * self.size + col
        cells[bi], cells[ti] = cells[ti], cells[bi]
        return Grid(size=self.size, cells=tuple(cells))

    def __str__(self) -> str:
        width = len(str(self.blank))
        lines = []
        for row in self.rows():
            lines.append(
                " ".join("." * width if v == self.blank else f"{v:>{width}}" for v in row)
            )
        return "\n".join(lines)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_row(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
