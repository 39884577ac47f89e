"""Search primitives: Manhattan heuristic and legal-move expansion."""

from __future__ import annotations

from tilesolver.models.grid import Grid

# Offsets of the tile that slides into the blank, relative to the blank.
# The order is fixed: it decides which of several optimal paths is found.
_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),  # up
    (1, 0),   # down
    (0, -1),  # left
    (0, 1),   # right
)


def heuristic(grid: Grid) -> int:
    """Sum of Manhattan distances of every tile to its goal position.

    The blank is left out: a move shifts exactly one tile by one cell, so
    the estimate changes by at most 1 per move and never overestimates.
    """
    n = grid.size
    blank = grid.blank
    total = 0
    for index, tile in enumerate(grid.cells):
        if tile == blank:
            continue
        r, c = divmod(index, n)
        gr, gc = divmod(tile, n)
        total += abs(r - gr) + abs(c - gc)
    return total


def neighbors(grid: Grid) -> list[Grid]:
    """Return every grid reachable from *grid* with a single move."""
    n = grid.size
    cells = grid.cells
    try:
        bi = cells.index(grid.blank)
    except ValueError:
        raise RuntimeError(f"Grid has no blank tile ({grid.blank}): {cells}") from None
    br, bc = divmod(bi, n)

    out: list[Grid] = []
    for dr, dc in _OFFSETS:
        r, c = br + dr, bc + dc
        if 0 <= r < n and 0 <= c < n:
            ti = r * n + c
            swapped = list(cells)
            swapped[bi], swapped[ti] = swapped[ti], swapped[bi]
            out.append(Grid(size=n, cells=tuple(swapped)))
    return out


def moved_tile(before: Grid, after: Grid) -> int:
    """Identifier of the tile that slid between two consecutive grids."""
    changed = [
        tile
        for old, tile in zip(before.cells, after.cells)
        if old != tile and tile != after.blank
    ]
    if len(changed) == 1 and sum(a != b for a, b in zip(before.cells, after.cells)) == 2:
        (tr, tc), (br, bc) = before.position_of(changed[0]), before.blank_pos
        if abs(tr - br) + abs(tc - bc) == 1:
            return changed[0]
    raise ValueError(f"Grids are not one move apart:\n{before}\n--\n{after}")
