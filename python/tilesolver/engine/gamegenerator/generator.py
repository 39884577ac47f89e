"""Generates solvable sliding-tile grids."""

from __future__ import annotations

import random

from tilesolver.models.grid import Grid


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved(size: int) -> Grid:
        """Return the goal-state grid (identifiers in order, blank bottom-right)."""
        return Grid.goal(size)

    @staticmethod
    def scramble(
        grid: Grid, num_moves: int, rng: random.Random | None = None
    ) -> tuple[Grid, list[int]]:
        """Apply *num_moves* random legal moves to *grid*.

        Never undoes the previous move straight away.  Returns the new grid
        and the identifiers of the tiles that were slid, in order.
        """
        rng = rng or random.Random()
        prev_pos: tuple[int, int] | None = None
        moved: list[int] = []

        for _ in range(num_moves):
            neighbors = GameGenerator._get_neighbors(grid)
            if prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = grid.blank_pos
            moved.append(grid.get_tile(*target))
            grid = grid.swap_with_blank(*target)
        return grid, moved

    @staticmethod
    def generate(size: int, num_moves: int | None = None, seed: int | None = None) -> Grid:
        """Return a random *solvable* grid of the given size.

        Defaults to ``size * size * 100`` shuffling moves.  A walk that lands
        back on the goal (every 12th move on a 2×2 grid) gets one extra move.
        """
        if num_moves is None:
            num_moves = size * size * 100
        rng = random.Random(seed)
        grid, _ = GameGenerator.scramble(GameGenerator.solved(size), num_moves, rng)
        # Ensure the grid is not already solved
        if num_moves > 0 and grid.is_solved():
            grid, _ = GameGenerator.scramble(grid, 1, rng)
        return grid

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(grid: Grid) -> list[tuple[int, int]]:
        br, bc = grid.blank_pos
        neighbors: list[tuple[int, int]] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < grid.size and 0 <= nc < grid.size:
                neighbors.append((nr, nc))
        return neighbors
