"""Sliding-tile puzzle solver (A* with the Manhattan heuristic)."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from time import perf_counter

from tilesolver.engine.gamesolver.heuristic import heuristic, moved_tile, neighbors
from tilesolver.models.grid import Grid

logger = logging.getLogger(__name__)


class SearchOutcome(StrEnum):
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"
    BUDGET_EXCEEDED = "budget_exceeded"
    CANCELLED = "cancelled"


@dataclass
class SearchResult:
    """Outcome of one A* run plus a few counters for reporting."""

    outcome: SearchOutcome
    moves: list[int] | None = None
    expanded: int = 0
    generated: int = 0
    elapsed: float = 0.0

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.GOAL_FOUND


@dataclass(order=True)
class _Node:
    f: int
    seq: int
    g: int = field(compare=False)
    grid: Grid = field(compare=False)


class Solver:
    """Stateless A* solver; all methods are static."""

    @staticmethod
    def solve(
        grid: Grid | Sequence[Sequence[int]],
        max_expansions: int | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> list[int] | None:
        """Return the tile identifiers to slide, in order, or ``None``.

        ``None`` means no path was found: the board fails the parity
        check, the search was exhausted, the expansion budget ran out, or
        *should_cancel* returned True.  Malformed input raises
        :class:`~tilesolver.models.grid.InvalidGridError` instead.
        """
        grid = Solver._coerce(grid)
        if grid.is_solved():
            return []

        if not Solver.is_solvable(grid):
            logger.info("Grid fails the parity check; no solution exists.")
            return None

        return Solver.search(grid, max_expansions, should_cancel).moves

    @staticmethod
    def hint(grid: Grid | Sequence[Sequence[int]]) -> int | None:
        """Return the single best next tile to slide, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(grid)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(grid: Grid | Sequence[Sequence[int]]) -> bool:
        """Return True if *grid* can reach the goal layout.

        Odd sizes need an even inversion count; even sizes need the
        inversion count plus the blank's row (counted from 1 at the
        bottom) to be odd.
        """
        grid = Solver._coerce(grid)
        tiles = [v for v in grid.cells if v != grid.blank]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        if grid.size % 2 == 1:
            return inversions % 2 == 0
        row_from_bottom = grid.size - grid.blank_pos[0]
        return (inversions + row_from_bottom) % 2 == 1

    @staticmethod
    def search(
        grid: Grid | Sequence[Sequence[int]],
        max_expansions: int | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> SearchResult:
        """Run A* from *grid* to the goal layout of the same size.

        Stale heap entries are discarded by a closed-set check at pop
        time, so the heap never needs a decrease-key operation.
        """
        start = Solver._coerce(grid)
        goal_key = Grid.goal(start.size).key
        t0 = perf_counter()
        logger.debug("A* search started on %d×%d grid %s", start.size, start.size, start.key)

        counter = itertools.count()
        open_heap: list[_Node] = [_Node(heuristic(start), next(counter), 0, start)]
        best_g: dict[tuple[int, ...], int] = {start.key: 0}
        came_from: dict[tuple[int, ...], Grid] = {}
        closed: set[tuple[int, ...]] = set()
        generated = 0

        def finish(outcome: SearchOutcome, moves: list[int] | None = None) -> SearchResult:
            result = SearchResult(
                outcome=outcome,
                moves=moves,
                expanded=len(closed),
                generated=generated,
                elapsed=perf_counter() - t0,
            )
            logger.debug(
                "A* search finished: %s after %d expansions (%.3fs)",
                outcome.value, result.expanded, result.elapsed,
            )
            return result

        while open_heap:
            node = heapq.heappop(open_heap)
            key = node.grid.key

            if key == goal_key:
                return finish(SearchOutcome.GOAL_FOUND, Solver._reconstruct(came_from, node.grid))
            if key in closed:
                continue

            if should_cancel is not None and should_cancel():
                return finish(SearchOutcome.CANCELLED)
            if max_expansions is not None and len(closed) >= max_expansions:
                return finish(SearchOutcome.BUDGET_EXCEEDED)

            closed.add(key)

            for nxt in neighbors(node.grid):
                generated += 1
                nkey = nxt.key
                g = node.g + 1
                if nkey in best_g and g >= best_g[nkey]:
                    continue
                best_g[nkey] = g
                came_from[nkey] = node.grid
                if nkey not in closed:
                    heapq.heappush(open_heap, _Node(g + heuristic(nxt), next(counter), g, nxt))

        logger.info("Open set exhausted after %d expansions; no solution.", len(closed))
        return finish(SearchOutcome.EXHAUSTED)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _coerce(grid: Grid | Sequence[Sequence[int]]) -> Grid:
        if isinstance(grid, Grid):
            return grid
        return Grid.from_rows(grid)

    @staticmethod
    def _reconstruct(came_from: dict[tuple[int, ...], Grid], goal: Grid) -> list[int]:
        moves: list[int] = []
        current = goal
        while current.key in came_from:
            previous = came_from[current.key]
            moves.append(moved_tile(previous, current))
            current = previous
        moves.reverse()
        return moves
