"""Shared helpers: a brute-force BFS reference and move replay."""

from __future__ import annotations

from collections import deque

import pytest

from tilesolver.engine.gameplay import GamePlay
from tilesolver.models.grid import Grid


def bfs_distances(size: int) -> dict[tuple[int, ...], int]:
    """Distance from the goal to every reachable state, by breadth-first search.

    Moves are reversible, so distance from the goal equals distance to it.
    """
    blank = size * size - 1
    goal = tuple(range(size * size))
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        state = queue.popleft()
        bi = state.index(blank)
        r, c = divmod(bi, size)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < size and 0 <= nc < size:
                ni = nr * size + nc
                nxt = list(state)
                nxt[bi], nxt[ni] = nxt[ni], nxt[bi]
                key = tuple(nxt)
                if key not in dist:
                    dist[key] = dist[state] + 1
                    queue.append(key)
    return dist


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    return bfs_distances(3)


def replay_strict(grid: Grid, moves: list[int]) -> Grid:
    """Apply *moves*, failing the test on the first illegal one."""
    game = GamePlay.from_grid(grid)
    for i, tile in enumerate(moves):
        assert game.move_tile(tile), (
            f"Move {i} (tile {tile}) was not adjacent to the blank in\n{game.state.grid}"
        )
    return game.state.grid


@pytest.fixture
def replay():
    return replay_strict
