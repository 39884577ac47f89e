"""Grid model: construction, validation, and value semantics."""

from __future__ import annotations

import pytest

from tilesolver.models.grid import Grid, InvalidGridError


def test_goal_layout() -> None:
    grid = Grid.goal(3)
    assert grid.rows() == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]
    assert grid.blank == 8
    assert grid.blank_pos == (2, 2)
    assert grid.is_solved()


def test_from_rows_matches_from_flat() -> None:
    rows = [[1, 2, 0], [3, 4, 5], [6, 7, 8]]
    assert Grid.from_rows(rows) == Grid.from_flat(3, [1, 2, 0, 3, 4, 5, 6, 7, 8])


def test_equal_content_means_equal_key() -> None:
    a = Grid.from_rows([[0, 1], [3, 2]])
    b = Grid.from_flat(2, (0, 1, 3, 2))
    assert a is not b
    assert a.key == b.key
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "rows",
    [
        [[0, 1, 2], [3, 4], [5, 6, 7]],  # ragged
        [[0, 1, 2], [3, 4, 5]],  # not square
        [[0, 0], [1, 3]],  # duplicate
        [[0, 1], [2, 4]],  # out of range
        [[0]],  # too small
        [],
        [[0, 1], [2.7, 3]],  # float tile
        [[0, 1], [2.0, 3]],  # integral float
        [["0", "1"], ["2", "3"]],  # numeric strings
        [[False, True], [2, 3]],  # bools
        [1, 2],  # rows are not sequences
        ["01", "23"],  # rows are strings
        5,  # not a sequence at all
    ],
    ids=[
        "ragged", "rectangular", "duplicate", "out-of-range", "1x1", "empty",
        "float", "integral-float", "strings", "bools", "flat-rows", "string-rows",
        "scalar",
    ],
)
def test_invalid_grids_are_rejected(rows: list[list[int]]) -> None:
    with pytest.raises(InvalidGridError):
        Grid.from_rows(rows)


def test_invalid_grid_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Grid.from_flat(3, [0, 1, 2])


def test_non_integer_tiles_are_rejected() -> None:
    with pytest.raises(InvalidGridError):
        Grid.from_flat(2, [0, 1, "x", 3])


def test_swap_with_blank_returns_new_grid() -> None:
    grid = Grid.goal(3)
    moved = grid.swap_with_blank(2, 1)
    assert moved.rows() == [[0, 1, 2], [3, 4, 5], [6, 8, 7]]
    assert grid.is_solved()
    assert moved.blank_pos == (2, 1)


def test_is_tile_correct() -> None:
    grid = Grid.from_rows([[1, 0, 2], [3, 4, 5], [6, 7, 8]])
    assert not grid.is_tile_correct(0, 0)
    assert grid.is_tile_correct(0, 2)


def test_str_marks_blank() -> None:
    assert str(Grid.goal(2)) == "0 1\n2 ."


def test_from_flat_does_not_convert_tiles() -> None:
    with pytest.raises(InvalidGridError):
        Grid.from_flat(2, ["0", "1", "2", "3"])
    with pytest.raises(InvalidGridError):
        Grid.from_flat(2, [0, 1, 2, 3.0])


def test_list_cells_are_stored_as_tuple() -> None:
    grid = Grid(size=2, cells=[0, 1, 3, 2])
    assert grid.cells == (0, 1, 3, 2)
    assert grid == Grid.from_flat(2, (0, 1, 3, 2))
    assert hash(grid.key) == hash((0, 1, 3, 2))


def test_non_integer_size_is_rejected() -> None:
    with pytest.raises(InvalidGridError):
        Grid(size=2.0, cells=(0, 1, 2, 3))
