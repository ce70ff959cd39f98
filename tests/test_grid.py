import random

import pytest

from nokia_snake.grid import Direction, GridModel


def test_tile_count_is_floor_of_surface_over_tile():
    assert GridModel(400, 20).tile_count == 20
    assert GridModel(419, 20).tile_count == 20
    assert GridModel(420, 20).tile_count == 21


def test_in_bounds_edges():
    grid = GridModel(400, 20)
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((19, 19))
    assert not grid.in_bounds((20, 5))
    assert not grid.in_bounds((5, -1))
    assert not grid.in_bounds((-1, 0))


def test_center_is_start_cell_on_default_grid():
    assert GridModel(400, 20).center == (10, 10)


def test_rejects_grid_without_tiles():
    with pytest.raises(ValueError):
        GridModel(10, 20)
    with pytest.raises(ValueError):
        GridModel(400, 0)


def test_random_cell_stays_in_bounds():
    grid = GridModel(100, 20)
    rng = random.Random(1)
    for _ in range(200):
        assert grid.in_bounds(grid.random_cell(rng))


def test_cells_enumerates_whole_board():
    cells = list(GridModel(60, 20).cells())
    assert len(cells) == 9
    assert len(set(cells)) == 9


def test_direction_opposites():
    assert Direction.RIGHT.opposite is Direction.LEFT
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.NONE.opposite is Direction.NONE
    assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
