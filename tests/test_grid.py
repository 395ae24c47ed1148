"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_engine.grid import CellType, Grid


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cells.shape == (20, 20)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)

    def test_all_cells_start_empty(self):
        grid = Grid(size=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get_use_xy(self):
        grid = Grid(size=5)
        grid.set(3, 1, CellType.SNAKE)
        assert grid.get(3, 1) == CellType.SNAKE
        # Backing array is row-major: cells[y, x].
        assert grid.cells[1, 3] == CellType.SNAKE

    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 4)
        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, 5)
        assert not grid.in_bounds(5, 0)

    def test_food_cell_counts_as_free(self):
        grid = Grid(size=4)
        assert grid.free_count() == 16
        grid.set(0, 0, CellType.SNAKE)
        grid.set(1, 1, CellType.FOOD)
        assert grid.free_count() == 15
        assert grid.is_free(1, 1)
        assert not grid.is_free(0, 0)

