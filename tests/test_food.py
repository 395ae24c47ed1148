"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from snake_engine.food import FoodSpawner
from snake_engine.grid import CellType, Grid


class TestFoodPlacement:
    def test_place_marks_grid(self):
        grid = Grid(size=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(42))
        x, y = spawner.place()
        assert grid.get(x, y) == CellType.FOOD
        assert spawner.position == (x, y)

    def test_replace_clears_previous_cell(self):
        grid = Grid(size=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        spawner.put(0, 0)
        spawner.place()
        assert np.count_nonzero(grid.cells == CellType.FOOD) == 1

    def test_never_lands_on_snake(self):
        grid = Grid(size=4)
        grid.cells[:] = CellType.SNAKE
        grid.set(2, 3, CellType.EMPTY)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(7))
        for _ in range(20):
            assert spawner.place() == (2, 3)

    def test_full_board_returns_none(self):
        grid = Grid(size=4)
        grid.cells[:] = CellType.SNAKE
        spawner = FoodSpawner(grid)
        assert spawner.place() is None
        assert spawner.position is None

    def test_eaten_food_cell_is_not_cleared(self):
        grid = Grid(size=5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(1))
        spawner.put(2, 2)
        grid.set(2, 2, CellType.SNAKE)  # head moved onto the food
        spawner.place()
        assert grid.get(2, 2) == CellType.SNAKE

    def test_deterministic(self):
        assert self._positions(42) == self._positions(42)

    def test_different_seeds(self):
        assert self._positions(1) != self._positions(2)

    @staticmethod
    def _positions(seed: int) -> list:
        grid = Grid(size=10)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(seed))
        return [spawner.place() for _ in range(5)]


class TestFoodPut:
    def test_put_outside_grid(self):
        spawner = FoodSpawner(Grid(size=5))
        with pytest.raises(ValueError, match="outside"):
            spawner.put(5, 0)

    def test_put_on_snake(self):
        grid = Grid(size=5)
        grid.set(1, 1, CellType.SNAKE)
        spawner = FoodSpawner(grid)
        with pytest.raises(ValueError, match="occupied"):
            spawner.put(1, 1)

