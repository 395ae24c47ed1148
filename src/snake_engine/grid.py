"""Occupancy grid for the snake board."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed square board.

    The grid mirrors the snake and food so occupancy checks are O(1).
    Coordinates are (x, y); the backing array is indexed ``cells[y, x]``.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def is_free(self, x: int, y: int) -> bool:
        return self.cells[y, x] != CellType.SNAKE

    def free_count(self) -> int:
        """Number of cells not covered by the snake."""
        return int(np.count_nonzero(self.cells != CellType.SNAKE))

