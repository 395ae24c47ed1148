"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_engine.grid import CellType

if TYPE_CHECKING:
    from snake_engine.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on the grid.

    Cells are drawn uniformly at random and redrawn while they land on
    the snake. Uses a NumPy ``Generator`` so placement is reproducible
    for a given seed.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    def place(self) -> tuple[int, int] | None:
        """Move the food to a random free cell.

        Returns the new position, or ``None`` if the snake covers the
        whole board.
        """
        self._clear()
        if self.grid.free_count() == 0:
            logger.warning("No free cells available for food placement.")
            return None

        size = self.grid.size
        while True:
            x, y = (int(v) for v in self.rng.integers(0, size, size=2))
            if self.grid.is_free(x, y):
                break

        self.put(x, y)
        return self.position

    def put(self, x: int, y: int) -> None:
        """Place the food at an explicit cell."""
        if not self.grid.in_bounds(x, y):
            raise ValueError(f"Food cell {(x, y)} is outside the grid.")
        if not self.grid.is_free(x, y):
            raise ValueError(f"Food cell {(x, y)} is occupied by the snake.")
        self._clear()
        self.grid.set(x, y, CellType.FOOD)
        self.position = (x, y)

    def _clear(self) -> None:
        if self.position is None:
            return
        x, y = self.position
        # The head may already have moved onto the eaten food.
        if self.grid.get(x, y) == CellType.FOOD:
            self.grid.set(x, y, CellType.EMPTY)
        self.position = None

