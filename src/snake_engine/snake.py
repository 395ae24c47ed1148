"""Directions and the snake body."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) deltas."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True if *a* and *b* point in exactly opposite directions."""
    return _OPPOSITES[a] is b


def step(cell: tuple[int, int], direction: Direction) -> tuple[int, int]:
    """Return the cell one step from *cell* in *direction*."""
    dx, dy = direction.value
    x, y = cell
    return x + dx, y + dy


class Snake:
    """A snake represented as an ordered deque of (x, y) segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Segments never
    repeat: overlapping itself is a collision, not a valid snake.
    """

    def __init__(self, cells: Iterable[tuple[int, int]]) -> None:
        self.body: deque[tuple[int, int]] = deque(
            (int(x), int(y)) for x, y in cells
        )
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        if len(set(self.body)) != len(self.body):
            raise ValueError("Snake cells must not overlap.")

    @classmethod
    def spawn(
        cls,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> Snake:
        """Lay out a straight snake trailing behind its head."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        return cls((head_x - dx * i, head_y - dy * i) for i in range(length))

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the next head position without moving."""
        return step(self.head, direction)

    def push_head(self, cell: tuple[int, int]) -> None:
        self.body.appendleft(cell)

    def pop_tail(self) -> tuple[int, int]:
        """Remove and return the tail cell."""
        return self.body.pop()

    def cells(self) -> tuple[tuple[int, int], ...]:
        return tuple(self.body)
