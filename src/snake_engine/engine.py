"""Tick-driven game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np

from snake_engine.config import GameConfig
from snake_engine.food import FoodSpawner
from snake_engine.grid import CellType, Grid
from snake_engine.scheduler import Scheduler
from snake_engine.snake import Direction, Snake, is_opposite

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    RUNNING = "running"
    GAME_OVER = "game_over"
    WON = "won"


class TickOutcome(str, enum.Enum):
    """What the most recent engine operation did."""

    MOVED = "moved"
    GREW = "grew"
    COLLIDED = "collided"
    IGNORED = "ignored"
    RESTARTED = "restarted"


def interval_ms(speed: int) -> float:
    """Tick interval in milliseconds for a speed in ticks per second."""
    return 1000.0 / speed


def next_speed(score: int, speed: int, config: GameConfig) -> int:
    """Return the speed after *score* was just reached."""
    if score % config.points_per_level == 0 and speed < config.max_speed:
        return min(speed + config.speed_increment, config.max_speed)
    return speed


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the game after an engine operation."""

    snake: tuple[Cell, ...]
    food: Cell | None
    score: int
    speed: int
    status: GameStatus
    tick: int
    outcome: TickOutcome

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def body(self) -> tuple[Cell, ...]:
        return self.snake[1:]

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.RUNNING

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "tick": self.tick,
            "score": self.score,
            "speed": self.speed,
            "status": self.status.value,
            "is_over": self.is_over,
            "outcome": self.outcome.value,
            "snake": [list(c) for c in self.snake],
            "food": list(self.food) if self.food is not None else None,
        }


@dataclass
class GameState:
    """Everything that changes while a game is played.

    A restart replaces the whole object rather than resetting fields.
    """

    grid: Grid
    snake: Snake
    food: FoodSpawner
    current_direction: Direction
    pending_direction: Direction
    score: int
    speed: int
    status: GameStatus = GameStatus.RUNNING
    tick: int = 0

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.RUNNING

    @classmethod
    def build(
        cls,
        config: GameConfig,
        snake: Iterable[Cell],
        direction: Direction,
        food: Cell | None = None,
        score: int = 0,
        speed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> GameState:
        """Lay out a game from explicit cells.

        With ``food=None`` the food is placed at random.
        """
        if score < 0:
            raise ValueError("score must be >= 0.")
        if speed is None:
            speed = config.initial_speed
        elif not config.initial_speed <= speed <= config.max_speed:
            raise ValueError(
                f"speed must be between {config.initial_speed} and "
                f"{config.max_speed}."
            )
        grid = Grid(config.grid_size)
        body = Snake(snake)
        for x, y in body.body:
            if not grid.in_bounds(x, y):
                raise ValueError(f"Snake cell {(x, y)} is outside the grid.")
            grid.set(x, y, CellType.SNAKE)

        spawner = FoodSpawner(grid, rng=rng)
        if food is None:
            spawner.place()
        else:
            spawner.put(*food)

        return cls(
            grid=grid,
            snake=body,
            food=spawner,
            current_direction=direction,
            pending_direction=direction,
            score=score,
            speed=speed,
            status=(
                GameStatus.WON if spawner.position is None
                else GameStatus.RUNNING
            ),
        )

    @classmethod
    def initial(
        cls, config: GameConfig, rng: np.random.Generator | None = None,
    ) -> GameState:
        """Fresh game: snake in the centre heading right."""
        centre = config.grid_size // 2
        snake = Snake.spawn(
            centre, centre, Direction.RIGHT, length=config.initial_length,
        )
        return cls.build(config, snake.cells(), Direction.RIGHT, rng=rng)


SnapshotListener = Callable[[Snapshot], object]


class GameEngine:
    """Single-snake, tick-driven game engine.

    The engine owns the game state and mutates it only through
    :meth:`advance_tick` and :meth:`set_direction`. An optional
    scheduler is told when to start, stop, or change its interval and
    calls :meth:`advance_tick` once per tick.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.scheduler = scheduler
        self._listeners: list[SnapshotListener] = []
        self._last_outcome = TickOutcome.RESTARTED
        if scheduler is not None:
            scheduler.set_callback(self.advance_tick)
        self.state: GameState
        self.restart()

    # -- read-only conveniences -------------------------------------------

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def speed(self) -> int:
        return self.state.speed

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def status(self) -> GameStatus:
        return self.state.status

    # -- observers --------------------------------------------------------

    def subscribe(self, listener: SnapshotListener) -> None:
        """Call *listener* with a snapshot after every state change."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- operations -------------------------------------------------------

    def set_direction(self, direction: Direction) -> None:
        """Buffer a direction for the next tick.

        Later calls overwrite earlier ones. Reversals onto the neck and
        any input after the game has ended are dropped.
        """
        state = self.state
        if state.is_over:
            return
        if is_opposite(direction, state.current_direction):
            return
        state.pending_direction = direction

    def advance_tick(self) -> Snapshot:
        """Advance the game by one tick and return the new snapshot."""
        state = self.state
        if state.is_over:
            return self._snapshot(TickOutcome.IGNORED)

        state.current_direction = state.pending_direction
        new_x, new_y = state.snake.next_head(state.current_direction)

        # The tail has not moved yet, so stepping onto it is fatal too.
        if (
            not state.grid.in_bounds(new_x, new_y)
            or state.grid.get(new_x, new_y) == CellType.SNAKE
        ):
            state.tick += 1
            self._end_game(GameStatus.GAME_OVER)
            return self._emit(TickOutcome.COLLIDED)

        ate = (new_x, new_y) == state.food.position
        state.snake.push_head((new_x, new_y))
        state.grid.set(new_x, new_y, CellType.SNAKE)

        if ate:
            state.score += 1
            placed = state.food.place()
            speed = next_speed(state.score, state.speed, self.config)
            if speed != state.speed:
                state.speed = speed
                logger.debug(
                    "Speed raised to %d at score %d.", speed, state.score,
                )
                if self.scheduler is not None:
                    self.scheduler.set_interval(interval_ms(speed))
            outcome = TickOutcome.GREW
        else:
            tail_x, tail_y = state.snake.pop_tail()
            state.grid.set(tail_x, tail_y, CellType.EMPTY)
            placed = state.food.position
            outcome = TickOutcome.MOVED

        state.tick += 1
        if placed is None:
            self._end_game(GameStatus.WON)
        return self._emit(outcome)

    def restart(self) -> Snapshot:
        """Discard the current game and start a fresh one."""
        self.state = GameState.initial(self.config, self.rng)
        if self.scheduler is not None:
            self.scheduler.start(self.config.initial_interval_ms)
        logger.info("Game started.")
        return self._emit(TickOutcome.RESTARTED)

    def snapshot(self) -> Snapshot:
        """Return the current snapshot without changing anything."""
        return self._snapshot(self._last_outcome)

    # -- internals --------------------------------------------------------

    def _end_game(self, status: GameStatus) -> None:
        state = self.state
        state.status = status
        if self.scheduler is not None:
            self.scheduler.stop()
        if status == GameStatus.WON:
            logger.info(
                "Board full at tick %d with score %d.", state.tick, state.score,
            )
        else:
            logger.info(
                "Snake died at tick %d with score %d.", state.tick, state.score,
            )

    def _snapshot(self, outcome: TickOutcome) -> Snapshot:
        state = self.state
        return Snapshot(
            snake=state.snake.cells(),
            food=state.food.position,
            score=state.score,
            speed=state.speed,
            status=state.status,
            tick=state.tick,
            outcome=outcome,
        )

    def _emit(self, outcome: TickOutcome) -> Snapshot:
        self._last_outcome = outcome
        snap = self._snapshot(outcome)
        for listener in list(self._listeners):
            listener(snap)
        return snap
