"""Snake engine — tick-driven game state for a grid snake game."""

from snake_engine.config import GameConfig
from snake_engine.engine import (
    GameEngine,
    GameState,
    GameStatus,
    Snapshot,
    TickOutcome,
)
from snake_engine.grid import Grid
from snake_engine.scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from snake_engine.snake import Direction, Snake, is_opposite

__all__ = [
    "AsyncioScheduler",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameState",
    "GameStatus",
    "Grid",
    "ManualScheduler",
    "Scheduler",
    "Snake",
    "Snapshot",
    "TickOutcome",
    "is_opposite",
]
