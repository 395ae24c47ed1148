"""Shared fixtures for engine tests."""

from __future__ import annotations

import pytest

from snake_engine.config import GameConfig
from snake_engine.engine import GameEngine
from snake_engine.scheduler import ManualScheduler


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def engine(scheduler) -> GameEngine:
    return GameEngine(GameConfig(), scheduler=scheduler, seed=0)
