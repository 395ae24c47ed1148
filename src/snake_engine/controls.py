"""Keyboard bindings that drive the engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from snake_engine.snake import Direction

if TYPE_CHECKING:
    from snake_engine.engine import GameEngine

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Direction] = {
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
}

CONFIRM_KEYS: frozenset[str] = frozenset({"enter", "return"})


def direction_for_key(key: str) -> Direction | None:
    """Map a key name (arrow or WASD, any case) to a direction."""
    return KEY_BINDINGS.get(key.strip().lower())


class KeyboardController:
    """Translates key presses into engine calls."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def handle_key(self, key: str) -> bool:
        """Handle one key press. Returns True if the key was used."""
        name = key.strip().lower()
        if self.engine.is_over:
            if name in CONFIRM_KEYS:
                self.engine.restart()
                return True
            return False

        direction = KEY_BINDINGS.get(name)
        if direction is None:
            return False
        self.engine.set_direction(direction)
        return True

    def press_restart(self) -> None:
        """Restart button: starts a new game whatever the current state."""
        logger.debug("Restart requested.")
        self.engine.restart()
