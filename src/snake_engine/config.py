"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size and speed progression rules.

    Supports JSON serialization so a run can be reproduced.
    """

    # Board
    grid_size: int = 20
    initial_length: int = 3

    # Speed, in ticks per second
    initial_speed: int = 10
    speed_increment: int = 2
    max_speed: int = 30
    points_per_level: int = 5

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        # The snake spawns in the middle facing right, so its tail
        # extends left from the centre column.
        if self.initial_length > self.grid_size // 2 + 1:
            raise ValueError(
                "initial_length does not fit the configured grid; "
                "increase grid_size or reduce initial_length."
            )
        if self.initial_speed < 1:
            raise ValueError("initial_speed must be at least 1.")
        if self.max_speed < self.initial_speed:
            raise ValueError("max_speed must be >= initial_speed.")
        if self.speed_increment < 0:
            raise ValueError("speed_increment must be >= 0.")
        if self.points_per_level < 1:
            raise ValueError("points_per_level must be at least 1.")

    @property
    def initial_interval_ms(self) -> float:
        return 1000.0 / self.initial_speed

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(
                f"Unknown config keys in {path}: {', '.join(unknown)}."
            )
        return cls(**raw)
