"""Tunable game constants."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, scoring, and speed settings for a game.

    ``speed`` values are tick intervals in milliseconds, so a lower value
    is a faster game.
    """

    grid_size: int = 20
    initial_length: int = 3
    points_per_food: int = 10
    initial_speed: int = 150
    speed_increment: int = 5
    min_speed: int = 50

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if not 1 <= self.initial_length <= self.grid_size // 2 + 1:
            raise ValueError(
                "initial_length must be between 1 and grid_size // 2 + 1."
            )
        if self.points_per_food < 0:
            raise ValueError("points_per_food must be >= 0.")
        if self.speed_increment < 0:
            raise ValueError("speed_increment must be >= 0.")
        if not 0 < self.min_speed <= self.initial_speed:
            raise ValueError("min_speed must be in (0, initial_speed].")

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
        return cls(**raw)
