"""Immutable snapshots of world state."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from gridsnake.grid import GameMode, Position
from gridsnake.snake import Direction


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game-over"
    BOARD_CLEARED = "board-cleared"


_TERMINAL = frozenset({GameStatus.GAME_OVER, GameStatus.BOARD_CLEARED})


@dataclass(frozen=True)
class GameState:
    """A complete, immutable view of one game at one point in time.

    ``snake`` is ordered head first. Every engine operation returns a new
    instance; nothing mutates a state in place.
    """

    snake: tuple[Position, ...]
    food: Position | None
    direction: Direction
    next_direction: Direction
    score: int
    status: GameStatus
    mode: GameMode
    grid_size: int
    speed: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def is_over(self) -> bool:
        """True once the game has reached a terminal status."""
        return self.status in _TERMINAL

    def to_dict(self) -> dict:
        """Return a JSON-serializable view of the state."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction.name,
            "next_direction": self.next_direction.name,
            "score": self.score,
            "status": self.status.value,
            "mode": self.mode.value,
            "grid_size": self.grid_size,
            "speed": self.speed,
        }
