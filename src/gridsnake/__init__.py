"""Grid Snake — deterministic snake simulation core."""

from gridsnake.autopilot import Autopilot, greedy_direction, next_autopilot_direction
from gridsnake.config import GameConfig
from gridsnake.engine import GameEngine, change_direction, pause, resume, start
from gridsnake.food import FoodGenerator
from gridsnake.grid import GameMode, Position
from gridsnake.leaderboard import InMemoryLeaderboard, ScoreEntry, ScoreRepository
from gridsnake.session import Command, CommandKind, GameSession
from gridsnake.snake import Direction, is_opposite
from gridsnake.state import GameState, GameStatus

__all__ = [
    "Autopilot",
    "Command",
    "CommandKind",
    "Direction",
    "FoodGenerator",
    "GameConfig",
    "GameEngine",
    "GameMode",
    "GameSession",
    "GameState",
    "GameStatus",
    "InMemoryLeaderboard",
    "Position",
    "ScoreEntry",
    "ScoreRepository",
    "change_direction",
    "greedy_direction",
    "is_opposite",
    "next_autopilot_direction",
    "pause",
    "resume",
    "start",
]
