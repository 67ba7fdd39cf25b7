"""Throughput and score measurement for unattended autopilot play."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from gridsnake.autopilot import Autopilot, greedy_direction
from gridsnake.config import GameConfig
from gridsnake.engine import GameEngine, change_direction, start
from gridsnake.grid import GameMode
from gridsnake.state import GameState, GameStatus

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from an autopilot benchmark run."""

    total_games: int
    total_steps: int
    wall_time_seconds: float
    games_per_second: float
    steps_per_second: float
    mean_score: float
    max_score: int
    cleared: int

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_steps} steps "
            f"in {self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.steps_per_second:.1f} steps/s | "
            f"score mean {self.mean_score:.1f}, max {self.max_score}"
        )


def play_unattended(
    engine: GameEngine,
    mode: GameMode = GameMode.WALLS,
    *,
    autopilot: Autopilot = greedy_direction,
    max_steps: int = 10_000,
) -> tuple[GameState, int]:
    """Play one game to completion without a timer.

    Returns the final state and the number of ticks taken. Stops early
    after *max_steps* ticks if the game is still running.
    """
    state = start(engine.initialize(mode))
    steps = 0
    while not state.is_over and steps < max_steps:
        state = engine.tick(change_direction(state, autopilot(state)))
        steps += 1
    return state, steps


def benchmark_autopilot(
    *,
    num_games: int = 100,
    mode: GameMode = GameMode.WALLS,
    grid_size: int = 20,
    max_steps: int = 10_000,
    seed: int | None = 42,
    autopilot: Autopilot = greedy_direction,
) -> BenchmarkResult:
    """Run *num_games* autopilot games and report speed and scores."""
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    engine = GameEngine(GameConfig(grid_size=grid_size), seed=seed)

    scores = np.zeros(num_games, dtype=np.int64)
    total_steps = 0
    cleared = 0
    start_time = time.perf_counter()

    for i in range(num_games):
        state, steps = play_unattended(
            engine, mode, autopilot=autopilot, max_steps=max_steps,
        )
        scores[i] = state.score
        total_steps += steps
        if state.status is GameStatus.BOARD_CLEARED:
            cleared += 1

    elapsed = time.perf_counter() - start_time
    result = BenchmarkResult(
        total_games=num_games,
        total_steps=total_steps,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        steps_per_second=total_steps / max(elapsed, 1e-9),
        mean_score=float(scores.mean()),
        max_score=int(scores.max()),
        cleared=cleared,
    )
    logger.info(result.summary())
    return result
