"""Tests for unattended play and benchmarking."""

import pytest

from gridsnake.benchmark import BenchmarkResult, benchmark_autopilot, play_unattended
from gridsnake.config import GameConfig
from gridsnake.engine import GameEngine
from gridsnake.grid import GameMode
from gridsnake.snake import Direction


class TestPlayUnattended:
    def test_game_finishes(self):
        engine = GameEngine(GameConfig(grid_size=8), seed=3)
        state, steps = play_unattended(engine, GameMode.WALLS, max_steps=2_000)
        assert steps > 0
        assert state.is_over or steps == 2_000

    def test_max_steps_bound(self):
        engine = GameEngine(seed=3)
        state, steps = play_unattended(
            engine, GameMode.PASS_THROUGH, max_steps=5,
        )
        assert steps <= 5

    def test_custom_autopilot(self):
        engine = GameEngine(GameConfig(grid_size=8), seed=0)
        state, steps = play_unattended(
            engine, autopilot=lambda s: Direction.RIGHT,
        )
        # Straight into the right wall from the centre.
        assert steps == 4
        assert state.is_over

    def test_deterministic(self):
        a = play_unattended(GameEngine(seed=9))
        b = play_unattended(GameEngine(seed=9))
        assert a == b


class TestBenchmark:
    def test_result_fields(self):
        result = benchmark_autopilot(num_games=3, grid_size=8, max_steps=500)
        assert isinstance(result, BenchmarkResult)
        assert result.total_games == 3
        assert result.total_steps > 0
        assert result.games_per_second > 0
        assert result.max_score >= result.mean_score >= 0
        assert result.cleared <= 3

    def test_summary(self):
        result = benchmark_autopilot(num_games=2, grid_size=8, max_steps=200)
        text = result.summary()
        assert text.startswith("Benchmark:")
        assert "games/s" in text
        assert "score mean" in text

    def test_seeded_scores_repeat(self):
        a = benchmark_autopilot(num_games=3, grid_size=10, seed=5)
        b = benchmark_autopilot(num_games=3, grid_size=10, seed=5)
        assert (a.mean_score, a.max_score, a.total_steps) == (
            b.mean_score, b.max_score, b.total_steps,
        )

    def test_requires_games(self):
        with pytest.raises(ValueError, match="at least 1"):
            benchmark_autopilot(num_games=0)
