"""Tests for the in-memory leaderboard."""

import pytest

from gridsnake.grid import GameMode
from gridsnake.leaderboard import InMemoryLeaderboard, ScoreEntry


def _entry(player, score, mode=GameMode.WALLS):
    return ScoreEntry(player=player, score=score, mode=mode)


class TestLeaderboardInit:
    def test_empty(self):
        board = InMemoryLeaderboard()
        assert len(board) == 0
        assert board.top() == []

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="at least 1"):
            InMemoryLeaderboard(max_entries=0)


class TestLeaderboardOrdering:
    def test_highest_first(self):
        board = InMemoryLeaderboard()
        for player, score in [("a", 10), ("b", 50), ("c", 30)]:
            board.submit(_entry(player, score))
        assert [e.player for e in board.top()] == ["b", "c", "a"]

    def test_ties_keep_submission_order(self):
        board = InMemoryLeaderboard()
        board.submit(_entry("first", 20))
        board.submit(_entry("second", 20))
        assert [e.player for e in board.top()] == ["first", "second"]

    def test_limit(self):
        board = InMemoryLeaderboard()
        for i in range(5):
            board.submit(_entry(f"p{i}", i * 10))
        assert [e.score for e in board.top(limit=2)] == [40, 30]

    def test_filter_by_mode(self):
        board = InMemoryLeaderboard()
        board.submit(_entry("w", 10, GameMode.WALLS))
        board.submit(_entry("p", 90, GameMode.PASS_THROUGH))
        assert [e.player for e in board.top(mode=GameMode.WALLS)] == ["w"]


class TestLeaderboardBounds:
    def test_drops_lowest_past_capacity(self):
        board = InMemoryLeaderboard(max_entries=2)
        board.submit(_entry("a", 10))
        board.submit(_entry("b", 30))
        board.submit(_entry("c", 20))
        assert len(board) == 2
        assert [e.player for e in board.top()] == ["b", "c"]

    def test_rejects_negative_score(self):
        board = InMemoryLeaderboard()
        with pytest.raises(ValueError, match=">= 0"):
            board.submit(_entry("x", -1))
        assert len(board) == 0

    def test_instances_are_independent(self):
        a = InMemoryLeaderboard()
        b = InMemoryLeaderboard()
        a.submit(_entry("x", 10))
        assert len(b) == 0
