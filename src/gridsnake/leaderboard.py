"""Score submission interface and an in-memory leaderboard."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from gridsnake.grid import GameMode

logger = logging.getLogger(__name__)

_MAX_ENTRIES = 100


@dataclass(frozen=True)
class ScoreEntry:
    """A finished game's result."""

    player: str
    score: int
    mode: GameMode
    length: int = 0


class ScoreRepository(Protocol):
    """Where finished scores are reported."""

    def submit(self, entry: ScoreEntry) -> None: ...

    def top(
        self, limit: int = 10, mode: GameMode | None = None,
    ) -> list[ScoreEntry]: ...


class InMemoryLeaderboard:
    """Bounded, score-ordered leaderboard held in process memory.

    Entries are kept sorted by score, highest first; equal scores keep
    submission order. Anything past *max_entries* is dropped.
    """

    def __init__(self, max_entries: int = _MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self._max_entries = max_entries
        self._entries: list[ScoreEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def submit(self, entry: ScoreEntry) -> None:
        if entry.score < 0:
            raise ValueError("score must be >= 0.")
        index = len(self._entries)
        for i, existing in enumerate(self._entries):
            if entry.score > existing.score:
                index = i
                break
        self._entries.insert(index, entry)
        if len(self._entries) > self._max_entries:
            dropped = self._entries.pop()
            logger.debug(
                "Leaderboard full; dropped %s (%d).",
                dropped.player, dropped.score,
            )
        logger.info(
            "Recorded score %d for '%s' (%s).",
            entry.score, entry.player, entry.mode.value,
        )

    def top(
        self, limit: int = 10, mode: GameMode | None = None,
    ) -> list[ScoreEntry]:
        """Return the best *limit* entries, optionally for one mode."""
        entries = [
            e for e in self._entries if mode is None or e.mode is mode
        ]
        return entries[:limit]
