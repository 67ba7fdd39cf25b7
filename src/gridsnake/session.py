"""Async driver that ticks a game on a timer and applies player commands."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass

from gridsnake.autopilot import Autopilot
from gridsnake.engine import GameEngine
from gridsnake.grid import GameMode
from gridsnake.leaderboard import ScoreEntry, ScoreRepository
from gridsnake.snake import Direction
from gridsnake.state import GameState, GameStatus

logger = logging.getLogger(__name__)


class CommandKind(str, enum.Enum):
    TURN = "turn"
    START = "start"
    PAUSE = "pause"
    RESUME = "resume"
    RESET = "reset"


@dataclass(frozen=True)
class Command:
    """A discrete input from the player or host UI."""

    kind: CommandKind
    direction: Direction | None = None
    mode: GameMode | None = None

    @classmethod
    def turn(cls, direction: Direction) -> Command:
        return cls(CommandKind.TURN, direction=direction)

    @classmethod
    def parse(cls, text: str) -> Command:
        """Parse ``up``/``down``/``left``/``right``, a lifecycle word, or
        ``reset:<mode>``.
        """
        word, _, arg = text.strip().lower().partition(":")
        if word.upper() in Direction.__members__:
            return cls.turn(Direction[word.upper()])
        try:
            kind = CommandKind(word)
        except ValueError:
            raise ValueError(f"Unknown command {text!r}.") from None
        if kind is CommandKind.TURN:
            raise ValueError("Use a heading name to turn.")
        if kind is CommandKind.RESET and arg:
            return cls(kind, mode=GameMode(arg))
        return cls(kind)


class GameSession:
    """Holds the current state of one game and drives it in real time.

    Commands and ticks run on the same event loop, so they never
    interleave mid-update. The finished score is reported to the
    leaderboard once per game, on the transition out of ``playing``.
    """

    def __init__(
        self,
        engine: GameEngine,
        mode: GameMode = GameMode.WALLS,
        *,
        autopilot: Autopilot | None = None,
        leaderboard: ScoreRepository | None = None,
        player: str = "anonymous",
        on_tick: Callable[[GameState], None] | None = None,
    ) -> None:
        self.engine = engine
        self.autopilot = autopilot
        self.leaderboard = leaderboard
        self.player = player
        self.on_tick = on_tick
        self.ticks = 0
        self._state = engine.initialize(mode)
        self._reported = False
        self._stopped = False

    @property
    def state(self) -> GameState:
        return self._state

    def submit(self, command: Command) -> GameState:
        """Apply *command* to the held state and return the new state."""
        state = self._state
        if command.kind is CommandKind.TURN:
            if command.direction is None:
                raise ValueError("Turn command requires a direction.")
            self._state = self.engine.change_direction(state, command.direction)
        elif command.kind is CommandKind.START:
            self._state = self.engine.start(state)
        elif command.kind is CommandKind.PAUSE:
            self._state = self.engine.pause(state)
        elif command.kind is CommandKind.RESUME:
            self._state = self.engine.resume(state)
        elif command.kind is CommandKind.RESET:
            self._state = self.engine.reset(command.mode or state.mode)
            self._reported = False
            self.ticks = 0
        if self._state.status is not state.status:
            logger.debug(
                "Status %s -> %s.", state.status.value, self._state.status.value,
            )
        return self._state

    def step(self) -> GameState:
        """Steer with the autopilot (if any) and advance one tick."""
        state = self._state
        if state.status is not GameStatus.PLAYING:
            return state
        if self.autopilot is not None:
            state = self.engine.change_direction(state, self.autopilot(state))
        self._state = self.engine.tick(state)
        self.ticks += 1
        if self.on_tick is not None:
            self.on_tick(self._state)
        if self._state.is_over:
            self._report()
        return self._state

    def stop(self) -> None:
        """Ask :meth:`run` to return after the current tick."""
        self._stopped = True

    async def run(self, max_ticks: int | None = None) -> GameState:
        """Tick at ``state.speed`` millisecond intervals while playing.

        Returns when the game ends, is paused, :meth:`stop` is called, or
        *max_ticks* ticks have run.
        """
        self._stopped = False
        ran = 0
        try:
            while (
                not self._stopped
                and self._state.status is GameStatus.PLAYING
                and (max_ticks is None or ran < max_ticks)
            ):
                await asyncio.sleep(self._state.speed / 1000.0)
                if self._stopped:
                    break
                self.step()
                ran += 1
        except asyncio.CancelledError:
            logger.info("Session for '%s' cancelled.", self.player)
            raise
        return self._state

    def _report(self) -> None:
        if self._reported or self.leaderboard is None:
            return
        self._reported = True
        state = self._state
        entry = ScoreEntry(
            player=self.player,
            score=state.score,
            mode=state.mode,
            length=state.length,
        )
        try:
            self.leaderboard.submit(entry)
        except Exception:
            logger.exception("Failed to submit score for '%s'.", self.player)
