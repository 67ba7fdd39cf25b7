"""Tick-based game state machine composing movement, collision, and food."""

from __future__ import annotations

import logging
from dataclasses import replace

from gridsnake.collision import self_collision, wall_collision
from gridsnake.config import GameConfig
from gridsnake.food import FoodGenerator
from gridsnake.grid import GameMode, Position
from gridsnake.snake import Direction, initial_body, is_opposite, next_head
from gridsnake.state import GameState, GameStatus

logger = logging.getLogger(__name__)


def start(state: GameState) -> GameState:
    """Begin or continue play from ``idle`` or ``paused``."""
    if state.status not in (GameStatus.IDLE, GameStatus.PAUSED):
        return state
    return replace(state, status=GameStatus.PLAYING)


def pause(state: GameState) -> GameState:
    if state.status is not GameStatus.PLAYING:
        return state
    return replace(state, status=GameStatus.PAUSED)


def resume(state: GameState) -> GameState:
    if state.status is not GameStatus.PAUSED:
        return state
    return replace(state, status=GameStatus.PLAYING)


def change_direction(state: GameState, requested: Direction) -> GameState:
    """Queue *requested* for the next tick, ignoring 180° reversals.

    Validation is against the committed direction, so only the most
    recent request between two ticks takes effect.
    """
    if is_opposite(state.direction, requested):
        return state
    return replace(state, next_direction=requested)


class GameEngine:
    """Single-snake, tick-based game rules.

    The engine owns the configuration and the food generator but no game
    state: :meth:`tick` and the lifecycle methods take a
    :class:`GameState` and return a new one.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        food: FoodGenerator | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        if food is None:
            food = FoodGenerator(self.config.grid_size, seed=seed)
        elif food.grid_size != self.config.grid_size:
            raise ValueError("Food generator grid_size does not match config.")
        self.food = food

    def initialize(self, mode: GameMode = GameMode.WALLS) -> GameState:
        """Create a fresh ``idle`` game centred on the grid."""
        cfg = self.config
        center = cfg.grid_size // 2
        snake = initial_body(
            Position(center, center), cfg.initial_length, Direction.RIGHT,
        )
        return GameState(
            snake=snake,
            food=self.food.place(snake),
            direction=Direction.RIGHT,
            next_direction=Direction.RIGHT,
            score=0,
            status=GameStatus.IDLE,
            mode=mode,
            grid_size=cfg.grid_size,
            speed=cfg.initial_speed,
        )

    def reset(self, mode: GameMode = GameMode.WALLS) -> GameState:
        """Discard the current game and build a new one for *mode*."""
        logger.debug("Resetting game (mode=%s).", mode.value)
        return self.initialize(mode)

    def start(self, state: GameState) -> GameState:
        return start(state)

    def pause(self, state: GameState) -> GameState:
        return pause(state)

    def resume(self, state: GameState) -> GameState:
        return resume(state)

    def change_direction(
        self, state: GameState, requested: Direction,
    ) -> GameState:
        return change_direction(state, requested)

    def tick(self, state: GameState) -> GameState:
        """Advance a ``playing`` game by one cell.

        Movement, collisions, and food placement all use the state's own
        ``grid_size``. Any other status is returned unchanged.
        """
        if state.status is not GameStatus.PLAYING:
            return state

        direction = state.next_direction
        new_head = next_head(state.head, direction, state.mode, state.grid_size)

        # --- collisions freeze the board at its pre-move values ---
        if state.mode is GameMode.WALLS and wall_collision(
            new_head, state.grid_size,
        ):
            return self._end(state, "wall")
        if self_collision(new_head, state.snake):
            return self._end(state, "self")

        # --- move ---
        if new_head != state.food:
            return replace(
                state,
                snake=(new_head, *state.snake[:-1]),
                direction=direction,
            )

        # --- eat ---
        cfg = self.config
        snake = (new_head, *state.snake)
        score = state.score + cfg.points_per_food
        food = self.food.place(snake, state.grid_size)
        status = state.status
        if food is None:
            status = GameStatus.BOARD_CLEARED
            logger.info(
                "Board cleared with score %d (length %d).", score, len(snake),
            )
        return replace(
            state,
            snake=snake,
            food=food,
            direction=direction,
            score=score,
            speed=max(cfg.min_speed, state.speed - cfg.speed_increment),
            status=status,
        )

    @staticmethod
    def _end(state: GameState, cause: str) -> GameState:
        """Mark the game over without moving the snake."""
        logger.info(
            "Snake hit %s at %s with score %d (length %d).",
            cause, tuple(state.head), state.score, state.length,
        )
        return replace(state, status=GameStatus.GAME_OVER)
