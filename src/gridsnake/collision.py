"""Wall and self-collision predicates."""

from __future__ import annotations

from collections.abc import Sequence

from gridsnake.grid import GRID_SIZE, Position, in_bounds


def wall_collision(pos: Position, grid_size: int = GRID_SIZE) -> bool:
    """True if *pos* lies outside ``[0, grid_size)`` on either axis."""
    return not in_bounds(pos, grid_size)


def self_collision(pos: Position, snake: Sequence[Position]) -> bool:
    """True if *pos* hits any body segment other than the current tail.

    The tail is excluded because it vacates on the same tick the head
    advances. The exclusion applies even when the snake is about to grow.
    """
    return pos in snake[:-1]
