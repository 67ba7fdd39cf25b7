"""Headings, the opposite-direction rule, and snake movement."""

from __future__ import annotations

import enum

from gridsnake.grid import GRID_SIZE, GameMode, Position, wrap


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """The heading that would cause an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(first: Direction, second: Direction) -> bool:
    """Return True if the two headings point in exactly opposite ways."""
    return _OPPOSITES[first] is second


def next_head(
    head: Position,
    direction: Direction,
    mode: GameMode,
    grid_size: int = GRID_SIZE,
) -> Position:
    """Compute the cell the head moves into, without moving.

    In pass-through mode the result wraps toroidally; in walls mode it
    may lie outside the grid.
    """
    dx, dy = direction.value
    candidate = Position(head.x + dx, head.y + dy)
    if mode is GameMode.PASS_THROUGH:
        return wrap(candidate, grid_size)
    return candidate


def initial_body(
    center: Position, length: int, direction: Direction = Direction.RIGHT,
) -> tuple[Position, ...]:
    """Lay out a straight snake whose body trails behind *direction*."""
    if length < 1:
        raise ValueError("Snake length must be at least 1.")
    dx, dy = direction.value
    return tuple(
        Position(center.x - dx * i, center.y - dy * i) for i in range(length)
    )
