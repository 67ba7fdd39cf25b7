"""Greedy heuristic for unattended demonstration play."""

from __future__ import annotations

from typing import Protocol

from gridsnake.collision import self_collision, wall_collision
from gridsnake.grid import GameMode, Position
from gridsnake.snake import Direction, is_opposite, next_head
from gridsnake.state import GameState


class Autopilot(Protocol):
    """Anything that picks the next heading for a game state."""

    def __call__(self, state: GameState) -> Direction: ...


def _manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def greedy_direction(state: GameState) -> Direction:
    """Pick the safe heading that lands closest to the food.

    Looks exactly one step ahead. Candidates exclude the reverse of the
    committed direction and are ranked by Manhattan distance from the
    resulting head to the food; ties keep UP, DOWN, LEFT, RIGHT order.
    If every candidate collides, the committed direction is returned and
    the game ends on the next tick. The snake can still walk itself into
    a dead end.
    """
    if state.food is None:
        return state.direction

    head = state.head
    moves = [
        (d, next_head(head, d, state.mode, state.grid_size))
        for d in Direction
        if not is_opposite(state.direction, d)
    ]
    moves.sort(key=lambda move: _manhattan(move[1], state.food))

    for direction, candidate in moves:
        if state.mode is GameMode.WALLS and wall_collision(
            candidate, state.grid_size,
        ):
            continue
        if not self_collision(candidate, state.snake):
            return direction

    return state.direction


next_autopilot_direction: Autopilot = greedy_direction
