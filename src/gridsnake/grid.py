"""Grid coordinates, world topology, and occupancy helpers."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Position(NamedTuple):
    """An integer cell coordinate. ``x`` grows right, ``y`` grows down."""

    x: int
    y: int


class GameMode(enum.Enum):
    """Defines behavior when the snake reaches the grid boundary."""

    WALLS = "walls"
    PASS_THROUGH = "pass-through"


def in_bounds(pos: Position, grid_size: int = GRID_SIZE) -> bool:
    """Check whether a coordinate lies within the grid."""
    return 0 <= pos.x < grid_size and 0 <= pos.y < grid_size


def wrap(pos: Position, grid_size: int = GRID_SIZE) -> Position:
    """Wrap coordinates around the grid edges."""
    return Position(pos.x % grid_size, pos.y % grid_size)


def occupancy_mask(
    cells: Iterable[Position], grid_size: int = GRID_SIZE,
) -> np.ndarray:
    """Return a ``(grid_size, grid_size)`` boolean array of occupied cells.

    Indexed ``[y, x]`` like NumPy rows/cols. Cells outside the grid are
    ignored.
    """
    mask = np.zeros((grid_size, grid_size), dtype=bool)
    for x, y in cells:
        if 0 <= x < grid_size and 0 <= y < grid_size:
            mask[y, x] = True
    return mask


def free_cells(
    cells: Iterable[Position], grid_size: int = GRID_SIZE,
) -> list[Position]:
    """Return all unoccupied cells in row-major order."""
    ys, xs = np.where(~occupancy_mask(cells, grid_size))
    return [
        Position(x, y)
        for y, x in zip(ys.tolist(), xs.tolist(), strict=True)
    ]
