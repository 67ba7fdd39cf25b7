"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

from gridsnake.grid import GRID_SIZE, Position, free_cells

logger = logging.getLogger(__name__)

_DEFAULT_MAX_ATTEMPTS = 64


class FoodGenerator:
    """Places food uniformly over the cells the snake does not occupy.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Candidates are drawn by rejection sampling; after *max_attempts*
    misses the generator picks directly from the free cells, so a
    crowded board never stalls placement.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        max_attempts: int = _DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid_size = grid_size
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def place(
        self, snake: Collection[Position], grid_size: int | None = None,
    ) -> Position | None:
        """Return a free cell for the next food item.

        *grid_size* overrides the generator's own board size. Returns
        ``None`` when the snake covers the whole board.
        """
        size = grid_size if grid_size is not None else self.grid_size
        occupied = set(snake)
        for _ in range(self.max_attempts):
            x, y = self.rng.integers(size, size=2).tolist()
            candidate = Position(x, y)
            if candidate not in occupied:
                return candidate

        empty = free_cells(occupied, size)
        if not empty:
            logger.warning("No free cells available for food placement.")
            return None

        logger.debug(
            "Rejection sampling exhausted after %d attempts; "
            "choosing from %d free cells.",
            self.max_attempts, len(empty),
        )
        return empty[int(self.rng.integers(len(empty)))]
