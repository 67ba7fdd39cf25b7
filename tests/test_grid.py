"""Tests for the grid module."""

import numpy as np

from gridsnake.grid import (
    GRID_SIZE,
    GameMode,
    Position,
    free_cells,
    in_bounds,
    occupancy_mask,
    wrap,
)


class TestPosition:
    def test_is_value_type(self):
        assert Position(3, 4) == Position(3, 4)
        assert Position(3, 4) == (3, 4)
        assert hash(Position(3, 4)) == hash((3, 4))

    def test_fields(self):
        pos = Position(1, 2)
        assert pos.x == 1
        assert pos.y == 2


class TestGameMode:
    def test_values(self):
        assert GameMode("walls") is GameMode.WALLS
        assert GameMode("pass-through") is GameMode.PASS_THROUGH


class TestBounds:
    def test_in_bounds(self):
        assert in_bounds(Position(0, 0))
        assert in_bounds(Position(GRID_SIZE - 1, GRID_SIZE - 1))
        assert not in_bounds(Position(-1, 0))
        assert not in_bounds(Position(0, GRID_SIZE))
        assert not in_bounds(Position(GRID_SIZE, 0))

    def test_custom_size(self):
        assert in_bounds(Position(4, 4), grid_size=5)
        assert not in_bounds(Position(5, 4), grid_size=5)

    def test_wrap(self):
        assert wrap(Position(-1, 0), 5) == Position(4, 0)
        assert wrap(Position(0, -1), 5) == Position(0, 4)
        assert wrap(Position(5, 5), 5) == Position(0, 0)


class TestOccupancy:
    def test_mask_shape_and_indexing(self):
        mask = occupancy_mask([Position(1, 2)], grid_size=4)
        assert mask.shape == (4, 4)
        assert mask[2, 1]
        assert mask.sum() == 1

    def test_mask_ignores_out_of_range(self):
        mask = occupancy_mask([Position(-1, 0), Position(4, 4)], grid_size=4)
        assert not np.any(mask)

    def test_free_cells(self):
        assert len(free_cells([], grid_size=4)) == 16
        cells = free_cells([Position(0, 0), Position(1, 1)], grid_size=4)
        assert len(cells) == 14
        assert Position(0, 0) not in cells
        assert Position(1, 0) in cells

    def test_free_cells_full_board(self):
        every = [Position(x, y) for x in range(4) for y in range(4)]
        assert free_cells(every, grid_size=4) == []
