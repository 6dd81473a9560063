"""Tests for grid.py - toroidal geometry."""

import random

from snakeduel.config import TILE_COUNT, GRID_SIZE
from snakeduel.grid import (
    wrap, wrap_cell, manhattan_wrap_distance, clamp, to_pixels,
    random_free_cell, free_cells,
)

from conftest import FixedRng


class TestWrap:
    """Modulo wrap onto [0, TILE_COUNT)."""

    def test_inside_is_unchanged(self):
        assert wrap(7) == 7

    def test_one_past_the_edge_wraps_to_zero(self):
        assert wrap(TILE_COUNT) == 0

    def test_negative_wraps_to_last_column(self):
        assert wrap(-1) == TILE_COUNT - 1

    def test_wrap_cell_wraps_both_axes(self):
        assert wrap_cell((-1, TILE_COUNT + 2)) == (TILE_COUNT - 1, 2)


class TestManhattanWrapDistance:
    """Toroidal Manhattan distance."""

    def test_plain_distance(self):
        assert manhattan_wrap_distance((2, 3), (5, 7)) == 7

    def test_takes_the_short_way_round(self):
        assert manhattan_wrap_distance((0, 0), (TILE_COUNT - 1, 0)) == 1
        assert manhattan_wrap_distance((0, 1), (0, TILE_COUNT - 2)) == 3

    def test_is_symmetric(self):
        a, b = (1, 18), (17, 2)
        assert manhattan_wrap_distance(a, b) == manhattan_wrap_distance(b, a)

    def test_never_exceeds_half_the_board_per_axis(self):
        for x in range(TILE_COUNT):
            assert manhattan_wrap_distance((0, 0), (x, 0)) <= TILE_COUNT // 2


class TestHelpers:
    """Clamp, pixel conversion and free-cell search."""

    def test_clamp(self):
        assert clamp(-3) == 0
        assert clamp(TILE_COUNT + 3) == TILE_COUNT - 1
        assert clamp(4) == 4

    def test_to_pixels(self):
        assert to_pixels((5, 5)) == (100, 100)
        assert to_pixels((1, 2)) == (GRID_SIZE, 2 * GRID_SIZE)

    def test_random_free_cell_avoids_occupied(self):
        rng = random.Random(3)
        occupied = {(x, y) for x in range(TILE_COUNT) for y in range(TILE_COUNT) if x < TILE_COUNT - 1}
        for _ in range(20):
            cell = random_free_cell(rng, occupied, attempts=1000)
            assert cell is not None
            assert cell[0] == TILE_COUNT - 1

    def test_random_free_cell_gives_up_on_a_full_board(self):
        occupied = free_cells(())
        assert random_free_cell(random.Random(0), occupied) is None

    def test_free_cells_excludes_occupied(self):
        cells = free_cells({(0, 0), (1, 1)})
        assert len(cells) == TILE_COUNT * TILE_COUNT - 2
        assert (0, 0) not in cells


class TestPinnedRng:
    """The test rng pins probability draws but keeps cell draws seeded."""

    def test_cell_draws_still_vary(self):
        rng = FixedRng()
        cells = {(rng.randrange(TILE_COUNT), rng.randrange(TILE_COUNT)) for _ in range(20)}
        assert len(cells) > 1
        assert rng.random() == 0.999

    def test_sampling_reaches_the_free_column(self):
        rng = FixedRng()
        occupied = {(x, y) for x in range(TILE_COUNT - 1) for y in range(TILE_COUNT)}
        cell = random_free_cell(rng, occupied, attempts=1000)
        assert cell is not None
        assert cell[0] == TILE_COUNT - 1
