"""
grid.py — Toroidal geometry helpers.

Every coordinate the simulation stores is a (col, row) cell on a
TILE_COUNT x TILE_COUNT board whose edges wrap around.
"""

import random
from typing import Iterable, Optional

from .config import TILE_COUNT, GRID_SIZE, SPAWN_ATTEMPTS

Cell = tuple[int, int]


def wrap(coord: int, size: int = TILE_COUNT) -> int:
    """Map any integer onto [0, size)."""
    return coord % size


def wrap_cell(cell: Cell) -> Cell:
    return wrap(cell[0]), wrap(cell[1])


def manhattan_wrap_distance(a: Cell, b: Cell,
                            width: int = TILE_COUNT,
                            height: int = TILE_COUNT) -> int:
    """Manhattan distance where each axis may take the short way round."""
    dx = abs(a[0] - b[0]) % width
    dy = abs(a[1] - b[1]) % height
    return min(dx, width - dx) + min(dy, height - dy)


def clamp(value: int, low: int = 0, high: int = TILE_COUNT - 1) -> int:
    return max(low, min(high, value))


def to_pixels(cell: Cell) -> tuple[int, int]:
    return cell[0] * GRID_SIZE, cell[1] * GRID_SIZE


def random_free_cell(
    rng: random.Random,
    occupied: Iterable[Cell],
    attempts: int = SPAWN_ATTEMPTS,
) -> Optional[Cell]:
    """
    Rejection-sample a cell not in `occupied`.
    Returns None when every attempt landed on an occupied cell.
    """
    blocked = set(occupied)
    for _ in range(attempts):
        cell = (rng.randrange(TILE_COUNT), rng.randrange(TILE_COUNT))
        if cell not in blocked:
            return cell
    return None


def free_cells(occupied: Iterable[Cell]) -> list[Cell]:
    blocked = set(occupied)
    return [
        (x, y)
        for y in range(TILE_COUNT)
        for x in range(TILE_COUNT)
        if (x, y) not in blocked
    ]
