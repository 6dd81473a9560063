import random
from collections import deque

import pytest

from snakeduel.entities import Direction
from snakeduel.model import GameModel
from snakeduel.state import SimulationState


class FixedRng(random.Random):
    """Seeded rng whose random() always returns the same value.

    Declaring getrandbits keeps randrange/choice/shuffle on the seeded bit
    stream instead of random(), so spawns stay varied while every
    probability check (AI mistakes, hazard reversals) is pinned.
    """

    getrandbits = random.Random.getrandbits

    def __init__(self, value: float = 0.999, seed: int = 1):
        super().__init__(seed)
        self.value = value

    def random(self):
        return self.value


def place(snake, cells, direction=None):
    """Overwrite a snake's body (head first) and commit a direction."""
    snake.body = deque(cells)
    if direction is not None:
        snake.dir = Direction.NONE
        snake.request_direction(direction)
        snake.dir = direction


@pytest.fixture
def state():
    return SimulationState(FixedRng())


@pytest.fixture
def model():
    return GameModel(rng=FixedRng())
