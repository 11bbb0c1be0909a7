import random

import pytest

from tour_ga.data import COLOMBIA_DISTANCES
from tour_ga.operators.base import DistanceModel


# Two tight pairs {0, 1} and {2, 3} joined by expensive edges; best closed tour is 20.
PAIRS4 = [
    [0, 1, 9, 9],
    [1, 0, 9, 9],
    [9, 9, 0, 1],
    [9, 9, 1, 0],
]


class ScriptedRng:
    """Stands in for random.Random, replaying fixed draws."""

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def randrange(self, stop):
        value = self.ints.pop(0)
        assert 0 <= value < stop
        return value

    def random(self):
        return self.floats.pop(0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def pairs4():
    return DistanceModel(PAIRS4)


@pytest.fixture
def colombia_model():
    return DistanceModel(COLOMBIA_DISTANCES)
