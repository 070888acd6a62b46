import pytest

from snake_env.snake import Snake, RIGHT, VELOCITIES


class FixedRng:
    """Stands in for numpy's Generator, handing out preset integers."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, high):
        self.calls.append(high)
        return self.values.pop(0)


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def small_snake():
    """Three pieces heading right on a 10x10 grid, food out of the way."""
    return Snake(
        pieces=[(1, 5), (2, 5), (3, 5)],
        velocity=VELOCITIES[RIGHT],
        food_pos=(8, 8),
        max_pos=(10, 10),
    )
