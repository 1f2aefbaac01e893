import numpy as np
import pytest

from supernova.physics.particles import ParticleStore, configure_precision
from supernova.physics.star import Star


class FixedRandom:
    """Random source that always returns the same uniform value."""

    def __init__(self, value=0.5):
        self.value = value
        self.calls = 0

    def random(self, size=None):
        self.calls += 1
        if size is None:
            return self.value
        return np.full(size, self.value)


@pytest.fixture(autouse=True, scope="session")
def float64_particles():
    configure_precision(64)


@pytest.fixture
def fixed_rng():
    return FixedRandom(0.5)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def star():
    return Star()


@pytest.fixture
def particles():
    return ParticleStore()
