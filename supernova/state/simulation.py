"""Simulation context owning the star, its ejecta and the random source."""

from typing import Optional

import numpy as np

from ..config import HEIGHT, PRECISION, TIMESTEP, WIDTH
from ..physics.particles import ParticleStore, configure_precision
from ..physics.star import Star, advance, grid_center
from ..visualization.ascii import frame_to_text, render


class Simulation:
    """
    One independent supernova animation.

    Holds all mutable state so several simulations can run side by side and
    tests can inject a deterministic random source.
    """

    def __init__(
        self,
        rng,
        dt: float = TIMESTEP,
        width: int = WIDTH,
        height: int = HEIGHT,
        star: Optional[Star] = None,
        particles: Optional[ParticleStore] = None,
    ):
        """
        Initialize the simulation.

        Args:
            rng: Source of uniform floats with a ``random(size)`` method
            dt: Seconds of simulated time per tick
            width: Frame width in characters
            height: Frame height in characters
            star: Initial star (a fresh giant if None)
            particles: Ejecta store (an empty store if None)
        """
        if dt <= 0:
            raise ValueError(f"Timestep must be positive, got {dt}")

        configure_precision(PRECISION)

        self.rng = rng
        self.dt = dt
        self.width = width
        self.height = height
        self.star = star if star is not None else Star()
        self.particles = particles if particles is not None else ParticleStore()
        self.frame_count = 0

    @classmethod
    def create(cls, seed: Optional[int] = None, **kwargs) -> 'Simulation':
        """Build a simulation driven by ``numpy.random.default_rng(seed)``."""
        return cls(np.random.default_rng(seed), **kwargs)

    def step(self):
        """Advance the star and its ejecta by one tick."""
        advance(
            self.star, self.particles, self.dt, self.rng,
            origin=grid_center(self.width, self.height),
        )

    def render(self) -> np.ndarray:
        """Character grid for the current state."""
        return render(self.star, self.particles, self.rng, self.width, self.height)

    def tick(self) -> str:
        """Advance one tick and return the resulting frame as text."""
        self.step()
        self.frame_count += 1
        return frame_to_text(self.render())
