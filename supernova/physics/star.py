"""Phase state machine driving the star from giant to remnant and back."""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Optional, Tuple

from ..config import (
    BOUNCE_DURATION,
    BOUNCE_EXPANSION_RATE,
    COLLAPSE_ACCELERATION,
    COLLAPSE_BOUNCE_RADIUS,
    CORE_RADIUS,
    EXPLOSION_END_RADIUS,
    EXPLOSION_EXPANSION_RATE,
    EXPLOSION_START_RADIUS,
    GIANT_DURATION,
    GIANT_PULSE_AMPLITUDE,
    GIANT_PULSE_RATE,
    GIANT_RADIUS,
    HEIGHT,
    NEBULA_END_RADIUS,
    NEBULA_EXPANSION_RATE,
    WIDTH,
)
from .particles import ParticleStore, spawn_particles, update_particles


class Phase(IntEnum):
    """Evolutionary stages of a core-collapse (Type II) supernova."""

    GIANT = 0  # Supergiant pulsing from irregular shell burning
    COLLAPSE = 1  # Iron core loses pressure support
    BOUNCE = 2  # Core hits nuclear density and rebounds
    EXPLOSION = 3  # Shock wave ejects the outer layers
    NEBULA = 4  # Expanding supernova remnant


@dataclass
class Star:
    """
    Flat record of everything the phases need.

    Only some fields are meaningful in a given phase: ``radius`` up to
    BOUNCE, ``velocity`` during COLLAPSE, ``explosion_radius`` from
    EXPLOSION onward. ``core_radius`` survives from BOUNCE until the cycle
    restarts.
    """

    phase: Phase = Phase.GIANT
    radius: float = GIANT_RADIUS
    core_radius: float = 0.0
    explosion_radius: float = 0.0
    velocity: float = 0.0
    phase_time: float = 0.0
    cycle: int = 0

    def enter(self, phase: Phase):
        self.phase = phase
        self.phase_time = 0.0


def grid_center(width: int = WIDTH, height: int = HEIGHT):
    """Centre of the character grid, where the star sits."""
    return (width / 2.0, height / 2.0)


def _update_giant(star, particles, dt, rng, origin):
    pulse = math.sin(star.phase_time * GIANT_PULSE_RATE)
    star.radius = GIANT_RADIUS + pulse * GIANT_PULSE_AMPLITUDE

    if star.phase_time > GIANT_DURATION:
        star.enter(Phase.COLLAPSE)
        star.velocity = 0.0


def _update_collapse(star, particles, dt, rng, origin):
    star.velocity += COLLAPSE_ACCELERATION * dt
    star.radius -= star.velocity * dt

    if star.radius < COLLAPSE_BOUNCE_RADIUS:
        star.enter(Phase.BOUNCE)
        star.core_radius = CORE_RADIUS


def _update_bounce(star, particles, dt, rng, origin):
    star.radius += BOUNCE_EXPANSION_RATE * dt

    if star.phase_time > BOUNCE_DURATION:
        star.enter(Phase.EXPLOSION)
        star.explosion_radius = EXPLOSION_START_RADIUS
        spawn_particles(particles, origin, rng)


def _update_explosion(star, particles, dt, rng, origin):
    star.explosion_radius += EXPLOSION_EXPANSION_RATE * dt
    update_particles(particles, dt)

    if star.explosion_radius > EXPLOSION_END_RADIUS:
        star.enter(Phase.NEBULA)


def _update_nebula(star, particles, dt, rng, origin):
    star.explosion_radius += NEBULA_EXPANSION_RATE * dt
    update_particles(particles, dt)

    if star.explosion_radius > NEBULA_END_RADIUS:
        # Fresh cycle. Unlike the C original, the remnant and the old
        # shell are cleared here instead of carrying into the next giant.
        star.enter(Phase.GIANT)
        star.radius = GIANT_RADIUS
        star.core_radius = 0.0
        star.explosion_radius = 0.0
        star.velocity = 0.0
        star.cycle += 1


PHASE_UPDATES: Dict[Phase, Callable[..., None]] = {
    Phase.GIANT: _update_giant,
    Phase.COLLAPSE: _update_collapse,
    Phase.BOUNCE: _update_bounce,
    Phase.EXPLOSION: _update_explosion,
    Phase.NEBULA: _update_nebula,
}


def advance(
    star: Star,
    particles: ParticleStore,
    dt: float,
    rng,
    origin: Optional[Tuple[float, float]] = None,
) -> None:
    """
    Advance the star by one tick.

    The phase clock always runs; then the current phase applies its own
    update and checks its exit condition. At most one transition happens
    per tick, so no phase is ever skipped.

    Args:
        star: Star to mutate
        particles: Ejecta store, spawned on BOUNCE -> EXPLOSION and
            integrated during EXPLOSION and NEBULA
        dt: Timestep in seconds
        rng: Random source passed to :func:`spawn_particles`
        origin: Where ejecta are launched (grid centre if None)
    """
    if dt <= 0:
        raise ValueError(f"Timestep must be positive, got {dt}")

    if origin is None:
        origin = grid_center()

    star.phase_time += dt
    PHASE_UPDATES[star.phase](star, particles, dt, rng, origin)
