import math

import numpy as np
import pytest

from supernova.config import MAX_PARTICLES
from supernova.physics.particles import (
    ParticleStore,
    alive_count,
    spawn_particles,
    update_particles,
)
from conftest import FixedRandom


def test_new_store_is_empty():
    store = ParticleStore()
    assert len(store) == MAX_PARTICLES
    assert store.positions.shape == (MAX_PARTICLES, 2)
    assert alive_count(store) == 0


def test_spawn_fills_every_slot(particles, rng):
    spawn_particles(particles, (45.0, 16.0), rng)

    assert alive_count(particles) == 450
    assert np.all(particles.positions[:, 0] == 45.0)
    assert np.all(particles.positions[:, 1] == 16.0)
    assert np.all(particles.life >= 2.5)
    assert np.all(particles.life < 4.0)


def test_spawn_speed_range(particles, rng):
    spawn_particles(particles, (0.0, 0.0), rng)

    vx = particles.velocities[:, 0]
    vy = particles.velocities[:, 1] / 0.55
    speed = np.hypot(vx, vy)
    assert np.all(speed >= 10 - 1e-9)
    assert np.all(speed < 50)
    # Speeds are whole numbers before the vertical squash
    assert np.allclose(speed, np.round(speed))


def test_spawn_with_fixed_source(particles):
    spawn_particles(particles, (10.0, 5.0), FixedRandom(0.25))

    # angle = pi/2, speed = 10 + floor(10) = 20, life = 2.5 + 0.375
    assert particles.velocities[0, 0] == pytest.approx(0.0, abs=1e-12)
    assert particles.velocities[0, 1] == pytest.approx(20 * 0.55)
    assert particles.life[0] == pytest.approx(2.875)


def test_spawn_overwrites_dead_slots(particles, fixed_rng):
    particles.life[:] = -1.0
    particles.positions[:] = 99.0

    spawn_particles(particles, (1.0, 2.0), fixed_rng)

    assert alive_count(particles) == MAX_PARTICLES
    assert np.all(particles.positions == [1.0, 2.0])


def test_update_moves_live_particles(particles, fixed_rng):
    spawn_particles(particles, (0.0, 0.0), fixed_rng)
    velocities = particles.velocities.copy()
    life = particles.life.copy()

    update_particles(particles, 0.1)

    assert np.allclose(particles.positions, velocities * 0.1)
    assert np.allclose(particles.life, life - 0.1)


def test_dead_particle_never_moves(particles, fixed_rng):
    spawn_particles(particles, (30.0, 10.0), fixed_rng)
    particles.life[0] = 0.0
    particles.life[1] = -0.5
    frozen = particles.positions[:2].copy()

    for _ in range(10):
        update_particles(particles, 1 / 30)

    assert np.array_equal(particles.positions[:2], frozen)
    assert particles.life[0] == 0.0
    assert particles.life[1] == -0.5


def test_particles_expire(particles, fixed_rng):
    spawn_particles(particles, (0.0, 0.0), fixed_rng)

    update_particles(particles, 4.0)
    assert alive_count(particles) == 0

    stopped = particles.positions.copy()
    update_particles(particles, 1.0)
    assert np.array_equal(particles.positions, stopped)


def test_update_rejects_bad_timestep(particles):
    with pytest.raises(ValueError):
        update_particles(particles, 0.0)


def test_spawn_angle_covers_circle(particles):
    spawn_particles(particles, (0.0, 0.0), FixedRandom(0.5))
    # angle = pi points left
    assert particles.velocities[0, 0] < 0
    assert math.isclose(particles.velocities[0, 1], 0.0, abs_tol=1e-9)


def test_update_keeps_double_precision(particles, fixed_rng):
    spawn_particles(particles, (0.0, 0.0), fixed_rng)

    update_particles(particles, 1 / 30)

    assert particles.life.dtype == np.float64
    assert particles.life[0] == pytest.approx(3.25 - 1 / 30, rel=1e-12)
