import itertools
import math

import numpy as np
import pytest

from starfield import SpawnError, populate
from starfield.spawner import random_spawn, random_velocity


def test_seeded_population_is_reproducible(make_sim):
    first = make_sim(star_count=50, spawn_radius=20.0, seed=3)
    second = make_sim(star_count=50, spawn_radius=20.0, seed=3)
    populate(first)
    populate(second)
    assert np.array_equal(first.store.positions, second.store.positions)
    assert np.array_equal(first.store.velocities, second.store.velocities)
    assert np.array_equal(first.store.masses, second.store.masses)


def test_spawned_bodies_are_separated_and_in_range(make_sim):
    sim = make_sim(star_count=80, spawn_radius=20.0, seed=1, contact_radius=1.0,
                   mass_range=(2.0, 4.0), initial_speed_range=(0.5, 1.0))
    ids = populate(sim)
    assert ids == list(range(80))

    pos = sim.store.positions
    for a, b in itertools.combinations(range(len(ids)), 2):
        assert np.hypot(*(pos[a] - pos[b])) > 1.0

    assert np.all(np.hypot(pos[:, 0], pos[:, 1]) <= 20.0 + 1e-9)
    assert np.all((sim.store.masses >= 2.0) & (sim.store.masses <= 4.0))
    speeds = np.hypot(sim.store.velocities[:, 0], sim.store.velocities[:, 1])
    assert np.all((speeds >= 0.5 - 1e-12) & (speeds <= 1.0 + 1e-12))


def test_bounds_cover_spawned_bodies(make_sim):
    sim = make_sim(star_count=30, spawn_radius=10.0, seed=8)
    populate(sim)
    for x, y in sim.store.positions:
        assert sim.bounds.contains(x, y)


def test_fixed_mass_when_range_is_a_point(make_sim):
    sim = make_sim(star_count=5, spawn_radius=10.0, seed=2, mass_range=(3.0, 3.0))
    populate(sim)
    assert sim.store.masses.tolist() == [3.0] * 5


def test_raises_when_no_room_is_left(make_sim):
    sim = make_sim(seed=0)
    with pytest.raises(SpawnError):
        populate(sim, count=2, spawn_radius=0.0, max_attempts=10)
    assert sim.num_bodies == 1


def test_random_spawn_stays_inside_disc():
    rng = np.random.default_rng(0)
    for _ in range(500):
        x, y = random_spawn(rng, 5.0)
        assert math.hypot(x, y) <= 5.0 + 1e-9


def test_random_velocity_speed():
    rng = np.random.default_rng(0)
    vx, vy = random_velocity(rng, (2.0, 2.0))
    assert math.hypot(vx, vy) == pytest.approx(2.0)
