import math

import numpy as np
import pytest

from starfield.collisions import (
    ABSORBED, ANNIHILATED, SKIPPED, CollisionEvent, collect_events, resolve_collisions
)


def resolve(pairs, masses, velocities, survival_ratio=1.5, retention=1.0, alive=None):
    pairs = np.array(pairs, dtype=np.int64).reshape(-1, 2)
    masses = np.array(masses, dtype=np.float64)
    velocities = np.array(velocities, dtype=np.float64)
    if alive is None:
        alive = np.ones(len(masses), dtype=np.bool_)
    outcomes = np.zeros((max(len(pairs), 1), 3), dtype=np.int64)
    resolve_collisions(pairs, len(pairs), masses, velocities, alive,
                       survival_ratio, retention, outcomes)
    return masses, velocities, alive, outcomes


def kinetic(mass, velocity):
    return 0.5 * mass * (velocity[0] ** 2 + velocity[1] ** 2)


def test_absorption_conserves_mass_and_energy_at_full_retention():
    masses, velocities, alive, outcomes = resolve(
        [(0, 1)], [10.0, 2.0], [(1.0, 0.0), (0.0, 3.0)], retention=1.0
    )
    before_ke = kinetic(10.0, (1.0, 0.0)) + kinetic(2.0, (0.0, 3.0))

    assert alive.tolist() == [True, False]
    assert masses[0] == pytest.approx(12.0)
    assert kinetic(masses[0], velocities[0]) == pytest.approx(before_ke)
    # Heading of the survivor is preserved
    assert velocities[0, 1] == pytest.approx(0.0)
    assert velocities[0, 0] > 0.0
    assert outcomes[0].tolist() == [0, 1, ABSORBED]


def test_heavier_body_survives_regardless_of_detection_side():
    masses, _, alive, outcomes = resolve([(0, 1)], [2.0, 10.0], [(0.0, 0.0), (1.0, 1.0)])
    assert alive.tolist() == [False, True]
    assert masses[1] == pytest.approx(12.0)
    assert outcomes[0].tolist() == [1, 0, ABSORBED]


def test_retention_scales_mass_and_casualty_energy():
    masses, velocities, _, _ = resolve(
        [(0, 1)], [8.0, 4.0], [(2.0, 0.0), (-1.0, 0.0)], survival_ratio=1.0, retention=0.5
    )
    assert masses[0] == pytest.approx(6.0)
    expected_ke = kinetic(8.0, (2.0, 0.0)) + 0.5 * kinetic(4.0, (-1.0, 0.0))
    assert kinetic(masses[0], velocities[0]) == pytest.approx(expected_ke)
    assert velocities[0, 0] == pytest.approx(math.sqrt(2 * expected_ke / 6.0))


def test_similar_masses_annihilate():
    masses, _, alive, outcomes = resolve([(0, 1)], [10.0, 8.0], [(0.0, 0.0), (0.0, 0.0)],
                                         survival_ratio=1.5)
    assert alive.tolist() == [False, False]
    assert masses.tolist() == [10.0, 8.0]
    assert outcomes[0].tolist() == [0, 1, ANNIHILATED]


def test_equal_masses_keep_detecting_body():
    _, _, alive, outcomes = resolve([(3, 1)], [1.0, 5.0, 1.0, 5.0],
                                    [(0.0, 0.0)] * 4, survival_ratio=1.0)
    assert alive.tolist() == [True, False, True, True]
    assert outcomes[0, :2].tolist() == [3, 1]


def test_body_resolves_at_most_once_per_pass():
    _, _, alive, outcomes = resolve(
        [(0, 1), (1, 2), (2, 3)], [10.0, 1.0, 10.0, 1.0], [(0.0, 0.0)] * 4
    )
    assert outcomes[:, 2].tolist() == [ABSORBED, SKIPPED, ABSORBED]
    assert alive.tolist() == [True, False, True, False]


def test_dead_bodies_are_skipped():
    alive = np.array([True, False], dtype=np.bool_)
    masses, _, alive, outcomes = resolve([(0, 1)], [10.0, 1.0], [(0.0, 0.0)] * 2, alive=alive)
    assert outcomes[0, 2] == SKIPPED
    assert masses[0] == 10.0
    assert alive.tolist() == [True, False]


def test_resting_survivor_takes_casualty_heading():
    _, velocities, _, _ = resolve([(0, 1)], [10.0, 1.0], [(0.0, 0.0), (0.0, -4.0)])
    assert velocities[0, 0] == pytest.approx(0.0)
    assert velocities[0, 1] < 0.0


def test_both_at_rest_stay_at_rest():
    _, velocities, alive, _ = resolve([(0, 1)], [10.0, 1.0], [(0.0, 0.0), (0.0, 0.0)])
    assert velocities[0].tolist() == [0.0, 0.0]
    assert alive[0]


def test_collect_events_drops_skipped_rows():
    outcomes = np.array([[0, 1, ABSORBED], [1, 2, SKIPPED], [4, 3, ANNIHILATED]], dtype=np.int64)
    events = collect_events(outcomes, 3)
    assert events == [CollisionEvent(0, 1, False), CollisionEvent(4, 3, True)]
