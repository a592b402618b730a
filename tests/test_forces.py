import numpy as np
import pytest

from starfield.forces import pair_force


def test_two_bodies_attract_with_inverse_square(make_grid, force_pass):
    store, _, grid = make_grid([(-2.0, 0.0), (2.0, 0.0)], subdivisions=2, masses=[10.0, 10.0])
    forces, pairs = force_pass(store, grid, G=1.0, contact_radius=1.0)

    assert len(pairs) == 0
    # G * m1 * m2 / r^2 = 100 / 16
    assert forces[0] == pytest.approx([6.25, 0.0])
    assert forces[1] == pytest.approx([-6.25, 0.0])


def test_third_law_exact_negation(make_grid, force_pass):
    store, _, grid = make_grid([(0.3, 1.7), (2.9, -0.4)], subdivisions=1, masses=[3.5, 7.25])
    forces, _ = force_pass(store, grid, G=0.7)
    assert forces[0, 0] == -forces[1, 0]
    assert forces[0, 1] == -forces[1, 1]


def test_third_law_holds_for_every_pair_in_a_crowd(make_grid, force_pass):
    rng = np.random.default_rng(2)
    positions = [tuple(p) for p in rng.uniform(-30, 30, size=(60, 2))]
    masses = list(rng.uniform(1, 10, size=60))
    store, _, grid = make_grid(positions, subdivisions=4, masses=masses)
    forces, pairs = force_pass(store, grid, G=1.3, contact_radius=0.5)
    # Internal forces cancel, so the net force is zero
    assert np.abs(forces.sum(axis=0)).max() < 1e-9 * np.abs(forces).sum()


def test_matches_direct_pair_force(make_grid, force_pass):
    pos = [(0.0, 0.0), (1.5, 2.0)]
    store, _, grid = make_grid(pos, subdivisions=1, masses=[2.0, 5.0])
    forces, _ = force_pass(store, grid, G=3.0, stretch=1.5)
    expected = pair_force(pos[0], pos[1], 2.0, 5.0, G=3.0, stretch=1.5)
    assert forces[0] == pytest.approx(expected)


def test_stretch_divides_force_by_its_square(make_grid, force_pass):
    store, _, grid = make_grid([(0.0, 0.0), (3.0, 0.0)], subdivisions=1, masses=[4.0, 4.0])
    plain, _ = force_pass(store, grid, G=1.0, stretch=1.0)
    stretched, _ = force_pass(store, grid, G=1.0, stretch=2.0)
    assert stretched[0, 0] == pytest.approx(plain[0, 0] / 4.0)


def test_negative_g_repels(make_grid, force_pass):
    store, _, grid = make_grid([(0.0, 0.0), (3.0, 0.0)], subdivisions=1)
    forces, _ = force_pass(store, grid, G=-1.0)
    assert forces[0, 0] < 0.0
    assert forces[1, 0] > 0.0


def test_bodies_in_non_adjacent_cells_never_interact(make_grid, force_pass):
    # 10 x 10 grid of unit cells; bodies 0 and 1 sit three cells apart
    positions = [(0.5, 0.5), (3.5, 0.5), (10.0, 10.0), (0.0, 0.0)]
    store, _, grid = make_grid(positions, subdivisions=10, masses=[1.0, 1.0, 1e-9, 1e-9])
    forces, _ = force_pass(store, grid, G=1.0, contact_radius=0.1)
    # Only the tiny corner pins near body 0 contribute
    assert abs(forces[1, 0]) == 0.0
    assert abs(forces[1, 1]) == 0.0


def test_contact_flags_collision_instead_of_force(make_grid, force_pass):
    store, _, grid = make_grid([(0.0, 0.0), (0.8, 0.0)], subdivisions=1)
    forces, pairs = force_pass(store, grid, G=1.0, contact_radius=1.0)
    assert pairs.tolist() == [[0, 1]]
    assert forces.tolist() == [[0.0, 0.0], [0.0, 0.0]]


def test_contact_radius_is_inclusive(make_grid, force_pass):
    store, _, grid = make_grid([(0.0, 0.0), (1.0, 0.0)], subdivisions=1)
    _, pairs = force_pass(store, grid, contact_radius=1.0)
    assert pairs.tolist() == [[0, 1]]


def test_coincident_bodies_do_not_produce_nan(make_grid, force_pass):
    store, _, grid = make_grid([(1.0, 1.0), (1.0, 1.0), (5.0, 1.0)], subdivisions=1)
    forces, pairs = force_pass(store, grid, contact_radius=0.5)
    assert np.all(np.isfinite(forces))
    assert pairs.tolist() == [[0, 1]]
    # The third body still feels both of the others
    assert forces[2, 0] < 0.0


def test_one_candidate_per_detecting_body(make_grid, force_pass):
    # 0 touches 1 and 2; 1 touches 2
    positions = [(0.0, 0.0), (0.5, 0.0), (0.0, 0.5), (8.0, 8.0)]
    store, _, grid = make_grid(positions, subdivisions=1)
    forces, pairs = force_pass(store, grid, contact_radius=1.0)
    assert pairs.tolist() == [[0, 1], [1, 2]]
    # Body 3 is far away and still attracted by all three
    assert forces[3, 0] < 0.0 and forces[3, 1] < 0.0


def test_dead_bodies_exert_no_force(make_grid, force_pass):
    store, bounds, grid = make_grid([(0.0, 0.0), (3.0, 0.0), (6.0, 0.0)], subdivisions=1)
    store.kill(1)
    grid.build(bounds, 1, store.count)
    grid.insert_live()
    forces, _ = force_pass(store, grid)
    assert forces[1].tolist() == [0.0, 0.0]
    assert forces[0, 0] == pytest.approx(1.0 / 36.0)
