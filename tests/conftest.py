import numpy as np
import pytest

from starfield import SimulationSettings, StarSimulation
from starfield.bounds import Bounds
from starfield.forces import accumulate_forces
from starfield.grid import SpaceGrid
from starfield.store import BodyStore


@pytest.fixture
def make_sim():
    """Build a simulation from keyword overrides of the default settings."""
    def _make(**overrides):
        return StarSimulation(SimulationSettings(**overrides))
    return _make


@pytest.fixture
def make_grid():
    """Store + bounds + grid over the given positions (bounds widened by every body)."""
    def _make(positions, subdivisions, masses=None):
        store = BodyStore()
        bounds = Bounds()
        for k, (x, y) in enumerate(positions):
            mass = 1.0 if masses is None else masses[k]
            store.add((x, y), (0.0, 0.0), mass)
            bounds.widen(x, y)
        grid = SpaceGrid(store)
        grid.build(bounds, subdivisions, store.count)
        grid.insert_live()
        return store, bounds, grid
    return _make


def run_force_pass(store, grid, G=1.0, stretch=1.0, contact_radius=1.0):
    """Run the force kernel once; returns (forces, pairs[:num_pairs])."""
    n = store.count
    forces = np.zeros((n, 2), dtype=np.float64)
    pairs = np.zeros((max(n, 1), 2), dtype=np.int64)
    body_cells, sorted_ids, cell_starts, cell_counts = grid.arrays()
    num_pairs = accumulate_forces(
        store.positions, store.masses, store.alive,
        body_cells, sorted_ids, cell_starts, cell_counts,
        grid.grid_dim, G, stretch * stretch, contact_radius,
        forces, pairs
    )
    return forces, pairs[:num_pairs]


@pytest.fixture
def force_pass():
    return run_force_pass
