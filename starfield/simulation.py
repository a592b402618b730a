"""
2D star simulation with a uniform spatial grid.

Per tick:
- Despawn bodies that drifted past the despawn distance (optional)
- Rebuild the grid over the grow-only bounds and bucket live bodies
- Accumulate neighbour-restricted gravity, flagging contacts
- Resolve contacts (annihilation or absorption)
- Semi-implicit Euler for survivors
- Widen bounds, ramp G
"""

import math
from typing import List, Optional

import numpy as np

from .bounds import Bounds, compute_extents
from .collisions import CollisionEvent, collect_events, resolve_collisions
from .forces import accumulate_forces
from .grid import SpaceGrid, assign_cells, build_cell_lists
from .integrator import despawn_distant, integrate_semi_implicit
from .ramp import GravityRamp
from .settings import SimulationSettings
from .store import BodyStore


class StarSimulation:
    """
    Fixed-timestep gravity and collision core.

    Construct once and hand the instance to whatever needs to read body
    state (renderers, camera, reports). All mutation happens inside
    ``spawn_body`` and ``step``.
    """

    def __init__(self, settings: Optional[SimulationSettings] = None, capacity: int = 64):
        self.settings = settings if settings is not None else SimulationSettings()
        self.settings.validate()

        s = self.settings
        self.contact_radius = float(s.contact_radius)
        self.stretch_sq = float(s.distance_stretch) ** 2
        self.grid_subdivisions = int(s.grid_subdivisions)
        self.survival_ratio = float(s.mass_survival_ratio)
        self.retention = float(s.collision_mass_retention)
        self.despawn_distance_sq = (
            None if s.despawn_distance is None else float(s.despawn_distance) ** 2
        )

        self.store = BodyStore(capacity=max(capacity, s.star_count))
        self.bounds = Bounds()
        self.grid = SpaceGrid(self.store)
        self.ramp = GravityRamp(
            s.gravitational_constant,
            s.ramp_rate_per_second,
            s.max_abs_gravitational_constant
        )

        self.tick = 0
        self.elapsed = 0.0
        self.forces = np.zeros((0, 2), dtype=np.float64)
        self.last_collisions: List[CollisionEvent] = []
        self.total_collisions = 0

        _warmup_numba()

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------

    def spawn_body(self, position, velocity, mass: float) -> Optional[int]:
        """
        Add a body unless it would overlap a live one.

        Returns:
            The new id, or None when the position lies within the contact
            radius of a live body (the caller decides whether to retry)
        """
        if self.store.overlaps(position, self.contact_radius):
            return None
        body_id = self.store.add(position, velocity, mass)
        x, y = self.store.position(body_id)
        self.bounds.widen(x, y)
        return body_id

    # ------------------------------------------------------------------
    # Physics
    # ------------------------------------------------------------------

    def step(self, dt: float):
        """Advance the simulation by one fixed tick of ``dt`` seconds."""
        dt = float(dt)
        if not (math.isfinite(dt) and dt > 0):
            raise ValueError(f"Timestep must be positive and finite, got {dt}")

        store = self.store
        num_bodies = store.count
        positions = store.positions
        velocities = store.velocities
        masses = store.masses
        alive = store.alive

        if self.despawn_distance_sq is not None and num_bodies:
            despawn_distant(positions, alive, self.despawn_distance_sq, num_bodies)

        self.grid.build(self.bounds, self.grid_subdivisions, num_bodies)
        self.grid.insert_live()
        body_cells, sorted_ids, cell_starts, cell_counts = self.grid.arrays()

        self.forces = np.zeros((num_bodies, 2), dtype=np.float64)
        pairs = np.zeros((max(num_bodies, 1), 2), dtype=np.int64)
        num_pairs = accumulate_forces(
            positions,
            masses,
            alive,
            body_cells,
            sorted_ids,
            cell_starts,
            cell_counts,
            self.grid.grid_dim,
            float(self.ramp.value),
            self.stretch_sq,
            self.contact_radius,
            self.forces,
            pairs
        )

        outcomes = np.zeros((max(num_pairs, 1), 3), dtype=np.int64)
        if num_pairs:
            resolve_collisions(
                pairs,
                num_pairs,
                masses,
                velocities,
                alive,
                self.survival_ratio,
                self.retention,
                outcomes
            )
        self.last_collisions = collect_events(outcomes, num_pairs)
        self.total_collisions += len(self.last_collisions)

        if num_bodies:
            integrate_semi_implicit(
                positions, velocities, self.forces, masses, alive, dt, num_bodies
            )
            self.bounds.widen_from(positions, alive)

        self.ramp.advance(dt)
        self.tick += 1
        self.elapsed += dt

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def gravitational_constant(self) -> float:
        return self.ramp.value

    @property
    def num_bodies(self) -> int:
        return self.store.count

    @property
    def live_count(self) -> int:
        return self.store.live_count

    def is_alive(self, body_id: int) -> bool:
        return self.store.is_alive(body_id)

    def get_position(self, body_id: int) -> tuple:
        return self.store.position(body_id)

    def get_velocity(self, body_id: int) -> tuple:
        return self.store.velocity(body_id)

    def get_mass(self, body_id: int) -> float:
        return self.store.mass(body_id)

    def mass_range(self) -> tuple:
        """Configured (min, max) spawn mass, for colour banding."""
        return tuple(self.settings.mass_range)

    def live_positions(self) -> np.ndarray:
        return self.store.positions[self.store.alive]

    def live_masses(self) -> np.ndarray:
        return self.store.masses[self.store.alive]

    def total_mass(self) -> float:
        return self.store.total_mass()

    def kinetic_energy(self) -> float:
        return self.store.kinetic_energy()

    def momentum(self) -> tuple:
        return self.store.momentum()


_warmed_up = False


def _warmup_numba():
    """Pre-compile Numba functions with small arrays."""
    global _warmed_up
    if _warmed_up:
        return

    n = 16
    rng = np.random.default_rng(0)
    pos = rng.random((n, 2)) * 10.0
    vel = rng.random((n, 2))
    mass = np.ones(n, dtype=np.float64)
    alive = np.ones(n, dtype=np.bool_)
    forces = np.zeros((n, 2), dtype=np.float64)

    grid_dim = 4
    num_cells = grid_dim * grid_dim
    body_cells = np.zeros(n, dtype=np.int64)
    sorted_ids = np.arange(n, dtype=np.int64)
    cell_starts = np.zeros(num_cells, dtype=np.int64)
    cell_counts = np.zeros(num_cells, dtype=np.int64)

    assign_cells(pos, alive, body_cells, 0.0, 0.0, 2.5, 2.5, grid_dim, n)
    sorted_ids[:] = np.argsort(body_cells, kind="stable")
    build_cell_lists(body_cells, sorted_ids, cell_starts, cell_counts, n, num_cells)

    pairs = np.zeros((n, 2), dtype=np.int64)
    num_pairs = accumulate_forces(pos, mass, alive, body_cells, sorted_ids,
                                  cell_starts, cell_counts, grid_dim,
                                  1.0, 1.0, 0.5, forces, pairs)
    outcomes = np.zeros((n, 3), dtype=np.int64)
    resolve_collisions(pairs, num_pairs, mass, vel, alive, 1.5, 0.9, outcomes)

    integrate_semi_implicit(pos, vel, forces, mass, alive, 0.01, n)
    despawn_distant(pos, alive, 1e6, n)
    compute_extents(pos, alive, n, 0.0, 0.0, 0.0, 0.0)

    _warmed_up = True
