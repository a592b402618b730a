"""Flat array storage for every body in the simulation."""

import math
import numpy as np


class BodyStore:
    """
    Parallel arrays of position, velocity, mass and alive flag.

    Ids are handed out sequentially and never reused, so an id keeps
    pointing at the same body (dead or alive) for the whole run. Arrays
    grow by doubling; kernels operate on the ``[:count]`` views.
    """

    def __init__(self, capacity: int = 64):
        capacity = max(1, int(capacity))
        self._positions = np.zeros((capacity, 2), dtype=np.float64)
        self._velocities = np.zeros((capacity, 2), dtype=np.float64)
        self._masses = np.zeros(capacity, dtype=np.float64)
        self._alive = np.zeros(capacity, dtype=np.bool_)
        self.count = 0

    # Views over allocated ids only
    @property
    def positions(self) -> np.ndarray:
        return self._positions[:self.count]

    @property
    def velocities(self) -> np.ndarray:
        return self._velocities[:self.count]

    @property
    def masses(self) -> np.ndarray:
        return self._masses[:self.count]

    @property
    def alive(self) -> np.ndarray:
        return self._alive[:self.count]

    @property
    def live_count(self) -> int:
        return int(np.count_nonzero(self.alive))

    def _grow(self):
        new_capacity = len(self._masses) * 2
        for name in ("_positions", "_velocities", "_masses", "_alive"):
            old = getattr(self, name)
            new = np.zeros((new_capacity,) + old.shape[1:], dtype=old.dtype)
            new[:self.count] = old[:self.count]
            setattr(self, name, new)

    def add(self, position, velocity, mass: float) -> int:
        """Allocate a new live body and return its id."""
        mass = float(mass)
        if not (math.isfinite(mass) and mass > 0):
            raise ValueError(f"Body mass must be a positive finite number, got {mass}")

        if self.count == len(self._masses):
            self._grow()

        body_id = self.count
        self._positions[body_id] = position
        self._velocities[body_id] = velocity
        self._masses[body_id] = mass
        self._alive[body_id] = True
        self.count += 1
        return body_id

    def overlaps(self, position, radius: float) -> bool:
        """Whether any live body lies within ``radius`` of ``position``."""
        live = self.positions[self.alive]
        if len(live) == 0:
            return False
        offsets = live - np.asarray(position, dtype=np.float64)
        dist_sq = offsets[:, 0] ** 2 + offsets[:, 1] ** 2
        return bool(np.any(dist_sq <= radius * radius))

    def _check(self, body_id: int) -> int:
        if not 0 <= body_id < self.count:
            raise IndexError(f"Unknown body id {body_id} (store holds {self.count})")
        return body_id

    def kill(self, body_id: int):
        self._alive[self._check(body_id)] = False

    def is_alive(self, body_id: int) -> bool:
        return bool(self._alive[self._check(body_id)])

    def position(self, body_id: int) -> tuple:
        x, y = self._positions[self._check(body_id)]
        return float(x), float(y)

    def velocity(self, body_id: int) -> tuple:
        vx, vy = self._velocities[self._check(body_id)]
        return float(vx), float(vy)

    def mass(self, body_id: int) -> float:
        return float(self._masses[self._check(body_id)])

    def live_ids(self) -> np.ndarray:
        return np.flatnonzero(self.alive)

    # Diagnostics over live bodies

    def total_mass(self) -> float:
        return float(self.masses[self.alive].sum())

    def kinetic_energy(self) -> float:
        alive = self.alive
        v = self.velocities[alive]
        return float(0.5 * np.sum(self.masses[alive] * (v[:, 0] ** 2 + v[:, 1] ** 2)))

    def momentum(self) -> tuple:
        alive = self.alive
        p = self.velocities[alive] * self.masses[alive][:, None]
        return float(p[:, 0].sum()), float(p[:, 1].sum())
