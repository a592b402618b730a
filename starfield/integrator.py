"""Semi-implicit (symplectic) Euler integration."""

import numpy as np
from numba import njit, prange


@njit(parallel=True, cache=True)
def integrate_semi_implicit(
    positions: np.ndarray,
    velocities: np.ndarray,
    forces: np.ndarray,
    masses: np.ndarray,
    alive: np.ndarray,
    dt: float,
    num_bodies: int
):
    """Velocity first, then position with the new velocity. Dead bodies stay put."""
    for i in prange(num_bodies):
        if not alive[i]:
            continue

        inv_mass = 1.0 / masses[i]
        velocities[i, 0] += forces[i, 0] * inv_mass * dt
        velocities[i, 1] += forces[i, 1] * inv_mass * dt

        positions[i, 0] += velocities[i, 0] * dt
        positions[i, 1] += velocities[i, 1] * dt


@njit(parallel=True, cache=True)
def despawn_distant(
    positions: np.ndarray,
    alive: np.ndarray,
    despawn_distance_sq: float,
    num_bodies: int
):
    """Kill live bodies farther than the despawn distance from the origin."""
    for i in prange(num_bodies):
        if not alive[i]:
            continue
        x = positions[i, 0]
        y = positions[i, 1]
        if x * x + y * y > despawn_distance_sq:
            alive[i] = False
