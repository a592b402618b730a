"""
Neighbour-restricted pairwise gravity.

Only bodies sharing a cell or sitting in one of the 8 surrounding cells
interact. Each unordered pair is visited once (from the lower id) and the
force is applied to both bodies with opposite signs.
"""

import math
import numpy as np
from numba import njit

from .grid import cell_hash, cell_unhash


# Unit direction used when two bodies sit on exactly the same point
FALLBACK_DIRECTION = (1.0, 0.0)
ZERO_DISTANCE = 1e-12


@njit(cache=True)
def accumulate_forces(
    positions: np.ndarray,
    masses: np.ndarray,
    alive: np.ndarray,
    body_cells: np.ndarray,
    sorted_ids: np.ndarray,
    cell_starts: np.ndarray,
    cell_counts: np.ndarray,
    grid_dim: int,
    G: float,
    stretch_sq: float,
    contact_radius: float,
    forces: np.ndarray,
    pairs: np.ndarray
) -> int:
    """
    Fill ``forces`` with the net gravitational force on every body and write
    collision candidates into ``pairs``.

    A pair closer than ``contact_radius`` exerts no force. Each body records
    at most one candidate: the first one found scanning neighbour cells row
    by row, ids ascending. Scanning continues afterwards so the body still
    feels its other neighbours.

    Returns:
        Number of rows written to ``pairs``
    """
    num_bodies = positions.shape[0]
    fallback_x, fallback_y = FALLBACK_DIRECTION

    for i in range(num_bodies):
        forces[i, 0] = 0.0
        forces[i, 1] = 0.0

    num_pairs = 0

    for i in range(num_bodies):
        if not alive[i]:
            continue

        cell = body_cells[i]
        if cell < 0:
            continue
        cx, cy = cell_unhash(cell, grid_dim)

        px = positions[i, 0]
        py = positions[i, 1]
        mi = masses[i]
        candidate = -1

        for dcy in range(-1, 2):
            ncy = cy + dcy
            if ncy < 0 or ncy >= grid_dim:
                continue

            for dcx in range(-1, 2):
                ncx = cx + dcx
                if ncx < 0 or ncx >= grid_dim:
                    continue

                neighbor = cell_hash(ncx, ncy, grid_dim)
                start = cell_starts[neighbor]
                if start == -1:
                    continue

                for k in range(cell_counts[neighbor]):
                    j = sorted_ids[start + k]
                    # Lower id already handled this pair (also skips i == j)
                    if j <= i or not alive[j]:
                        continue

                    dx = positions[j, 0] - px
                    dy = positions[j, 1] - py
                    dist_sq = dx * dx + dy * dy
                    dist = math.sqrt(dist_sq)

                    if dist < ZERO_DISTANCE:
                        ux = fallback_x
                        uy = fallback_y
                    else:
                        ux = dx / dist
                        uy = dy / dist

                    if dist <= contact_radius:
                        if candidate == -1:
                            candidate = j
                        continue

                    magnitude = G * mi * masses[j] / (dist_sq * stretch_sq)
                    fx = magnitude * ux
                    fy = magnitude * uy

                    forces[i, 0] += fx
                    forces[i, 1] += fy
                    forces[j, 0] -= fx  # Newton's 3rd law
                    forces[j, 1] -= fy

        if candidate != -1:
            pairs[num_pairs, 0] = i
            pairs[num_pairs, 1] = candidate
            num_pairs += 1

    return num_pairs


def pair_force(pos_i, pos_j, mass_i: float, mass_j: float, G: float,
               stretch: float = 1.0) -> tuple:
    """Force body j exerts on body i, outside any grid. Handy for checks."""
    dx = pos_j[0] - pos_i[0]
    dy = pos_j[1] - pos_i[1]
    dist_sq = dx * dx + dy * dy
    dist = math.sqrt(dist_sq)
    if dist < ZERO_DISTANCE:
        return 0.0, 0.0
    magnitude = G * mass_i * mass_j / (dist_sq * stretch * stretch)
    return magnitude * dx / dist, magnitude * dy / dist
