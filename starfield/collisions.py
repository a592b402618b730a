"""Collision resolution: annihilation or absorption."""

import math
from typing import List, NamedTuple

import numpy as np
from numba import njit


# outcomes[k, 2] codes
SKIPPED = -1
ABSORBED = 0
ANNIHILATED = 1


class CollisionEvent(NamedTuple):
    survivor: int
    casualty: int
    annihilated: bool


@njit(cache=True)
def resolve_collisions(
    pairs: np.ndarray,
    num_pairs: int,
    masses: np.ndarray,
    velocities: np.ndarray,
    alive: np.ndarray,
    survival_ratio: float,
    retention: float,
    outcomes: np.ndarray
):
    """
    Resolve flagged pairs in detection order.

    A body takes part in at most one collision per call; pairs touching a
    body that is dead or already resolved are skipped. Each row of
    ``outcomes`` receives (survivor, casualty, code).
    """
    num_bodies = masses.shape[0]
    involved = np.zeros(num_bodies, dtype=np.bool_)

    for k in range(num_pairs):
        i = pairs[k, 0]
        j = pairs[k, 1]

        if not alive[i] or not alive[j] or involved[i] or involved[j]:
            outcomes[k, 0] = i
            outcomes[k, 1] = j
            outcomes[k, 2] = SKIPPED
            continue

        involved[i] = True
        involved[j] = True

        # Ties keep the detecting body
        if masses[j] > masses[i]:
            survivor = j
            casualty = i
        else:
            survivor = i
            casualty = j

        outcomes[k, 0] = survivor
        outcomes[k, 1] = casualty

        ms = masses[survivor]
        mc = masses[casualty]

        if ms / mc < survival_ratio:
            alive[survivor] = False
            alive[casualty] = False
            outcomes[k, 2] = ANNIHILATED
            continue

        svx = velocities[survivor, 0]
        svy = velocities[survivor, 1]
        cvx = velocities[casualty, 0]
        cvy = velocities[casualty, 1]
        ke_survivor = 0.5 * ms * (svx * svx + svy * svy)
        ke_casualty = 0.5 * mc * (cvx * cvx + cvy * cvy)

        new_mass = (ms + mc) * retention
        new_energy = ke_survivor + ke_casualty * retention

        # Keep the survivor's heading; borrow the casualty's if it was at rest
        speed = math.sqrt(svx * svx + svy * svy)
        if speed > 0.0:
            dir_x = svx / speed
            dir_y = svy / speed
        else:
            speed = math.sqrt(cvx * cvx + cvy * cvy)
            if speed > 0.0:
                dir_x = cvx / speed
                dir_y = cvy / speed
            else:
                dir_x = 0.0
                dir_y = 0.0

        new_speed = 0.0
        if new_mass > 0.0:
            new_speed = math.sqrt(2.0 * new_energy / new_mass)

        if new_mass > 0.0:
            masses[survivor] = new_mass
            velocities[survivor, 0] = dir_x * new_speed
            velocities[survivor, 1] = dir_y * new_speed
        else:
            # Zero retention leaves nothing behind
            alive[survivor] = False
        alive[casualty] = False
        outcomes[k, 2] = ABSORBED


def collect_events(outcomes: np.ndarray, num_pairs: int) -> List[CollisionEvent]:
    """Turn the outcome rows of resolved (non-skipped) pairs into events."""
    events = []
    for survivor, casualty, code in outcomes[:num_pairs]:
        if code == SKIPPED:
            continue
        events.append(CollisionEvent(int(survivor), int(casualty), bool(code == ANNIHILATED)))
    return events
