"""Random initial population with minimum separation."""

import math
from typing import List, Optional

import numpy as np


class SpawnError(RuntimeError):
    """Raised when no free position is found within the attempt budget."""


def random_spawn(rng: np.random.Generator, spawn_radius: float) -> tuple:
    """Uniform random point inside a disc centred on the origin."""
    r = spawn_radius * math.sqrt(rng.random())
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return r * math.cos(angle), r * math.sin(angle)


def random_velocity(rng: np.random.Generator, speed_range: tuple) -> tuple:
    """Speed uniform in ``speed_range`` along a random heading."""
    speed = rng.uniform(speed_range[0], speed_range[1])
    angle = rng.uniform(0.0, 2.0 * math.pi)
    return speed * math.cos(angle), speed * math.sin(angle)


def populate(
    sim,
    count: Optional[int] = None,
    spawn_radius: Optional[float] = None,
    rng: Optional[np.random.Generator] = None,
    max_attempts: int = 1000
) -> List[int]:
    """
    Place ``count`` bodies, retrying any placement the simulation rejects.

    Defaults for count, radius and seed come from the simulation settings.

    Returns:
        Ids of the spawned bodies, in spawn order
    """
    settings = sim.settings
    count = settings.star_count if count is None else count
    spawn_radius = settings.spawn_radius if spawn_radius is None else spawn_radius
    if rng is None:
        rng = np.random.default_rng(settings.seed)

    mass_lo, mass_hi = settings.mass_range
    ids = []
    rejected = 0

    for _ in range(count):
        velocity = random_velocity(rng, settings.initial_speed_range)
        mass = rng.uniform(mass_lo, mass_hi) if mass_hi > mass_lo else mass_lo

        for _attempt in range(max_attempts):
            body_id = sim.spawn_body(random_spawn(rng, spawn_radius), velocity, mass)
            if body_id is not None:
                ids.append(body_id)
                break
            rejected += 1
        else:
            raise SpawnError(
                f"No free position after {max_attempts} attempts "
                f"({len(ids)}/{count} placed, radius {spawn_radius})"
            )

    print(f"[Stars] Spawned {len(ids):,} bodies ({rejected:,} placements retried)")
    return ids
