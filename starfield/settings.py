"""Simulation settings record and its validation."""

import math
from dataclasses import dataclass, asdict
from typing import Optional, Tuple


class ConfigurationError(ValueError):
    """Raised when settings cannot produce a valid simulation."""


@dataclass(frozen=True)
class SimulationSettings:
    """
    Everything the physics core needs, fixed at construction.

    Attributes:
        gravitational_constant: Starting value of G
        ramp_rate_per_second: Linear drift applied to G every tick
        max_abs_gravitational_constant: G is clamped to +/- this value
        contact_radius: Pair distance at or below which bodies collide
        mass_range: (min, max) masses handed out by the spawner
        initial_speed_range: (min, max) spawn speeds
        distance_stretch: Distance scale in the force denominator
        grid_subdivisions: Grid is N x N cells
        despawn_distance: Bodies farther than this from the origin die (None = off)
        mass_survival_ratio: Heavier/lighter ratio needed to absorb instead of annihilate
        collision_mass_retention: Fraction of mass and kinetic energy kept on absorption
        star_count: Bodies placed by the spawner
        spawn_radius: Spawner disc radius
        seed: Spawner RNG seed (None = random)
    """
    gravitational_constant: float = 2.0
    ramp_rate_per_second: float = 0.0
    max_abs_gravitational_constant: float = 10.0
    contact_radius: float = 1.0
    mass_range: Tuple[float, float] = (1.0, 10.0)
    initial_speed_range: Tuple[float, float] = (0.0, 1.5)
    distance_stretch: float = 1.0
    grid_subdivisions: int = 16
    despawn_distance: Optional[float] = None
    mass_survival_ratio: float = 1.5
    collision_mass_retention: float = 0.9
    star_count: int = 400
    spawn_radius: float = 60.0
    seed: Optional[int] = None

    @classmethod
    def from_config(cls, cfg: dict, **overrides) -> "SimulationSettings":
        """Build settings from a ``config.starfield.STARS``-style dictionary."""
        values = dict(
            gravitational_constant=float(cfg["G"]),
            ramp_rate_per_second=float(cfg.get("G_ramp_per_second", 0.0)),
            max_abs_gravitational_constant=float(cfg["max_abs_G"]),
            contact_radius=float(cfg["contact_radius"]),
            mass_range=tuple(float(m) for m in cfg["mass_range"]),
            initial_speed_range=tuple(float(s) for s in cfg["initial_speed_range"]),
            distance_stretch=float(cfg.get("distance_stretch", 1.0)),
            grid_subdivisions=cfg["grid_subdivisions"],
            despawn_distance=cfg.get("despawn_distance"),
            mass_survival_ratio=float(cfg["mass_survival_ratio"]),
            collision_mass_retention=float(cfg["collision_mass_retention"]),
            star_count=int(cfg.get("count", 0)),
            spawn_radius=float(cfg.get("spawn_radius", 0.0)),
            seed=cfg.get("seed"),
        )
        values.update(overrides)
        return cls(**values)

    def validate(self):
        """Raise ConfigurationError listing every invalid field."""
        problems = []

        n = self.grid_subdivisions
        if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
            problems.append(f"grid_subdivisions must be a positive integer, got {n!r}")

        if not self.contact_radius > 0:
            problems.append(f"contact_radius must be > 0, got {self.contact_radius}")

        lo, hi = self.mass_range
        if lo > hi:
            problems.append(f"mass_range min {lo} exceeds max {hi}")
        elif lo <= 0:
            problems.append(f"mass_range must be positive, got {self.mass_range}")

        lo, hi = self.initial_speed_range
        if lo > hi or lo < 0:
            problems.append(f"initial_speed_range must satisfy 0 <= min <= max, got {self.initial_speed_range}")

        if not 0.0 <= self.collision_mass_retention <= 1.0:
            problems.append(
                f"collision_mass_retention must be in [0, 1], got {self.collision_mass_retention}"
            )

        if self.max_abs_gravitational_constant < 0:
            problems.append(
                f"max_abs_gravitational_constant must be >= 0, got {self.max_abs_gravitational_constant}"
            )

        if not self.distance_stretch > 0:
            problems.append(f"distance_stretch must be > 0, got {self.distance_stretch}")

        if self.despawn_distance is not None and not self.despawn_distance > 0:
            problems.append(f"despawn_distance must be > 0 or None, got {self.despawn_distance}")

        if self.mass_survival_ratio < 0:
            problems.append(f"mass_survival_ratio must be >= 0, got {self.mass_survival_ratio}")

        for name in ("gravitational_constant", "ramp_rate_per_second"):
            if not math.isfinite(getattr(self, name)):
                problems.append(f"{name} must be finite")

        if problems:
            raise ConfigurationError("; ".join(problems))

    def as_dict(self) -> dict:
        return asdict(self)
