"""Running axis-aligned bounding box of live body positions."""

import math
import numpy as np
from numba import njit


@njit(cache=True)
def compute_extents(positions: np.ndarray, alive: np.ndarray, num_bodies: int,
                    min_x: float, max_x: float, min_y: float, max_y: float) -> tuple:
    """Widen the given extents by every live position. Never shrinks them."""
    for i in range(num_bodies):
        if not alive[i]:
            continue
        x = positions[i, 0]
        y = positions[i, 1]
        if x < min_x:
            min_x = x
        if x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        if y > max_y:
            max_y = y
    return min_x, max_x, min_y, max_y


class Bounds:
    """
    Grow-only bounding box feeding the spatial grid.

    Starts empty; the first observed position collapses it to a point.
    Dead or despawned bodies never retract it.
    """

    def __init__(self):
        self.min_x = math.inf
        self.max_x = -math.inf
        self.min_y = math.inf
        self.max_y = -math.inf

    @property
    def empty(self) -> bool:
        return self.min_x > self.max_x

    @property
    def origin(self) -> tuple:
        if self.empty:
            return 0.0, 0.0
        return self.min_x, self.min_y

    @property
    def size(self) -> tuple:
        """Universe size (width, height)."""
        if self.empty:
            return 0.0, 0.0
        return self.max_x - self.min_x, self.max_y - self.min_y

    def widen(self, x: float, y: float):
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x
        if y < self.min_y:
            self.min_y = y
        if y > self.max_y:
            self.max_y = y

    def widen_from(self, positions: np.ndarray, alive: np.ndarray):
        """Fold every live position into the box."""
        num_bodies = len(alive)
        if num_bodies == 0:
            return
        self.min_x, self.max_x, self.min_y, self.max_y = compute_extents(
            positions, alive, num_bodies,
            float(self.min_x), float(self.max_x),
            float(self.min_y), float(self.max_y)
        )

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def __repr__(self):
        return (f"Bounds(x=[{self.min_x:.3f}, {self.max_x:.3f}], "
                f"y=[{self.min_y:.3f}, {self.max_y:.3f}])")
