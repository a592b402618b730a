"""Linear drift of the gravitational constant."""


class GravityRamp:
    """
    Drifts G by a fixed rate per second, clamped to [-max_abs, +max_abs].

    A negative rate carries G through zero into repulsion.
    """

    def __init__(self, value: float, rate_per_second: float, max_abs: float):
        self.rate_per_second = float(rate_per_second)
        self.max_abs = float(max_abs)
        self.value = float(value)

    def _clamp(self, value: float) -> float:
        return max(-self.max_abs, min(self.max_abs, value))

    def advance(self, dt: float) -> float:
        """Apply one tick of drift and return the new G."""
        self.value = self._clamp(self.value + self.rate_per_second * dt)
        return self.value

    @property
    def repulsive(self) -> bool:
        return self.value < 0.0
