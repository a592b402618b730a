"""2D star gravity and collision core."""

from .settings import SimulationSettings, ConfigurationError
from .simulation import StarSimulation
from .collisions import CollisionEvent
from .spawner import populate, SpawnError

__all__ = [
    "SimulationSettings",
    "ConfigurationError",
    "StarSimulation",
    "CollisionEvent",
    "populate",
    "SpawnError",
]
