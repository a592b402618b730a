"""
2D Star Field Simulation
========================

Stars attract each other through a grid-limited Newtonian force, merge or
annihilate on contact, and the gravitational constant can drift over time.

Controls:
    - Move cursor toward an edge: Pan camera
    - Z/X: Zoom in/out
    - SPACE: Pause/Resume simulation
    - R: Reset simulation
    - H: Toggle help text
    - ESC: Quit
"""

from config import starfield as config
from core import StarfieldApplication
from starfield import SimulationSettings, StarSimulation, populate


def create_simulation() -> StarSimulation:
    """Fresh simulation populated from config.starfield."""
    print("[App] Initializing star simulation...")
    simulation = StarSimulation(SimulationSettings.from_config(config.STARS))
    populate(simulation)
    return simulation


def main():
    app = StarfieldApplication(create_simulation(), simulation_factory=create_simulation)
    app.run()


if __name__ == "__main__":
    main()
