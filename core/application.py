"""Main application class that ties everything together."""

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import starfield as config
from .camera import Camera2D
from .input_handler import InputHandler
from rendering import StarRenderer, TextRenderer


class StarfieldApplication:
    """
    Window, fixed-timestep physics clock and rendering for one simulation.

    The simulation is injected; ``simulation_factory`` (optional) builds a
    fresh one when the user presses R.
    """

    def __init__(self, simulation, simulation_factory=None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        self.simulation = simulation
        self.simulation_factory = simulation_factory

        # Core components
        aspect = config.WINDOW["width"] / config.WINDOW["height"]
        self.camera = Camera2D(simulation.settings.spawn_radius, aspect)
        self.input_handler = InputHandler(self.camera)

        # Rendering components
        self.star_renderer = StarRenderer()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.paused = False
        self.show_help = True
        self.fixed_dt = float(config.PHYSICS["fixed_dt"])
        self.max_steps = int(config.PHYSICS["max_steps_per_frame"])
        self._accumulator = 0.0

        glClearColor(*config.COLORS["background"])
        print("[App] Ready!")

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

        handler = self.input_handler
        if handler.pause_requested:
            handler.pause_requested = False
            self.paused = not self.paused
            print(f"[App] {'Paused' if self.paused else 'Running'}")
        if handler.help_requested:
            handler.help_requested = False
            self.show_help = not self.show_help
        if handler.reset_requested:
            handler.reset_requested = False
            if self.simulation_factory is not None:
                print("[App] Resetting simulation...")
                self.simulation = self.simulation_factory()
                self._accumulator = 0.0

    def _update(self, dt: float):
        """Run as many fixed physics ticks as the frame time covers."""
        self.input_handler.handle_continuous_input(dt)

        if self.paused:
            return

        self._accumulator += dt
        steps = 0
        while self._accumulator >= self.fixed_dt and steps < self.max_steps:
            self.simulation.step(self.fixed_dt)
            self._accumulator -= self.fixed_dt
            steps += 1

        # Fell behind: drop the backlog rather than spiral
        if steps == self.max_steps:
            self._accumulator = 0.0

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT)
        self.camera.apply()

        sim = self.simulation
        self.star_renderer.draw(sim.live_positions(), sim.live_masses(), sim.mass_range())

        status = "PAUSED" if self.paused else "RUNNING"
        lines = [
            f"Stars: {sim.live_count:,}/{sim.num_bodies:,}  |  FPS: {self.fps:.0f}  |  {status}",
            f"G = {sim.gravitational_constant:+.3f}  |  t = {sim.elapsed:.1f}s  |  collisions: {sim.total_collisions:,}",
        ]
        if self.show_help:
            lines.append("Cursor to edge: Pan | Z/X: Zoom | SPACE: Pause | R: Reset | H: Toggle help")

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.text_renderer.draw_lines(lines, 10, 10, screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")

        while self.running:
            dt = self.clock.tick(120) / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
