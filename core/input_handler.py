"""Input handling for keyboard and mouse events."""

import pygame
from pygame.locals import *
from config import starfield as config

from .camera import Camera2D


class InputHandler:
    """Maps pygame input onto the camera and application toggles."""

    def __init__(self, camera: Camera2D):
        self.camera = camera
        self.pause_requested = False
        self.reset_requested = False
        self.help_requested = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_SPACE:
                self.pause_requested = True
            elif event.key == K_r:
                self.reset_requested = True
            elif event.key == K_h:
                self.help_requested = True
        elif event.type == MOUSEWHEEL:
            self.camera.zoom(-event.y, 0.1)

        return True

    def handle_continuous_input(self, dt: float):
        """Handle held keys and cursor-driven panning (called each frame)."""
        keys = pygame.key.get_pressed()

        if keys[K_z]:
            self.camera.zoom(-1, dt)
        if keys[K_x]:
            self.camera.zoom(1, dt)

        if pygame.mouse.get_focused():
            mx, my = pygame.mouse.get_pos()
            viewport = (
                mx / config.WINDOW["width"],
                1.0 - my / config.WINDOW["height"]
            )
            self.camera.pan_toward(viewport, dt)
