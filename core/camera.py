"""Orthographic camera for the 2D star field."""

import math
import numpy as np
from OpenGL.GL import *
from config import starfield as config


class Camera2D:
    """Top-down camera that pans toward the cursor and zooms on Z/X."""

    def __init__(self, spawn_radius: float, aspect: float):
        self.center = np.array([0.0, 0.0])
        self.half_height = spawn_radius + config.CAMERA["size_offset"]
        self.aspect = aspect
        self.zoom_min, self.zoom_max = config.CAMERA["zoom_range"]
        self.half_height = self._clamp_zoom(self.half_height)

    def _clamp_zoom(self, value: float) -> float:
        return max(self.zoom_min, min(self.zoom_max, value))

    def pan_toward(self, viewport_pos: tuple, dt: float):
        """
        Move toward the cursor while it sits outside the central dead zone.

        Args:
            viewport_pos: Cursor position in viewport units, (0, 0) bottom-left
            dt: Frame time in seconds
        """
        vx, vy = viewport_pos
        if not (0.0 <= vx <= 1.0 and 0.0 <= vy <= 1.0):
            return

        dx = vx - 0.5
        dy = vy - 0.5
        dist = math.hypot(dx, dy)
        if dist < config.CAMERA["move_trigger"]:
            return

        step = config.CAMERA["move_speed"] * dt
        self.center[0] += step * dx / dist
        self.center[1] += step * dy / dist

    def zoom(self, direction: int, dt: float):
        """Zoom in for negative direction, out for positive."""
        change = direction * config.CAMERA["zoom_sensitivity"] * dt
        self.half_height = self._clamp_zoom(self.half_height + change)

    def visible_extent(self) -> tuple:
        """(left, right, bottom, top) in world units."""
        half_width = self.half_height * self.aspect
        cx, cy = self.center
        return cx - half_width, cx + half_width, cy - self.half_height, cy + self.half_height

    def apply(self):
        """Load the orthographic projection for the current view."""
        left, right, bottom, top = self.visible_extent()
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(left, right, bottom, top, -1.0, 1.0)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
