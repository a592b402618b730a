"""HUD text overlay."""

import pygame
from OpenGL.GL import *

from config import starfield as config


class TextRenderer:
    """Blits pygame-rendered text lines on top of the GL scene."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16, line_spacing: int = 6):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.line_spacing = line_spacing
        self.color = tuple(int(c * 255) for c in config.COLORS["text"])

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw lines top-down starting at (x, y) from the top-left corner.

        Args:
            lines: Strings to render, one per row
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
        """
        width, height = screen_size

        # Screen-space projection, restored afterwards for the scene camera
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, width, 0, height, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        for line in lines:
            surface = self.font.render(line, True, self.color)
            data = pygame.image.tostring(surface, "RGBA", True)
            w, h = surface.get_size()
            glRasterPos2f(x, height - y - h)
            glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
            y += h + self.line_spacing

        glDisable(GL_BLEND)

        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
