"""Point rendering for live stars."""

import numpy as np
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import starfield as config
from .palette import mass_colors


class StarRenderer:
    """Draws every live star as a smooth point coloured by mass."""

    def __init__(self):
        self.palette = config.COLORS["star_bands"]
        self.point_size = float(config.COLORS["point_size"])
        self._vbo_positions = None
        self._vbo_colors = None
        self._vbos_initialized = False

    def _init_vbos(self, positions: np.ndarray, colors: np.ndarray):
        """Initialize VBOs for rendering."""
        try:
            self._vbo_positions = vbo.VBO(positions, usage=GL_DYNAMIC_DRAW)
            self._vbo_colors = vbo.VBO(colors, usage=GL_DYNAMIC_DRAW)
            self._vbos_initialized = True
        except Exception as e:
            print(f"[Stars] VBO init failed: {e}")
            self._vbos_initialized = False

    def draw(self, positions: np.ndarray, masses: np.ndarray, mass_range: tuple):
        """Render stars as point sprites."""
        if len(positions) == 0:
            return

        pos_f32 = np.ascontiguousarray(positions, dtype=np.float32)
        colors = mass_colors(masses, mass_range, self.palette)

        if not self._vbos_initialized:
            self._init_vbos(pos_f32, colors)

        glEnable(GL_POINT_SMOOTH)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE)  # Additive blending for glow effect
        glPointSize(self.point_size)

        if self._vbos_initialized and self._vbo_positions is not None:
            self._vbo_positions.set_array(pos_f32)
            self._vbo_colors.set_array(colors)

            self._vbo_positions.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, None)

            self._vbo_colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, None)

            glDrawArrays(GL_POINTS, 0, len(pos_f32))

            self._vbo_positions.unbind()
            self._vbo_colors.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)
        else:
            # Fallback
            glEnableClientState(GL_VERTEX_ARRAY)
            glEnableClientState(GL_COLOR_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, pos_f32)
            glColorPointer(3, GL_FLOAT, 0, colors)
            glDrawArrays(GL_POINTS, 0, len(pos_f32))
            glDisableClientState(GL_VERTEX_ARRAY)
            glDisableClientState(GL_COLOR_ARRAY)

        glDisable(GL_BLEND)
        glDisable(GL_POINT_SMOOTH)
