"""Rendering components for the star field viewer."""

from .stars import StarRenderer
from .text import TextRenderer

__all__ = ["StarRenderer", "TextRenderer"]
