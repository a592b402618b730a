"""Core application components."""

from .camera import Camera2D
from .input_handler import InputHandler
from .application import StarfieldApplication

__all__ = ["Camera2D", "InputHandler", "StarfieldApplication"]
