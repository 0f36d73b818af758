"""Component-based 2D game engine with JSON scenes and pygame screen and input services."""

__version__ = "0.1.0"