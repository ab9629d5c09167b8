"""Pygame rendering backend for the tree generator."""

from rendering.pygame_canvas import PygameCanvas

__all__ = ["PygameCanvas"]
