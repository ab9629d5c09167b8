"""Pygame drawing backend for the tree renderer."""

import pygame
import pygame.gfxdraw

from arbor.color import RGBA, to_rgba255
from arbor.math_utils import Vector2


class PygameCanvas:
    """CircleSink that draws onto a pygame surface.

    World coordinates have y pointing up with the origin at the bottom-left
    corner of the surface; screen rows grow downward, so y is flipped here.

    Attributes:
        surface: Pygame surface to draw onto
        circles_drawn: Circles drawn since the last begin_frame
    """

    def __init__(self, surface: pygame.Surface) -> None:
        """Initialize the canvas.

        Args:
            surface: Pygame surface to draw onto
        """
        self.surface = surface
        self.circles_drawn: int = 0

    def begin_frame(self, background: tuple) -> None:
        """Clear the surface and reset the per-frame counter."""
        self.surface.fill(background)
        self.circles_drawn = 0

    def to_screen(self, point: Vector2) -> tuple[float, float]:
        return (point.x, self.surface.get_height() - point.y)

    def draw_filled_circle(self, center: Vector2, radius: float, color: RGBA) -> None:
        """Draw a filled circle, alpha-blending translucent colors.

        pygame.draw ignores alpha on an opaque surface, so translucent
        circles go through gfxdraw, which blends but only takes integers.
        """
        x, y = self.to_screen(center)
        rgba = to_rgba255(color)
        if color.is_opaque:
            pygame.draw.circle(self.surface, rgba[:3], (x, y), radius)
        else:
            pygame.gfxdraw.filled_circle(
                self.surface, int(round(x)), int(round(y)), max(1, int(round(radius))), rgba
            )
        self.circles_drawn += 1
