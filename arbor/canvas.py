"""Draw-primitive boundary between the tree core and a drawing backend.

The core only ever asks for filled circles. Any object with a matching
``draw_filled_circle`` method satisfies CircleSink without inheriting
from it, so the pygame backend, the headless recorder and test doubles
all plug into the renderer the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, runtime_checkable

from arbor.color import RGBA
from arbor.math_utils import Vector2


@runtime_checkable
class CircleSink(Protocol):
    """Receiver of the renderer's draw requests."""

    def draw_filled_circle(self, center: Vector2, radius: float, color: RGBA) -> None:
        """Draw a filled circle at ``center`` (world coordinates, y up)."""
        ...


@dataclass(frozen=True)
class CircleCommand:
    center: Vector2
    radius: float
    color: RGBA


class RecordingCanvas:
    """CircleSink that records every request instead of drawing it.

    Used by headless mode for statistics and by tests to inspect exactly
    what the renderer emitted.
    """

    def __init__(self) -> None:
        self.commands: List[CircleCommand] = []

    def draw_filled_circle(self, center: Vector2, radius: float, color: RGBA) -> None:
        self.commands.append(CircleCommand(center.copy(), radius, color))

    def clear(self) -> None:
        self.commands.clear()

    def __len__(self) -> int:
        return len(self.commands)
