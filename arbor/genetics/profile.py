"""Per-branch segment profile."""

from __future__ import annotations

from dataclasses import dataclass

from arbor.color import RGBA


@dataclass(frozen=True)
class SegmentProfile:
    """Starting values and per-step decay factors for one branch.

    Produced fresh by ``Genome.get_profile``. The renderer never mutates an
    instance; the decayed end-of-branch values come back as a new profile
    built with ``dataclasses.replace``.
    """

    # Length budget for the branch walk
    length: float

    # Circle radius and its per-step multiplier
    size: float
    size_step_scale: float

    # Heading change per step (radians) and downward pull on the heading
    turn_step: float
    gravity: float

    # Fan-out of the children spawned at the branch tip
    branch_count: int
    branch_angle: float

    # Color channels (0.0-1.0, may drift slightly above) and their multipliers
    red: float
    green: float
    blue: float
    red_step_scale: float
    green_step_scale: float
    blue_step_scale: float

    @property
    def color(self) -> RGBA:
        return RGBA(self.red, self.green, self.blue)
