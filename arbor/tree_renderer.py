"""Recursive branch walk that turns segment profiles into circles.

Each branch is a run of fixed-length steps. At every step the renderer
emits a highlight, a shadow and a body circle, then bends, advances and
decays the working values. At the tip it asks the next-younger genome
for a child profile blended with this branch's decayed values and fans
out the children.

Coordinates are world space with y pointing up; a heading of 0 points
along +X and pi/2 points straight up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from arbor.color import HIGHLIGHT, SHADOW, RGBA
from arbor.config.display import OVERLAY_OFFSET
from arbor.config.tree import STEP_LENGTH
from arbor.exceptions import RenderError
from arbor.genetics.profile import SegmentProfile
from arbor.math_utils import Vector2

if TYPE_CHECKING:
    from arbor.canvas import CircleSink
    from arbor.genetics.lineage import GenomeLineage


_OVERLAY = Vector2(OVERLAY_OFFSET, OVERLAY_OFFSET)


@dataclass(frozen=True)
class BranchTip:
    """Where a branch walk ended.

    ``profile`` carries the decayed end-of-walk size and color; children
    blend toward these values, not the branch's starting ones.
    """

    position: Vector2
    heading: float
    profile: SegmentProfile


def fan_bias(branch_count: int, branch_angle: float) -> float:
    """Heading offset of the first child relative to the parent tip.

    Two children straddle the tip heading; three or more start one full
    spread to the right, which leans wider fans to one side.
    """
    return (-0.5 if branch_count == 2 else -1.0) * branch_angle


def gravity_bend(gravity: float, traveled: float, length: float, heading: float) -> float:
    """Heading change pulling a branch toward straight down.

    Grows linearly with the distance already traveled, scaled by the
    branch length so the pull peaks at ``gravity`` radians per step at the
    tip. The ``cos`` term picks the turn direction so that the branch always
    droops toward -pi/2, and it is zero for a vertical heading, so an upright
    trunk is never bent.
    """
    if length <= 0.0:
        return 0.0
    return -gravity * (traveled / length) * math.cos(heading)


class TreeRenderer:
    """Walks a GenomeLineage recursively and emits filled circles.

    Attributes:
        lineage: Genomes indexed by increasing generation age
        sink: Receiver of draw_filled_circle requests
        step: Distance covered by one step of a branch walk
        branches_drawn: Branch walks performed since the last reset_stats
    """

    def __init__(
        self,
        lineage: "GenomeLineage",
        sink: "CircleSink",
        step: float = STEP_LENGTH,
    ) -> None:
        if step <= 0:
            raise RenderError(f"Step length must be positive, got {step}")
        self.lineage = lineage
        self.sink = sink
        self.step = step
        self.branches_drawn = 0

    def reset_stats(self) -> None:
        self.branches_drawn = 0

    def draw_tree(self, anchor: Vector2, heading: float) -> None:
        """Draw the whole tree from the oldest generation's root profile."""
        self.draw(self.lineage.oldest_index, anchor, heading, self.lineage.root_profile())

    def draw(
        self,
        generation_index: int,
        position: Vector2,
        heading: float,
        profile: SegmentProfile,
    ) -> None:
        """Draw one branch, then recurse into its children.

        Args:
            generation_index: Lineage index of this branch; 0 draws a leaf
                branch with no children
            position: Anchor of the branch (not modified)
            heading: Starting heading in radians
            profile: Values for this branch, typically from Genome.get_profile
        """
        if not 0 <= generation_index < len(self.lineage):
            raise RenderError(
                f"Generation index {generation_index} outside lineage of {len(self.lineage)}"
            )

        tip = self.walk_branch(position, heading, profile)
        if generation_index == 0:
            return

        child_profile = self.lineage[generation_index - 1].get_profile(tip.profile)
        bias = fan_bias(profile.branch_count, profile.branch_angle)
        for i in range(profile.branch_count):
            self.draw(
                generation_index - 1,
                tip.position,
                tip.heading + bias + i * profile.branch_angle,
                child_profile,
            )

    def walk_branch(
        self,
        position: Vector2,
        heading: float,
        profile: SegmentProfile,
    ) -> BranchTip:
        """Emit the circles of a single branch and report where it ended."""
        pos = position.copy()
        size = profile.size
        red, green, blue = profile.red, profile.green, profile.blue

        # Integer step counter keeps the step count at ceil(length / step)
        k = 0
        traveled = 0.0
        while traveled < profile.length:
            self.sink.draw_filled_circle(pos + _OVERLAY, size, HIGHLIGHT)
            self.sink.draw_filled_circle(pos - _OVERLAY, size, SHADOW)
            self.sink.draw_filled_circle(pos.copy(), size, RGBA(red, green, blue))

            heading += gravity_bend(profile.gravity, traveled, profile.length, heading)
            pos.add_inplace(Vector2.from_angle(heading) * self.step)
            heading += profile.turn_step

            size *= profile.size_step_scale
            red *= profile.red_step_scale
            green *= profile.green_step_scale
            blue *= profile.blue_step_scale

            k += 1
            traveled = k * self.step

        self.branches_drawn += 1
        end_profile = replace(profile, size=size, red=red, green=green, blue=blue)
        return BranchTip(position=pos, heading=heading, profile=end_profile)


def count_branches(lineage: "GenomeLineage", generation_index: Optional[int] = None) -> int:
    """Number of branch walks a full draw from ``generation_index`` performs.

    Branch counts come from genome parameters only, so the total is known
    without walking any geometry.
    """
    if generation_index is None:
        generation_index = lineage.oldest_index
    if generation_index == 0:
        return 1
    fan_out = lineage[generation_index].branch_count
    return 1 + fan_out * count_branches(lineage, generation_index - 1)
