"""Randomized parameter set for one generation level of the tree.

Each generation level (1 = youngest leaves, 8 = trunk) owns one Genome.
All stochastic values, deviations included, are drawn together by
``regenerate`` and stay fixed until the next call, so every frame rendered
in between reproduces identical geometry.
"""

from __future__ import annotations

import math
import random
from typing import Optional

from arbor.config.tree import (
    BRANCH_SPREAD_DEGREES,
    BRANCH_SPREAD_MIN_RATIO,
    COLOR_CHANNEL_MIN,
    COLOR_FROM_ANCESTOR_MIN,
    COLOR_FROM_ANCESTOR_SPAN,
    GENERATION_COUNT,
    LENGTH_FALLOFF,
    MAX_BRANCHES,
    MAX_DEVIATION_PERCENT,
    MAX_GRAVITY,
    MAX_LENGTH,
    MAX_SIZE,
    MAX_TURN_DEGREES,
    MIN_BRANCHES,
    MIN_TURN_DEGREES,
    SIZE_FROM_ANCESTOR_MIN,
    SIZE_FROM_ANCESTOR_SPAN,
    STEP_SCALE_PERCENT,
)
from arbor.exceptions import GenomeError
from arbor.genetics.profile import SegmentProfile
from arbor.math_utils import blend, lerp
from arbor.util.rng import require_rng_param


class Genome:
    """Parameters controlling the shape and color of one tree level.

    Attributes:
        generation: Level index, 1 (leaves) to GENERATION_COUNT (trunk)
        length: Branch length budget before deviation
        size: Starting circle radius before deviation
        size_from_ancestor: Weight pulling a child's size toward its parent's
        size_step_scale: Per-step size multiplier, 1 +/- 1%
        turn_step: Signed heading change per step (radians)
        gravity: Downward pull on the heading, 0 to MAX_GRAVITY
        branch_count: Children spawned at the tip (2 or 3)
        branch_angle: Spread between sibling branches (radians)
        red, green, blue: Base color channels
        red_step_scale, green_step_scale, blue_step_scale: Per-step color multipliers
        color_from_ancestor: Weight pulling a child's color toward its parent's
        *_deviation: Multiplicative jitter, +/- MAX_DEVIATION_PERCENT
    """

    def __init__(self, generation: int, rng: Optional[random.Random] = None) -> None:
        if isinstance(generation, bool) or not isinstance(generation, int):
            raise GenomeError(f"Generation must be an int, got {generation!r}")
        if generation < 1:
            raise GenomeError(f"Generation must be >= 1, got {generation}")

        self._rng = require_rng_param(rng, "Genome.__init__")
        self._generation = generation
        self.regenerate()

    @property
    def generation(self) -> int:
        return self._generation

    def regenerate(self) -> None:
        """Resample every parameter; previously issued profiles go stale."""
        rng = self._rng
        falloff = LENGTH_FALLOFF ** (GENERATION_COUNT / self._generation)

        self.length = falloff * MAX_LENGTH
        self.length_deviation = self.get_deviation()

        self.size = falloff * MAX_SIZE
        self.size_deviation = self.get_deviation()
        self.size_from_ancestor = SIZE_FROM_ANCESTOR_MIN + rng.random() * SIZE_FROM_ANCESTOR_SPAN
        self.size_step_scale = 1.0 + self._sign() * rng.random() * STEP_SCALE_PERCENT

        # Younger levels may curl more
        max_turn = math.radians(
            lerp(MIN_TURN_DEGREES, MAX_TURN_DEGREES, 1.0 - self._generation / GENERATION_COUNT)
        )
        self.turn_step = rng.random() * max_turn * self._sign()
        self.turn_step_deviation = self.get_deviation()

        self.gravity = rng.random() * MAX_GRAVITY

        self.branch_count = rng.randrange(MIN_BRANCHES, MAX_BRANCHES + 1)
        self.branch_angle = (
            BRANCH_SPREAD_MIN_RATIO + (1.0 - BRANCH_SPREAD_MIN_RATIO) * rng.random()
        ) * math.radians(BRANCH_SPREAD_DEGREES)
        self.branch_angle_deviation = self.get_deviation()

        self.red = self._color_channel()
        self.green = self._color_channel()
        self.blue = self._color_channel()

        self.red_step_scale = 1.0 - rng.random() * STEP_SCALE_PERCENT
        self.green_step_scale = 1.0 - rng.random() * STEP_SCALE_PERCENT
        self.blue_step_scale = 1.0 - rng.random() * STEP_SCALE_PERCENT

        self.color_from_ancestor = COLOR_FROM_ANCESTOR_MIN + rng.random() * COLOR_FROM_ANCESTOR_SPAN
        self.color_deviation = self.get_deviation()

    def get_deviation(self) -> float:
        """Draw a multiplicative jitter uniformly from +/- MAX_DEVIATION_PERCENT."""
        return self._rng.uniform(-MAX_DEVIATION_PERCENT, MAX_DEVIATION_PERCENT)

    def get_profile(self, parent: Optional[SegmentProfile] = None) -> SegmentProfile:
        """Build the segment profile for a branch of this generation.

        Args:
            parent: The parent branch's profile with its end-of-walk (decayed)
                size and color. When given, size and color are blended toward
                it by the inherit-from-ancestor weights. Omit for the trunk.

        Returns:
            A new SegmentProfile; identical for repeated calls with equal
            inputs until the next ``regenerate``.
        """
        size = self.size * (1.0 + self.size_deviation)
        color_scale = 1.0 + self.color_deviation
        red = self.red * color_scale
        green = self.green * color_scale
        blue = self.blue * color_scale

        if parent is not None:
            size = blend(size, parent.size, self.size_from_ancestor)
            red = blend(red, parent.red, self.color_from_ancestor)
            green = blend(green, parent.green, self.color_from_ancestor)
            blue = blend(blue, parent.blue, self.color_from_ancestor)

        return SegmentProfile(
            length=self.length * (1.0 + self.length_deviation),
            size=size,
            size_step_scale=self.size_step_scale,
            turn_step=self.turn_step * (1.0 + self.turn_step_deviation),
            gravity=self.gravity,
            branch_count=self.branch_count,
            branch_angle=self.branch_angle * (1.0 + self.branch_angle_deviation),
            red=red,
            green=green,
            blue=blue,
            red_step_scale=self.red_step_scale,
            green_step_scale=self.green_step_scale,
            blue_step_scale=self.blue_step_scale,
        )

    def _sign(self) -> int:
        return self._rng.randrange(2) * 2 - 1

    def _color_channel(self) -> float:
        return COLOR_CHANNEL_MIN + (1.0 - COLOR_CHANNEL_MIN) * self._rng.random()

    def __repr__(self) -> str:
        return (
            f"Genome(generation={self._generation}, length={self.length:.2f}, "
            f"size={self.size:.3f}, branches={self.branch_count}, "
            f"turn_step={self.turn_step:.4f}, gravity={self.gravity:.4f})"
        )
