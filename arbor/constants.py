"""Re-exports of every configuration constant.

Import from here when a module needs constants from more than one
config module.
"""

from arbor.config.display import (
    BACKGROUND_COLOR,
    FRAME_RATE,
    OVERLAY_ALPHA,
    OVERLAY_OFFSET,
    ROOT_ANCHOR,
    ROOT_HEADING,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SEPARATOR_WIDTH,
    WINDOW_CAPTION,
)
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
    STEP_LENGTH,
    STEP_SCALE_PERCENT,
)

__all__ = [
    "BACKGROUND_COLOR",
    "BRANCH_SPREAD_DEGREES",
    "BRANCH_SPREAD_MIN_RATIO",
    "COLOR_CHANNEL_MIN",
    "COLOR_FROM_ANCESTOR_MIN",
    "COLOR_FROM_ANCESTOR_SPAN",
    "FRAME_RATE",
    "GENERATION_COUNT",
    "LENGTH_FALLOFF",
    "MAX_BRANCHES",
    "MAX_DEVIATION_PERCENT",
    "MAX_GRAVITY",
    "MAX_LENGTH",
    "MAX_SIZE",
    "MAX_TURN_DEGREES",
    "MIN_BRANCHES",
    "MIN_TURN_DEGREES",
    "OVERLAY_ALPHA",
    "OVERLAY_OFFSET",
    "ROOT_ANCHOR",
    "ROOT_HEADING",
    "SCREEN_HEIGHT",
    "SCREEN_WIDTH",
    "SEPARATOR_WIDTH",
    "SIZE_FROM_ANCESTOR_MIN",
    "SIZE_FROM_ANCESTOR_SPAN",
    "STEP_LENGTH",
    "STEP_SCALE_PERCENT",
    "WINDOW_CAPTION",
]
