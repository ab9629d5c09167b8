"""Color value type and conversions.

Colors travel through the core as floats in 0.0-1.0 so that per-step
decay and ancestor blending stay exact; only the drawing backend turns
them into 8-bit channels.
"""

from typing import NamedTuple

from arbor.config.display import OVERLAY_ALPHA


class RGBA(NamedTuple):
    """Float color with alpha, channels nominally in 0.0-1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0


def channel_to_byte(value: float) -> int:
    """Convert a float channel to 0-255, clamping out-of-range values.

    Deviation can push a channel a few percent above 1.0, so clamping is
    part of the conversion rather than an error.

    Example:
        >>> channel_to_byte(0.5)
        128
        >>> channel_to_byte(1.04)
        255
    """
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(round(value * 255))


def to_rgba255(color: RGBA) -> tuple[int, int, int, int]:
    """Convert an RGBA float color to an 8-bit (R, G, B, A) tuple."""
    return (
        channel_to_byte(color.r),
        channel_to_byte(color.g),
        channel_to_byte(color.b),
        channel_to_byte(color.a),
    )


# Soft highlight and drop shadow drawn around every segment
HIGHLIGHT = RGBA(1.0, 1.0, 1.0, OVERLAY_ALPHA)
SHADOW = RGBA(0.0, 0.0, 0.0, OVERLAY_ALPHA)
