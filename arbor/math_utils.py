"""Math utilities for the branch walk.

Provides a small Vector2 for 2D positions plus the scalar helpers the
genome sampling and renderer share.
"""

from __future__ import annotations

import math


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation ``a + (b - a) * t``.

    Returns ``a`` exactly at ``t == 0``. At ``t == 1`` the result is ``b``
    up to float rounding; callers that need an exact ``b`` use ``blend``.
    """
    return a + (b - a) * t


def blend(own: float, ancestor: float, weight: float) -> float:
    """Pull ``own`` toward ``ancestor`` by ``weight``.

    Same as ``lerp`` but the boundaries are exact: weight 0 yields ``own``
    and weight 1 yields ``ancestor`` bit for bit.
    """
    if weight == 1.0:
        return ancestor
    return lerp(own, ancestor, weight)


class Vector2:
    """A 2D vector in world coordinates (y points up)."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    @classmethod
    def from_angle(cls, angle: float) -> "Vector2":
        """Unit vector pointing along ``angle`` (radians, 0 = +X)."""
        return cls(math.cos(angle), math.sin(angle))

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Exact component equality; geometry must reproduce bit for bit."""
        if other.__class__ is not Vector2:
            return False
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Add another vector to this one in-place."""
        self.x += other.x
        self.y += other.y
        return self


__all__ = ["Vector2", "blend", "lerp"]
