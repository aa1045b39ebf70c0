"""Three-component vectors used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec:
        return Vec(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec:
        return Vec(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other: Vec) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        """Vector product."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def prod(self, other: Vec) -> Vec:
        """Component-wise product."""
        return Vec(self.x * other.x, self.y * other.y, self.z * other.z)

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit(self) -> Vec:
        """Vector of length one in the same direction; NaNs for the zero vector."""
        length = self.length()
        if length == 0:
            return Vec(math.nan, math.nan, math.nan)
        return self / length

    def to_rgb(self) -> int:
        """Pack a colour with components in [0, 1] into a 0xRRGGBB integer.

        Components above 1 are clamped to 1, components below 0 to -1.
        The result is a signed 32-bit value.
        """

        def channel(c: float) -> int:
            if c > 1:
                c = 1.0
            elif c < 0:
                c = -1.0
            return int(255.99 * c)

        r, g, b = (channel(c) for c in self)
        rgb = ((r << 16) | (g << 8) | b) & 0xFFFFFFFF
        if rgb >= 1 << 31:
            rgb -= 1 << 32
        return rgb