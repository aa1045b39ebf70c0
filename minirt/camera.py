"""Pinhole camera producing primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from minirt.ray import Ray
from minirt.vector import Vec


@dataclass
class Camera:
    """A camera at a position looking along a direction with a field of view in degrees."""

    position: Vec
    direction: Vec
    fov: float
    up: Vec = field(default_factory=lambda: Vec(0.0, 1.0, 0.0))
    horizontal: Vec = field(default_factory=Vec, init=False)
    vertical: Vec = field(default_factory=Vec, init=False)
    lower_left: Vec = field(default_factory=Vec, init=False)

    def setup(self, aspect: float) -> Camera:
        """Compute the viewport for the given width/height ratio."""
        theta = self.fov * (math.pi / 180)
        theta = 2 * math.atan(math.tan(theta / 2) * aspect)
        self.direction = self.direction.unit()
        half_height = math.tan(theta / 2)
        half_width = aspect * half_height
        u = self.up.cross(self.direction).unit()
        v = self.direction.cross(u)
        self.lower_left = (
            self.position - self.direction - u * half_width - v * half_height
        )
        self.horizontal = u * (2 * half_width)
        self.vertical = v * (2 * half_height)
        return self

    def ray(self, u: float, v: float) -> Ray:
        """Primary ray through the viewport point (u, v), both in [0, 1]."""
        d = (
            self.horizontal * u
            + self.vertical * v
            + self.lower_left
            - self.position
        )
        return Ray(self.position, Vec(-d.x, d.y, d.z))