"""Rays, materials, hit records and scattering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from minirt.rng import XorShift
from minirt.vector import Vec


@dataclass(frozen=True)
class Ray:
    pos: Vec
    dir: Vec

    def at(self, t: float) -> Vec:
        """Point reached after travelling t along the direction."""
        return self.dir * t + self.pos


class MaterialKind(enum.Flag):
    NONE = 0
    LAMBERT = enum.auto()
    METAL = enum.auto()


@dataclass
class Material:
    attenuation: Vec
    kind: MaterialKind = MaterialKind.NONE
    fuzz: float = 0.0


@dataclass
class HitRecord:
    t: float
    p: Vec
    normal: Vec
    material: Material = field(default_factory=lambda: Material(Vec()))


def reflect(v: Vec, n: Vec) -> Vec:
    """Mirror v about the normal n."""
    return v - n * (2 * v.dot(n))


def random_in_unit_sphere(rng: XorShift) -> Vec:
    """Draw points until one falls strictly inside the unit sphere.

    The first candidate is taken from [-1, 0) on each axis, the later ones
    from [-1, 1).
    """
    one = Vec(1.0, 1.0, 1.0)
    point = Vec(rng.random(), rng.random(), rng.random()) - one
    while point.squared_length() >= 1:
        point = Vec(rng.random(), rng.random(), rng.random()) * 2 - one
    return point


def scatter(rec: HitRecord, rng: XorShift, ray_in: Ray) -> Ray | None:
    """Return the ray scattered at a hit, or None if the material does not scatter."""
    material = rec.material
    if material.kind & MaterialKind.LAMBERT:
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        return Ray(rec.p, target - rec.p)
    if material.kind & MaterialKind.METAL:
        reflected = reflect(ray_in.dir.unit(), rec.normal)
        direction = random_in_unit_sphere(rng) * material.fuzz + reflected
        return Ray(rec.p, direction)
    return None