"""Scene primitives and their ray intersection tests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from minirt.ray import HitRecord, Material, Ray
from minirt.rng import nearest_positive
from minirt.vector import Vec

_CAP_T_MIN = 0.00001
_AXIS_EPSILON = 0.00001
_TRIANGLE_EPSILON = 1e-8


def _default_material() -> Material:
    return Material(Vec())


class Hittable(Protocol):
    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        ...


def intersect_plane(
    ray: Ray, t_min: float, t_max: float, position: Vec, orientation: Vec
) -> float:
    """Distance along the ray to the plane, or 0 when there is no hit in (t_min, t_max)."""
    a = (ray.pos - position).dot(orientation)
    b = ray.dir.dot(orientation)
    if b == 0 or (a < 0 and b < 0) or (a > 0 and b > 0):
        return 0.0
    t = -a / b
    if t <= t_min or t >= t_max:
        return 0.0
    return t


def _facing(normal: Vec, direction: Vec) -> Vec:
    """Flip a normal so that it points against the incoming direction, then normalise."""
    sign = -1.0 if direction.dot(normal) >= 0 else 1.0
    return (normal * sign).unit()


@dataclass
class Sphere:
    position: Vec
    radius: float
    material: Material = field(default_factory=_default_material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        oc = ray.pos - self.position
        a = ray.dir.dot(ray.dir)
        b = oc.dot(ray.dir)
        c = oc.dot(oc) - self.radius * self.radius
        delta = b * b - a * c
        if delta <= 0:
            return None
        root = math.sqrt(delta)
        t = (-b - root) / a
        if not t_min < t < t_max:
            t = (-b + root) / a
        if not t_min < t < t_max:
            return None
        p = ray.at(t)
        return HitRecord(t, p, (p - self.position) / self.radius, self.material)


@dataclass
class Plane:
    position: Vec
    orientation: Vec
    material: Material = field(default_factory=_default_material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        t = intersect_plane(ray, t_min, t_max, self.position, self.orientation)
        if not t:
            return None
        normal = self.orientation
        if ray.dir.dot(self.orientation) >= 0:
            normal = self.orientation * -1
        normal = normal / normal.length()
        return HitRecord(t, ray.at(t), normal, self.material)


@dataclass
class Square:
    position: Vec
    orientation: Vec
    size: float
    material: Material = field(default_factory=_default_material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        t = intersect_plane(ray, t_min, t_max, self.position, self.orientation)
        if not t:
            return None
        offset = ray.dir * t + ray.pos - self.position
        half = self.size / 2
        if any(abs(c) > half for c in offset):
            return None
        normal = _facing(self.orientation, ray.dir)
        return HitRecord(t, ray.at(t), normal, self.material)


@dataclass
class Triangle:
    point0: Vec
    point1: Vec
    point2: Vec
    material: Material = field(default_factory=_default_material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        side0 = self.point1 - self.point0
        side1 = self.point2 - self.point0
        p_vec = ray.dir.cross(side1)
        det = side0.dot(p_vec)
        if -_TRIANGLE_EPSILON < det < _TRIANGLE_EPSILON:
            return None
        inv_det = 1 / det
        origin = ray.pos - self.point0
        u = origin.dot(p_vec) * inv_det
        if u < 0 or u > 1:
            return None
        q_vec = origin.cross(side0)
        v = ray.dir.dot(q_vec) * inv_det
        if v < 0 or u + v > 1:
            return None
        t = side1.dot(q_vec) * inv_det
        if t <= t_min or t >= t_max:
            return None
        normal = _facing(side0.cross(side1), ray.dir)
        return HitRecord(t, ray.at(t), normal, self.material)


@dataclass
class Cylinder:
    position: Vec
    orientation: Vec
    diameter: float
    height: float
    material: Material = field(default_factory=_default_material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        ori = self.orientation
        cross = ray.dir.cross(ori)
        origin = ray.pos - self.position
        cross2 = origin.cross(ori)
        a = cross.dot(cross)
        b = 2 * cross.dot(cross2)
        c = cross2.dot(cross2) - (self.diameter / 2) ** 2 * ori.dot(ori)
        delta = b * b - 4 * a * c
        if delta < 0:
            return None
        delta = math.sqrt(delta)
        a *= 2
        alignment = origin.unit().dot(ori)
        if abs(abs(alignment) - 1) <= _AXIS_EPSILON:
            return self._hit_base(ray, t_min, t_max)
        if a == 0:
            return None
        t = nearest_positive((-b + delta) / a, (-b - delta) / a)
        if t <= 0 or t <= t_min or t >= t_max:
            return None
        return self._check_caps(ray, t_min, t_max, t)

    def _intersect_disk(
        self, ray: Ray, t_min: float, t_max: float, center: Vec
    ) -> float:
        t = intersect_plane(ray, t_min, t_max, center, self.orientation)
        if not t:
            return 0.0
        if (ray.at(t) - center).length() <= self.diameter / 2:
            return t
        return 0.0

    def _hit_base(self, ray: Ray, t_min: float, t_max: float) -> HitRecord | None:
        axis = self.orientation.unit()
        top = self.position + axis * (self.height / 2)
        bottom = self.position + axis * (self.height / -2)
        t1 = self._intersect_disk(ray, t_min, t_max, top)
        t2 = self._intersect_disk(ray, t_min, t_max, bottom)
        t = nearest_positive(t1, t2)
        if not t:
            return None
        sign = 1.0 if t == t1 else -1.0
        normal = (self.orientation * sign).unit()
        return HitRecord(t, ray.at(t), normal, self.material)

    def _check_caps(
        self, ray: Ray, t_min: float, t_max: float, t: float
    ) -> HitRecord | None:
        p = ray.at(t)
        axis = self.orientation.unit()
        half = self.height / 2
        up = intersect_plane(
            Ray(self.position, axis), _CAP_T_MIN, half, p, self.orientation
        )
        if not up:
            down = intersect_plane(
                Ray(self.position, axis * -1), _CAP_T_MIN, half, p, self.orientation
            )
            if not down and (self.position - p).dot(self.orientation):
                return self._hit_base(ray, t_min, t_max)
        m = ray.dir.dot(axis) * t + (ray.pos - self.position).dot(axis)
        normal = (p - self.position - axis * m).unit()
        return HitRecord(t, p, normal, self.material)


def hit_any(
    objects: Iterable[Hittable], ray: Ray, t_min: float, t_max: float
) -> HitRecord | None:
    """Closest hit among the objects, or None."""
    closest = t_max
    result: HitRecord | None = None
    for obj in objects:
        rec = obj.hit(ray, t_min, closest)
        if rec is not None:
            closest = rec.t
            result = rec
    return result