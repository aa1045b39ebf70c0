"""Shading of primary rays and rendering of whole images."""

from __future__ import annotations

import math

from minirt.camera import Camera
from minirt.parser import Light, Scene, SceneError
from minirt.ray import HitRecord, Ray
from minirt.shapes import hit_any
from minirt.vector import Vec

FLT_MAX = 3.4028234663852886e38
_T_MIN = 0.0001
BYTES_PER_PIXEL = 4


def _shadowed(scene: Scene, light: Light, rec: HitRecord) -> tuple[bool, float]:
    """Whether another object lies between the light and the hit point.

    Also returns the cosine between the surface normal and the direction
    towards the light.
    """
    offset = rec.p - light.pos
    ray = Ray(light.pos, offset.unit())
    facing = rec.normal.dot(-ray.dir)
    t_max = offset.length()
    for obj in scene.objects:
        if obj.material is rec.material:
            continue
        hit = obj.hit(ray, _T_MIN, t_max)
        if hit is not None and hit.t < t_max:
            return True, facing
    return False, facing


def pixel_color(scene: Scene, ray: Ray) -> Vec:
    """Colour seen along a ray, each component at most 1."""
    rec = hit_any(scene.objects, ray, _T_MIN, FLT_MAX)
    if rec is None:
        return Vec()
    if scene.ambient is None:
        raise SceneError("No ambient light")
    attenuation = rec.material.attenuation
    color = attenuation.prod(scene.ambient.rgb * scene.ambient.ratio)
    for light in scene.lights:
        blocked, facing = _shadowed(scene, light, rec)
        if not blocked and facing > 0:
            color = color + (light.rgb * (light.ratio * facing)).prod(attenuation)
    return Vec(*(min(c, 1.0) for c in color))


def _byte(value: float) -> int:
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(value) & 0xFF


def render(scene: Scene, camera: Camera) -> bytes:
    """Render the scene through a camera into rows of BGRA pixels, top row first."""
    if scene.resolution is None:
        raise SceneError("No resolution")
    width, height = scene.resolution.x, scene.resolution.y
    data = bytearray(width * height * BYTES_PER_PIXEL)
    for row, y in enumerate(range(height, 0, -1)):
        for x in range(width):
            ray = camera.ray(x / width, y / height)
            color = pixel_color(scene, ray) * 255
            i = (row * width + x) * BYTES_PER_PIXEL
            data[i] = _byte(color.z)
            data[i + 1] = _byte(color.y)
            data[i + 2] = _byte(color.x)
            data[i + 3] = 0
    return bytes(data)