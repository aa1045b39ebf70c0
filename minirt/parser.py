"""Scene description parsing for .rt files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Union

from minirt.camera import Camera
from minirt.ray import Material
from minirt.shapes import Cylinder, Plane, Sphere, Square, Triangle
from minirt.vector import Vec

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_MAX_WIDTH = 2560
_MAX_HEIGHT = 1440
_MIN_AMBIENT = 0.005

Shape = Union[Sphere, Plane, Square, Cylinder, Triangle]


class SceneError(ValueError):
    """Raised when a scene description is invalid."""


@dataclass(frozen=True)
class Resolution:
    x: int
    y: int


@dataclass(frozen=True)
class AmbientLight:
    """Ambient light; rgb is already scaled to [0, 1] and by the adjusted ratio."""

    ratio: float
    rgb: Vec


@dataclass(frozen=True)
class Light:
    """Point light; rgb is scaled to [0, 1]."""

    pos: Vec
    ratio: float
    rgb: Vec


@dataclass
class Scene:
    resolution: Resolution | None = None
    ambient: AmbientLight | None = None
    cameras: list[Camera] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    objects: list[Shape] = field(default_factory=list)
    camera_index: int = 0

    @property
    def camera(self) -> Camera:
        """The camera currently in use."""
        if not self.cameras:
            raise SceneError("No camera")
        return self.cameras[self.camera_index]

    def switch_camera(self, direction: int) -> Camera:
        """Move to the previous (direction < 0) or next (direction > 0) camera, wrapping around."""
        if not self.cameras:
            raise SceneError("No camera")
        count = len(self.cameras)
        if direction < 0:
            self.camera_index = (self.camera_index - 1) % count
        elif direction > 0:
            self.camera_index = (self.camera_index + 1) % count
        return self.camera


class _Cursor:
    """Reads numbers and vectors from one line of a scene description."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip_spaces(self) -> None:
        while self.peek() and self.peek() in _WHITESPACE:
            self.pos += 1

    def _digits(self) -> str:
        start = self.pos
        while self.peek() and self.peek() in _DIGITS:
            self.pos += 1
        return self.text[start:self.pos]

    def _sign(self, label: str) -> int:
        self.skip_spaces()
        sign = 1
        # Every sign character flips the sign, '+' included.
        while self.peek() in ("-", "+") and self.peek():
            sign = -sign
            self.pos += 1
        if not (self.peek() and self.peek() in _DIGITS):
            raise SceneError(f"{label} : wrong input")
        return sign

    def integer(self, label: str) -> int:
        sign = self._sign(label)
        return sign * int(self._digits())

    def number(self, label: str) -> float:
        sign = self._sign(label)
        whole = self._digits()
        fraction = ""
        if self.peek() == ".":
            self.pos += 1
            fraction = self._digits()
        return sign * float(f"{whole}.{fraction or '0'}")

    def vector(self, label: str) -> Vec:
        x = self.number(label)
        if self.peek() != ",":
            raise SceneError(f"{label} : wrong input")
        self.pos += 1
        y = self.number(label)
        if self.peek() != ",":
            raise SceneError(f"{label} : wrong input")
        self.pos += 1
        z = self.number(label)
        c = self.peek()
        if c and c not in _WHITESPACE:
            raise SceneError(f"{label} : wrong input")
        return Vec(x, y, z)

    def at_end(self) -> bool:
        self.skip_spaces()
        return not self.peek()

    def expect_end(self, message: str) -> None:
        if not self.at_end():
            raise SceneError(message)


def _check_color(color: Vec, label: str) -> None:
    if any(c < 0 or c > 255 for c in color):
        raise SceneError(f"{label} : RGB out of range")


def _check_vector(vec: Vec, label: str) -> None:
    if any(c < -1 or c > 1 for c in vec):
        raise SceneError(f"{label} : vector out of range")


def _is_zero(vec: Vec) -> bool:
    return not vec.x and not vec.y and not vec.z


def _material(cursor: _Cursor, label: str) -> Material:
    if cursor.at_end():
        raise SceneError(f"{label} : missing color")
    color = cursor.vector(f"{label} RGB")
    _check_color(color, label)
    cursor.expect_end(f"{label} : invalid input at the end of line")
    return Material(color / 255)


def _parse_resolution(scene: Scene, cursor: _Cursor) -> None:
    if scene.resolution is not None:
        raise SceneError("Resolution : double definition")
    x = cursor.integer("Resolution X")
    y = cursor.integer("Resolution Y")
    if x <= 0 or y <= 0 or x > _MAX_WIDTH or y > _MAX_HEIGHT:
        raise SceneError("Resolution : wrong input")
    cursor.expect_end("Resolution : invalid input")
    scene.resolution = Resolution(x, y)


def _parse_ambient(scene: Scene, cursor: _Cursor) -> None:
    if scene.ambient is not None:
        raise SceneError("Ambient light : double definition")
    ratio = cursor.number("Ambient Light Ratio")
    if ratio > 1 or ratio < 0:
        raise SceneError("Ambient light : ratio out of range")
    ratio = max(ratio, _MIN_AMBIENT)
    rgb = cursor.vector("Ambient Light RGB")
    _check_color(rgb, "Ambient Light")
    rgb = rgb / 255
    if ratio > _MIN_AMBIENT:
        ratio += (1 - ratio) / 4
    cursor.expect_end("Ambient Light : invalid input")
    scene.ambient = AmbientLight(ratio, rgb * ratio)


def _parse_camera(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Camera Position")
    direction = cursor.vector("Camera Direction")
    if _is_zero(direction):
        raise SceneError("Camera : wrong input")
    _check_vector(direction, "Camera Direction")
    direction = Vec(direction.x, -direction.y, -direction.z)
    fov = cursor.number("Camera FOV")
    if fov < 0 or fov > 180:
        raise SceneError("Camera : invalid FOV")
    cursor.expect_end("Camera : invalid input")
    scene.cameras.append(Camera(pos, direction, fov))


def _parse_light(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Light Position")
    ratio = cursor.number("Light Ratio")
    if ratio < 0 or ratio > 1:
        raise SceneError("Light : ratio out of range")
    rgb = cursor.vector("Light RGB")
    _check_color(rgb, "Light")
    cursor.expect_end("Light : invalid input")
    scene.lights.append(Light(pos, ratio, rgb / 255))


def _parse_sphere(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Sphere Position")
    radius = cursor.number("Sphere Radius") / 2
    if radius < 0:
        raise SceneError("Sphere : not a valid diameter")
    scene.objects.append(Sphere(pos, radius, _material(cursor, "Sphere")))


def _parse_plane(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Plane Position")
    ori = cursor.vector("Plane Orientation")
    _check_vector(ori, "Plane Orientation")
    if _is_zero(ori):
        raise SceneError("Plane : wrong input")
    scene.objects.append(Plane(pos, ori, _material(cursor, "Plane")))


def _parse_square(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Square Position")
    ori = cursor.vector("Square Orientation")
    _check_vector(ori, "Square Orientation")
    if _is_zero(ori):
        raise SceneError("Square : wrong input")
    size = cursor.number("Square")
    if size < 0:
        raise SceneError("Square : wrong input")
    scene.objects.append(Square(pos, ori, size, _material(cursor, "Square")))


def _parse_cylinder(scene: Scene, cursor: _Cursor) -> None:
    pos = cursor.vector("Cylinder Position")
    ori = cursor.vector("Cylinder Orientation")
    _check_vector(ori, "Cylinder Orientation")
    diameter = cursor.number("Cylinder Diameter")
    if diameter < 0:
        raise SceneError("Cylinder : wrong input")
    height = cursor.number("Cylinder Height")
    if height < 0:
        raise SceneError("Cylinder : wrong input")
    scene.objects.append(
        Cylinder(pos, ori, diameter, height, _material(cursor, "Cylinder"))
    )


def _parse_triangle(scene: Scene, cursor: _Cursor) -> None:
    p0 = cursor.vector("Triangle Point 0")
    p1 = cursor.vector("Triangle Point 1")
    p2 = cursor.vector("Triangle Point 2")
    scene.objects.append(Triangle(p0, p1, p2, _material(cursor, "Triangle")))


_HANDLERS: tuple[tuple[str, Callable[[Scene, _Cursor], None]], ...] = (
    ("R", _parse_resolution),
    ("A", _parse_ambient),
    ("cy", _parse_cylinder),
    ("c", _parse_camera),
    ("l", _parse_light),
    ("sp", _parse_sphere),
    ("pl", _parse_plane),
    ("sq", _parse_square),
    ("tr", _parse_triangle),
)


def parse_line(scene: Scene, line: str) -> None:
    """Parse one non-empty line of a scene description into the scene."""
    for prefix, handler in _HANDLERS:
        if line.startswith(prefix):
            handler(scene, _Cursor(line[len(prefix):]))
            return
    raise SceneError("Invalid type")


def parse_scene(text: str) -> Scene:
    """Parse a whole scene description and set up its cameras."""
    scene = Scene()
    for line in text.split("\n"):
        if line:
            parse_line(scene, line)
    if scene.resolution is None:
        raise SceneError("No resolution")
    if scene.ambient is None:
        raise SceneError("No ambient light")
    if not scene.cameras:
        raise SceneError("No camera")
    aspect = scene.resolution.x / scene.resolution.y
    for camera in scene.cameras:
        camera.setup(aspect)
    return scene


def read_scene(path: str | Path) -> Scene:
    """Read and parse a scene file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise SceneError("Cannot open file") from exc
    return parse_scene(text)