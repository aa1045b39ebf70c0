import math

import pytest

from minirt.parser import (
    AmbientLight,
    Light,
    Resolution,
    Scene,
    SceneError,
    parse_line,
    parse_scene,
    read_scene,
)
from minirt.shapes import Cylinder, Plane, Sphere, Square, Triangle
from minirt.vector import Vec

BASE = "R 100 50\nA 1 255,0,255\nc 0,0,0 0,0,1 70\n"


def test_resolution_parsed():
    scene = parse_scene(BASE)
    assert scene.resolution == Resolution(100, 50)


def test_ambient_full_ratio_keeps_color():
    scene = parse_scene(BASE)
    assert scene.ambient == AmbientLight(1.0, Vec(1.0, 0.0, 1.0))


def test_ambient_zero_ratio_clamped_to_minimum():
    scene = parse_scene("R 10 10\nA 0 255,255,255\nc 0,0,0 0,0,1 70")
    assert scene.ambient.ratio == pytest.approx(0.005)
    assert scene.ambient.rgb.x == pytest.approx(0.005)


def test_camera_direction_flipped_and_normalised():
    scene = parse_scene("R 10 10\nA 1 0,0,0\nc 1,2,3 0,0.5,0.5 70")
    cam = scene.camera
    assert cam.position == Vec(1.0, 2.0, 3.0)
    assert cam.direction.length() == pytest.approx(1.0)
    assert cam.direction.y < 0 and cam.direction.z < 0
    assert cam.horizontal.length() > 0


def test_light_parsed_and_scaled():
    scene = parse_scene(BASE + "l 1,2,3 0.5 255,0,255\n")
    assert scene.lights == [Light(Vec(1.0, 2.0, 3.0), 0.5, Vec(1.0, 0.0, 1.0))]


def test_all_object_kinds_in_order():
    text = BASE + (
        "sp 0,0,0 4 255,0,0\n"
        "pl 0,0,0 0,1,0 0,255,0\n"
        "sq 0,0,0 0,0,1 2 0,0,255\n"
        "cy 0,0,0 0,1,0 1 2 255,255,255\n"
        "tr 0,0,0 1,0,0 0,1,0 255,255,0\n"
    )
    scene = parse_scene(text)
    kinds = [type(o) for o in scene.objects]
    assert kinds == [Sphere, Plane, Square, Cylinder, Triangle]
    sphere = scene.objects[0]
    assert sphere.radius == 2.0
    assert sphere.material.attenuation == Vec(1.0, 0.0, 0.0)
    cylinder = scene.objects[3]
    assert (cylinder.diameter, cylinder.height) == (1.0, 2.0)
    assert scene.objects[1].orientation == Vec(0.0, 1.0, 0.0)


def test_double_minus_gives_positive():
    scene = parse_scene(BASE + "sp --1,0,0 2 0,0,0\n")
    assert scene.objects[0].position.x == 1.0


def test_empty_lines_are_skipped():
    scene = parse_scene("\n\nR 10 10\n\nA 1 0,0,0\nc 0,0,0 0,0,1 70\n\n")
    assert len(scene.cameras) == 1


@pytest.mark.parametrize(
    "text, message",
    [
        ("A 1 0,0,0\nc 0,0,0 0,0,1 70", "No resolution"),
        ("R 10 10\nc 0,0,0 0,0,1 70", "No ambient light"),
        ("R 10 10\nA 1 0,0,0", "No camera"),
    ],
)
def test_missing_required_elements(text, message):
    with pytest.raises(SceneError, match=message):
        parse_scene(text)


@pytest.mark.parametrize(
    "line, message",
    [
        ("R 10 10", "Resolution : double definition"),
        ("A 1 0,0,0", "Ambient light : double definition"),
        ("x 1", "Invalid type"),
        ("sp 0,0,0 -2 255,0,0", "Sphere : not a valid diameter"),
        ("sp 0,0,0 2 256,0,0", "Sphere : RGB out of range"),
        ("sp 0,0,0 2", "Sphere : missing color"),
        ("sp 0,0,0 2 0,0,0 9", "Sphere : invalid input at the end of line"),
        ("sp 0;0,0 2 0,0,0", "Sphere Position : wrong input"),
        ("pl 0,0,0 0,0,0 0,0,0", "Plane : wrong input"),
        ("pl 0,0,0 0,2,0 0,0,0", "Plane Orientation : vector out of range"),
        ("sq 0,0,0 0,0,1 -1 0,0,0", "Square : wrong input"),
        ("cy 0,0,0 0,1,0 1 -2 0,0,0", "Cylinder : wrong input"),
        ("l 0,0,0 2 255,255,255", "Light : ratio out of range"),
        ("l 0,0,0 1 255,255,255 x", "Light : invalid input"),
        ("c 0,0,0 0,0,1 200", "Camera : invalid FOV"),
        ("c 0,0,0 0,0,0 70", "Camera : wrong input"),
    ],
)
def test_line_errors(line, message):
    scene = parse_scene(BASE)
    with pytest.raises(SceneError, match=message):
        parse_line(scene, line)


@pytest.mark.parametrize("line", ["R 0 10", "R 2561 10", "R 10 1441"])
def test_resolution_limits(line):
    with pytest.raises(SceneError, match="Resolution : wrong input"):
        parse_line(Scene(), line)


def test_resolution_trailing_input():
    with pytest.raises(SceneError, match="Resolution : invalid input"):
        parse_line(Scene(), "R 10 10 10")


def test_ambient_ratio_out_of_range():
    with pytest.raises(SceneError, match="Ambient light : ratio out of range"):
        parse_line(Scene(), "A 1.5 0,0,0")


def test_switch_camera_wraps_both_ways():
    scene = parse_scene(BASE + "c 1,0,0 0,0,1 70\nc 2,0,0 0,0,1 70\n")
    assert scene.switch_camera(-1).position == Vec(2.0, 0.0, 0.0)
    assert scene.switch_camera(1).position == Vec(0.0, 0.0, 0.0)
    assert scene.switch_camera(1).position == Vec(1.0, 0.0, 0.0)
    assert scene.camera_index == 1


def test_switch_camera_without_cameras():
    with pytest.raises(SceneError, match="No camera"):
        Scene().switch_camera(1)


def test_read_scene_from_file(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(BASE + "sp 0,0,-5 2 255,0,0")
    scene = read_scene(path)
    assert len(scene.objects) == 1
    assert math.isclose(scene.objects[0].position.z, -5.0)


def test_read_scene_missing_file(tmp_path):
    with pytest.raises(SceneError, match="Cannot open file"):
        read_scene(tmp_path / "missing.rt")