import struct

import pytest

from minirt.bmp import encode_bmp
from minirt.cli import check_arguments, main
from minirt.parser import read_scene
from minirt.render import render

SCENE = "R 4 2\nA 1 255,255,255\nc 0,0,0 0,0,1 90\nsp 0,0,0 100 0,255,0\n"


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "No arguments"),
        ([""], "No arguments"),
        (["a.rt", "-save", "x"], "Too many arguments"),
        (["a.rt", "-x"], "Invalid argument"),
        (["a.rt", ""], "Invalid argument"),
        (["a.txt"], "Not a valid file"),
        (["a.txt", "-save"], "Not a valid file"),
    ],
)
def test_check_arguments_errors(argv, message):
    with pytest.raises(ValueError, match=message):
        check_arguments(argv)


def test_check_arguments_save_flag():
    assert check_arguments(["scene.rt", "-save"]) is True
    assert check_arguments(["scene.rt"]) is False


def test_main_reports_bad_arguments(capsys):
    assert main([]) == 0
    assert "No arguments" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.rt"), "-save"]) == 0
    assert "Cannot open file" in capsys.readouterr().out


def test_main_reports_invalid_scene(tmp_path, capsys):
    path = tmp_path / "bad.rt"
    path.write_text("A 1 255,255,255\n")
    assert main([str(path), "-save"]) == 0
    assert "No resolution" in capsys.readouterr().out


def test_main_saves_image(tmp_path, monkeypatch):
    path = tmp_path / "scene.rt"
    path.write_text(SCENE)
    monkeypatch.chdir(tmp_path)
    assert main([str(path), "-save"]) == 0
    out = (tmp_path / "save.bmp").read_bytes()
    assert out[0:2] == b"BM"
    assert struct.unpack_from("<I", out, 18)[0] == 4
    assert struct.unpack_from("<I", out, 22)[0] == 2
    scene = read_scene(path)
    assert out == encode_bmp(render(scene, scene.camera), 4, 2)