"""Command line entry point: render a scene to a window or to save.bmp."""

from __future__ import annotations

import sys
from typing import Sequence

from minirt.bmp import save_bmp
from minirt.parser import Scene, read_scene
from minirt.render import render

SAVE_FLAG = "-save"
SAVE_PATH = "save.bmp"
WINDOW_TITLE = "my_miniRT"


def check_arguments(argv: Sequence[str]) -> bool:
    """Validate the arguments and return whether the image is to be saved."""
    if len(argv) < 1 or not argv[0]:
        raise ValueError("No arguments")
    if len(argv) > 2:
        raise ValueError("Too many arguments")
    if len(argv) == 2 and argv[1] != SAVE_FLAG:
        raise ValueError("Invalid argument")
    if not argv[0].endswith(".rt"):
        raise ValueError("Not a valid file")
    return len(argv) == 2


def _to_ppm(data: bytes, width: int, height: int) -> bytes:
    rgb = bytearray(width * height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return f"P6 {width} {height} 255\n".encode() + bytes(rgb)


def _show(scene: Scene) -> None:
    import tkinter as tk

    width, height = scene.resolution.x, scene.resolution.y
    root = tk.Tk()
    root.title(WINDOW_TITLE)
    label = tk.Label(root, borderwidth=0)
    label.pack()

    def draw() -> None:
        data = render(scene, scene.camera)
        photo = tk.PhotoImage(data=_to_ppm(data, width, height), format="PPM")
        label.configure(image=photo)
        label.image = photo

    def close() -> None:
        print("Closing miniRT...")
        root.destroy()

    def on_key(event: tk.Event) -> None:
        if event.keysym == "Escape":
            close()
        elif event.keysym == "Left":
            scene.switch_camera(-1)
            draw()
        elif event.keysym == "Right":
            scene.switch_camera(1)
            draw()

    root.protocol("WM_DELETE_WINDOW", close)
    root.bind("<Key>", on_key)
    draw()
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the renderer; errors are reported on standard output."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        save = check_arguments(args)
        scene = read_scene(args[0])
        if save:
            res = scene.resolution
            save_bmp(SAVE_PATH, render(scene, scene.camera), res.x, res.y)
        else:
            _show(scene)
    except ValueError as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())