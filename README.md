# minirt

minirt is a small ray tracer. It reads a scene description from a `.rt` file and renders these shapes:

- spheres
- planes
- squares
- triangles
- cylinders

The scene is lit by an ambient light and any number of point lights, and those lights cast hard shadows. You can view the result in a window or save it as a BMP image.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. The window uses `tkinter`.

## Usage

To open a window that shows the scene through its first camera:

```
minirt scene.rt
```

In the window you can use these keys:

- **Left** switches to the previous camera and renders again.
- **Right** switches to the next camera and renders again.
- **Escape** closes the window, and so does the window's close button.

To render the first camera into `save.bmp` in the current directory without opening a window:

```
minirt scene.rt -save
```

The first argument must name a file ending in `.rt`, and the only option accepted is `-save`. If the arguments or the scene are invalid, minirt prints a message such as `No camera` or `Sphere : wrong input` on standard output and stops.

## Scene format

The file holds one element per line, and empty lines are ignored. Each line starts with an identifier, and its fields are separated by whitespace.

- Numbers are decimals such as `12`, `0.5` or `-3.25`. Every leading `+` or `-` flips the sign.
- Vectors are written `x,y,z`.
- Colours are written `r,g,b`, with each value from 0 to 255.

| Identifier | Fields |
|------------|--------|
| `R`  | width, height (1–2560 × 1–1440; once only) |
| `A`  | ratio (0–1), colour (once only) |
| `c`  | position, direction (each component −1..1, not all zero), field of view in degrees (0–180) |
| `l`  | position, brightness (0–1), colour |
| `sp` | centre, diameter, colour |
| `pl` | point, normal (each component −1..1, not all zero), colour |
| `sq` | centre, normal (each component −1..1, not all zero), side length, colour |
| `cy` | centre, axis (each component −1..1), diameter, height, colour |
| `tr` | three points, colour |

A scene must have a resolution, an ambient light and at least one camera.

Example:

```
R 640 480
A 0.2 255,255,255
c 0,0,-5 0,0,1 70
l -2,3,-4 0.7 255,255,255
sp 0,0,0 2 200,40,40
pl 0,-1,0 0,1,0 120,120,120
```

## Library use

```python
from minirt.parser import read_scene
from minirt.render import render
from minirt.bmp import save_bmp

scene = read_scene("scene.rt")
data = render(scene, scene.camera)  # BGRA rows, top row first
save_bmp("out.bmp", data, scene.resolution.x, scene.resolution.y)
```

The main entry points are:

- **`minirt.parser`**
  - `parse_scene(text)` and `read_scene(path)` return a `Scene`. A malformed scene raises `SceneError`, whose message says what went wrong.
  - `Scene.switch_camera(direction)` moves to the previous camera (`direction < 0`) or the next one (`direction > 0`), wrapping around at either end.
- **`minirt.render`**
  - `pixel_color(scene, ray)` returns the colour seen along one ray.
  - `render(scene, camera)` returns the pixel data of the whole image.
- **`minirt.bmp`**
  - `encode_bmp(data, width, height)` returns the bytes of a 32-bit, bottom-up BMP.
  - `save_bmp(path, data, width, height)` writes that BMP to a file.
- **`minirt.shapes`**
  - `Sphere`, `Plane`, `Square`, `Triangle` and `Cylinder` each have `hit(ray, t_min, t_max)`, which returns a `HitRecord` or `None`.
  - `hit_any(objects, ray, t_min, t_max)` returns the closest of those hits.
- **`minirt.camera.Camera`** and **`minirt.ray.Ray`** create and trace the primary rays.
- **`minirt.vector.Vec`** is the immutable 3D vector used for points, directions and colours.
- **`minirt.rng.XorShift`** is a small 32-bit pseudo-random generator.

## Limitations

- Shading is ambient plus diffuse light with hard shadows. It has no reflections, refraction or anti-aliasing.
- `minirt.ray.scatter` can compute Lambertian and metal scattering, but the renderer does not use it, and the scene format has no way to choose a material.
- In the BMP header, the file size field is computed as if each pixel took 3 bytes, although the pixel data uses 4 bytes per pixel.