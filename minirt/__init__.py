"""A small ray tracer that renders .rt scene files to a window or a BMP image."""

__version__ = "0.1.0"
__all__ = ["bmp", "camera", "cli", "parser", "ray", "render", "rng", "shapes", "vector"]