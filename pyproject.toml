[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "minirt"
version = "0.1.0"
description = "A small ray tracer that renders .rt scene files to a window or a BMP image"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "renderer", "bmp", "3d", "scene"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minirt = "minirt.cli:main"

[tool.setuptools.packages.find]
include = ["minirt*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
