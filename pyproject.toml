[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pbrtlite"
version = "0.1.0"
description = "A small ray tracing toolkit: vectors, matrices, transforms, shapes, samplers, cameras and a demo renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "graphics", "geometry", "transform", "sampling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
pbrtlite-render = "pbrtlite.render:main"

[tool.hatch.build.targets.wheel]
packages = ["pbrtlite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
