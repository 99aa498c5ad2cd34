[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshkit"
version = "0.1.0"
description = "Procedural primitive meshes and built-in rotation gizmo and monkey head meshes as plain vertex and index data."
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "geometry", "primitives", "3d", "vertices", "gizmo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
