[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchgeo"
version = "0.1.0"
description = "Geometry toolkit: Bezier surfaces of revolution, Voronoi cells, wireframe primitives, sphere meshes, polygon extrusion and OBJ/STL/DAT mesh files"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "geometry",
    "bezier",
    "voronoi",
    "mesh",
    "wireframe",
    "obj",
    "stl",
    "extrusion",
    "transformation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchgeo = "sketchgeo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchgeo"]

[tool.hatch.build.targets.sdist]
include = [
    "sketchgeo",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
