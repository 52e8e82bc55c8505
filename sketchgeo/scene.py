"""Scene model of the shape viewer: the current shape, a loaded model and the camera."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from os import PathLike
from typing import NamedTuple, Union

import numpy as np

from .meshes import rotation, translation
from .meshio import load_model as _read_model
from .meshio import wireframe_edges
from .shapes import Cube, Cylinder, Sphere
from .vector import Vec3

PathType = Union[str, "PathLike[str]"]
Segment = tuple[Vec3, Vec3]
Color = tuple[float, float, float]

AXIS_LENGTH = 10.0
DEFAULT_ZOOM = -1.5
ROTATION_SENSITIVITY = 0.5
WHEEL_STEP = 600.0
MIN_DIMENSION = 0.1
MAX_DIMENSION = 100.0

PLACEHOLDER_SHAPE = "Shapes"
SHAPE_NAMES = ("Rectangle", "Cube", "Cylinder", "Sphere")

RED: Color = (1.0, 0.0, 0.0)
GREEN: Color = (0.0, 1.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0)

_SHAPE_COLORS = {"Cube": RED, "Cylinder": GREEN, "Sphere": BLUE}


class AxisLine(NamedTuple):
    """One coordinate axis drawn from the origin."""

    start: Vec3
    end: Vec3
    color: Color


def axis_lines() -> list[AxisLine]:
    """The X, Y and Z axes in red, green and blue."""
    origin = Vec3()
    return [
        AxisLine(origin, Vec3(AXIS_LENGTH, 0.0, 0.0), RED),
        AxisLine(origin, Vec3(0.0, AXIS_LENGTH, 0.0), GREEN),
        AxisLine(origin, Vec3(0.0, 0.0, AXIS_LENGTH), BLUE),
    ]


def draw_robot(data_file: PathType = "robot.dat") -> int:
    """Plot a data file of 3D polylines with gnuplot; return gnuplot's exit status."""
    script = (
        "set terminal qt; set mouse; set xlabel 'X'; set ylabel 'Y'; set zlabel 'Z'; "
        f"splot '{data_file}' using 1:2:3 with lines; pause -1"
    )
    completed = subprocess.run(["gnuplot", "-e", script], check=False)
    return completed.returncode


def _check_dimension(name: str, value: float) -> float:
    if not MIN_DIMENSION <= value <= MAX_DIMENSION:
        raise ValueError(
            f"{name} must lie between {MIN_DIMENSION} and {MAX_DIMENSION}, got {value}"
        )
    return float(value)


@dataclass
class Scene:
    """What the viewer shows: one primitive or a loaded OBJ model, seen by a camera."""

    current_shape: str = ""
    cube: Cube = field(default_factory=lambda: Cube(2.0, 2.0, 2.0))
    cylinder: Cylinder = field(default_factory=lambda: Cylinder(5.0, 5.0))
    sphere: Sphere = field(default_factory=lambda: Sphere(5.0))
    vertices: list[Vec3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    zoom: float = DEFAULT_ZOOM
    last_pos: tuple[float, float] = (0.0, 0.0)

    def set_shape(self, shape: str) -> None:
        """Show the named shape."""
        self.current_shape = shape

    def add_shape(self, shape_name: str) -> None:
        """Reset the named primitive to its default size and show it."""
        if shape_name not in SHAPE_NAMES:
            raise ValueError(f"Please select a valid shape, not {shape_name!r}")
        if shape_name == "Cube":
            self.cube = Cube(2.0, 2.0, 2.0)
        elif shape_name == "Sphere":
            self.sphere = Sphere(2.0)
        elif shape_name == "Cylinder":
            self.cylinder = Cylinder(2.0, 5.0)
        self.current_shape = shape_name

    def set_cube_dimensions(self, length: float, breadth: float, height: float) -> None:
        """Replace the cube and show it."""
        self.cube = Cube(
            _check_dimension("length", length),
            _check_dimension("breadth", breadth),
            _check_dimension("height", height),
        )
        self.current_shape = "Cube"

    def set_sphere_radius(self, radius: float) -> None:
        """Replace the sphere and show it."""
        self.sphere = Sphere(_check_dimension("radius", radius))
        self.current_shape = "Sphere"

    def set_cylinder_dimensions(self, radius: float, height: float) -> None:
        """Replace the cylinder and show it."""
        self.cylinder = Cylinder(
            _check_dimension("radius", radius), _check_dimension("height", height)
        )
        self.current_shape = "Cylinder"

    def load_model(self, filepath: PathType) -> tuple[int, int]:
        """Load an OBJ model; return the numbers of vertices and indices read."""
        self.vertices = []
        self.indices = []
        self.vertices, self.indices = _read_model(filepath)
        return len(self.vertices), len(self.indices)

    def press(self, x: float, y: float) -> None:
        """Remember where a drag starts."""
        self.last_pos = (x, y)

    def move(self, x: float, y: float, left_button: bool = False) -> None:
        """Rotate by the whole-pixel distance moved while the left button is held."""
        dx = int(x - self.last_pos[0])
        dy = int(y - self.last_pos[1])
        if left_button:
            self.rotation_x += dy * ROTATION_SENSITIVITY
            self.rotation_y += dx * ROTATION_SENSITIVITY
        self.last_pos = (x, y)

    def wheel(self, delta: float) -> None:
        """Move the camera by a wheel's angle delta."""
        self.zoom += delta / WHEEL_STEP

    @property
    def color(self) -> Color:
        """Colour the current wireframe is drawn in."""
        return _SHAPE_COLORS.get(self.current_shape, YELLOW)

    def view_matrix(self) -> np.ndarray:
        """Camera translation followed by rotation about X then Y."""
        return (
            translation(0.0, 0.0, self.zoom)
            @ rotation(self.rotation_x, 1.0, 0.0, 0.0)
            @ rotation(self.rotation_y, 0.0, 1.0, 0.0)
        )

    def edges(self) -> list[Segment]:
        """Wireframe of the current shape, else of the loaded model, else nothing."""
        if self.current_shape == "Cube":
            return self.cube.edges()
        if self.current_shape == "Cylinder":
            return self.cylinder.edges()
        if self.current_shape == "Sphere":
            return self.sphere.edges()
        if self.vertices and self.indices:
            return wireframe_edges(self.vertices, self.indices)
        return []