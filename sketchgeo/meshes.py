"""Sphere meshes, 4x4 transform matrices, an animated robot and orbit control."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

ROBOT_EYE = (0.0, 5.0, 20.0)
ROBOT_CENTER = (0.0, 0.0, 0.0)
ROBOT_UP = (0.0, 1.0, 0.0)
ROBOT_FOV = 45.0
ROBOT_NEAR = 0.1
ROBOT_FAR = 100.0
ROBOT_SWING = 45.0
ANGLE_STEP = 0.1

# Twelve cube edges as 24 line endpoints of a unit cube centred on the origin.
CUBE_LINES = np.array(
    [
        (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5),
        (0.5, -0.5, 0.5), (0.5, 0.5, 0.5),
        (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
        (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5),
        (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5),
        (0.5, -0.5, -0.5), (0.5, 0.5, -0.5),
        (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
        (-0.5, 0.5, -0.5), (-0.5, -0.5, -0.5),
        (-0.5, -0.5, 0.5), (-0.5, -0.5, -0.5),
        (0.5, -0.5, 0.5), (0.5, -0.5, -0.5),
        (0.5, 0.5, 0.5), (0.5, 0.5, -0.5),
        (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5),
    ],
    dtype=np.float32,
)


@dataclass(frozen=True)
class SphereMesh:
    """Interleaved vertex data and triangle indices of a sphere."""

    vertices: np.ndarray
    indices: np.ndarray
    stride: int

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.stride

    @property
    def index_count(self) -> int:
        return len(self.indices)

    def rows(self) -> np.ndarray:
        """Vertex data reshaped to one row per vertex."""
        return self.vertices.reshape(-1, self.stride)

    def positions(self) -> np.ndarray:
        """The x, y, z columns of every vertex."""
        return self.rows()[:, :3]

    def triangles(self) -> np.ndarray:
        """Indices grouped in threes."""
        return self.indices.reshape(-1, 3)


def uv_sphere(
    radius: float = 1.0, sectors: int = 72, stacks: int = 36, with_normals: bool = True
) -> SphereMesh:
    """A pole-to-pole sphere around the Z axis with texture coordinates.

    Each vertex is x, y, z, then (if with_normals) the position repeated as the
    normal, then s, t. Degenerate triangles at the poles are left out.
    """
    if sectors <= 0 or stacks <= 0:
        raise ValueError("sectors and stacks must be positive")
    rows: list[tuple[float, ...]] = []
    for i in range(stacks + 1):
        stack_angle = math.pi / 2 - i * math.pi / stacks
        xy = radius * math.cos(stack_angle)
        z = radius * math.sin(stack_angle)
        for j in range(sectors + 1):
            sector_angle = j * 2 * math.pi / sectors
            x = xy * math.cos(sector_angle)
            y = xy * math.sin(sector_angle)
            s = j / sectors
            t = i / stacks
            if with_normals:
                rows.append((x, y, z, x, y, z, s, t))
            else:
                rows.append((x, y, z, s, t))

    indices: list[int] = []
    for i in range(stacks):
        k1 = i * (sectors + 1)
        k2 = k1 + sectors + 1
        for _ in range(sectors):
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != stacks - 1:
                indices.extend((k1 + 1, k2, k2 + 1))
            k1 += 1
            k2 += 1

    stride = 8 if with_normals else 5
    return SphereMesh(
        vertices=np.asarray(rows, dtype=np.float32).reshape(-1),
        indices=np.asarray(indices, dtype=np.uint32),
        stride=stride,
    )


def lat_long_sphere(
    latitude_bands: int = 30, longitude_bands: int = 30, radius: float = 1.0
) -> SphereMesh:
    """A position-only sphere around the Y axis with two triangles per grid cell."""
    if latitude_bands <= 0 or longitude_bands <= 0:
        raise ValueError("latitude_bands and longitude_bands must be positive")
    rows: list[tuple[float, float, float]] = []
    for lat in range(latitude_bands + 1):
        theta = lat * math.pi / latitude_bands
        for lon in range(longitude_bands + 1):
            phi = lon * 2 * math.pi / longitude_bands
            rows.append(
                (
                    radius * math.cos(phi) * math.sin(theta),
                    radius * math.cos(theta),
                    radius * math.sin(phi) * math.sin(theta),
                )
            )

    indices: list[int] = []
    for lat in range(latitude_bands):
        for lon in range(longitude_bands):
            first = lat * (longitude_bands + 1) + lon
            second = first + longitude_bands + 1
            indices.extend((first, second, first + 1, second, second + 1, first + 1))

    return SphereMesh(
        vertices=np.asarray(rows, dtype=np.float32).reshape(-1),
        indices=np.asarray(indices, dtype=np.uint32),
        stride=3,
    )


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Homogeneous translation matrix."""
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Homogeneous scaling matrix."""
    return np.diag((float(x), float(y), float(z), 1.0))


def rotation(angle: float, x: float, y: float, z: float) -> np.ndarray:
    """Counter-clockwise rotation by angle degrees about the axis (x, y, z)."""
    axis = np.array((x, y, z), dtype=float)
    size = np.linalg.norm(axis)
    if size == 0.0:
        raise ValueError("rotation axis must not be zero")
    ux, uy, uz = axis / size
    rad = math.radians(angle)
    c, s = math.cos(rad), math.sin(rad)
    ic = 1.0 - c
    return np.array(
        [
            [ux * ux * ic + c, ux * uy * ic - uz * s, ux * uz * ic + uy * s, 0.0],
            [uy * ux * ic + uz * s, uy * uy * ic + c, uy * uz * ic - ux * s, 0.0],
            [ux * uz * ic - uy * s, uy * uz * ic + ux * s, uz * uz * ic + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection with a vertical field of view in degrees."""
    if near == far or aspect == 0:
        raise ValueError("near and far must differ and aspect must be non-zero")
    half = math.radians(fov) / 2
    sine = math.sin(half)
    if sine == 0:
        raise ValueError("field of view must not be zero")
    cotan = math.cos(half) / sine
    depth = near - far
    return np.array(
        [
            [cotan / aspect, 0.0, 0.0, 0.0],
            [0.0, cotan, 0.0, 0.0],
            [0.0, 0.0, (near + far) / depth, 2.0 * near * far / depth],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def look_at(
    eye: Sequence[float], center: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """View matrix placing the camera at eye, looking towards center."""
    eye_v = np.asarray(eye, dtype=float)
    forward = np.asarray(center, dtype=float) - eye_v
    if np.linalg.norm(forward) == 0.0:
        raise ValueError("eye and center must differ")
    forward /= np.linalg.norm(forward)
    side = np.cross(forward, np.asarray(up, dtype=float))
    if np.linalg.norm(side) == 0.0:
        raise ValueError("up must not be parallel to the viewing direction")
    side /= np.linalg.norm(side)
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[:3, 3] = -matrix[:3, :3] @ eye_v
    return matrix


def _limb(x: float, y: float, swing: float) -> np.ndarray:
    return (
        translation(x, y, 0.0)
        @ rotation(swing, 1.0, 0.0, 0.0)
        @ translation(0.0, -1.0, 0.0)
        @ scaling(0.5, 2.0, 0.5)
    )


def robot_part_models(angle: float) -> dict[str, np.ndarray]:
    """Model matrices of the robot's cubes at the given animation angle (radians)."""
    swing = math.sin(angle) * ROBOT_SWING
    return {
        "body": scaling(2.0, 3.0, 1.0),
        "head": translation(0.0, 2.5, 0.0),
        "left_arm": _limb(-1.5, 1.0, swing),
        "right_arm": _limb(1.5, 1.0, -swing),
        "left_leg": _limb(-0.5, -2.0, -swing),
        "right_leg": _limb(0.5, -2.0, swing),
    }


def robot_mvps(angle: float, aspect: float) -> dict[str, np.ndarray]:
    """Model-view-projection matrices of each robot part for a viewport aspect."""
    projection = perspective(ROBOT_FOV, aspect, ROBOT_NEAR, ROBOT_FAR)
    view = look_at(ROBOT_EYE, ROBOT_CENTER, ROBOT_UP)
    camera = projection @ view
    return {name: camera @ model for name, model in robot_part_models(angle).items()}


def advance_angle(angle: float, step: float = ANGLE_STEP) -> float:
    """Step the animation angle, wrapping once it passes a full turn."""
    angle += step
    if angle > 2 * math.pi:
        angle -= 2 * math.pi
    return angle


@dataclass
class OrbitControl:
    """Rotation of a model driven by dragging with the left mouse button."""

    rotation_x: float = 0.0
    rotation_y: float = 0.0
    last_pos: tuple[float, float] = field(default=(0.0, 0.0))

    def press(self, x: float, y: float) -> None:
        """Remember where the drag starts."""
        self.last_pos = (x, y)

    def drag(self, x: float, y: float) -> None:
        """Turn by the whole-pixel distance moved since the last position."""
        dx = int(x - self.last_pos[0])
        dy = int(y - self.last_pos[1])
        self.rotation_x += dy
        self.rotation_y += dx
        self.last_pos = (x, y)

    def model_matrix(self) -> np.ndarray:
        """Rotation about X followed by rotation about Y, in degrees."""
        return rotation(self.rotation_x, 1.0, 0.0, 0.0) @ rotation(
            self.rotation_y, 0.0, 1.0, 0.0
        )