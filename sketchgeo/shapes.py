"""Wireframe primitives: cube, cylinder, sphere and a sampled circle."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from os import PathLike
from typing import Union

from .vector import Vec3

EdgeList = list[tuple[Vec3, Vec3]]
PathType = Union[str, "PathLike[str]"]

CYLINDER_SEGMENTS = 100
SPHERE_SLICES = 20
SPHERE_STACKS = 20
SPHERE_SAMPLES = 100
_PI = 3.14159265359
# The circle sampler uses this coarse value of pi on purpose.
_CIRCLE_PI = 3.14


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_point(point: Vec3) -> str:
    return " ".join(_fmt(c) for c in point)


class Shape(ABC):
    """A solid that can be drawn as a set of line segments."""

    @abstractmethod
    def edges(self) -> EdgeList:
        """Line segments making up the wireframe."""


@dataclass(frozen=True)
class Cube(Shape):
    """An axis-aligned box centred on the origin."""

    length: float = 0.0
    breadth: float = 0.0
    height: float = 0.0

    def edges(self) -> EdgeList:
        """The twelve edges of the box."""
        hl, hb, hh = self.length / 2, self.breadth / 2, self.height / 2
        v0 = Vec3(-hl, -hb, -hh)
        v1 = Vec3(hl, -hb, -hh)
        v2 = Vec3(hl, hb, -hh)
        v3 = Vec3(-hl, hb, -hh)
        v4 = Vec3(-hl, -hb, hh)
        v5 = Vec3(hl, -hb, hh)
        v6 = Vec3(hl, hb, hh)
        v7 = Vec3(-hl, hb, hh)
        return [
            (v0, v1), (v1, v2), (v2, v3), (v3, v0),
            (v4, v5), (v5, v6), (v6, v7), (v7, v4),
            (v0, v4), (v1, v5), (v2, v6), (v3, v7),
        ]


@dataclass(frozen=True)
class Cylinder(Shape):
    """A cylinder around the Z axis, centred on the origin."""

    radius: float
    height: float

    def vertex_buffer(self) -> list[float]:
        """Flat x, y, z list: a bottom then a top vertex for each segment."""
        buffer: list[float] = []
        for i in range(CYLINDER_SEGMENTS):
            angle = 2 * _PI * i / CYLINDER_SEGMENTS
            x = self.radius * math.cos(angle)
            y = self.radius * math.sin(angle)
            buffer.extend((x, y, -self.height / 2, x, y, self.height / 2))
        return buffer

    def edge_indices(self) -> list[int]:
        """Index pairs into the vertex buffer: vertical, bottom ring, top ring."""
        indices: list[int] = []
        for i in range(CYLINDER_SEGMENTS):
            base = i * 2
            nxt = ((i + 1) % CYLINDER_SEGMENTS) * 2
            indices.extend((base, base + 1, base, nxt, base + 1, nxt + 1))
        return indices

    def edges(self) -> EdgeList:
        """Vertical, bottom-ring and top-ring segments for each slice."""
        buffer = self.vertex_buffer()
        vertices = [Vec3(*buffer[k:k + 3]) for k in range(0, len(buffer), 3)]
        pairs = self.edge_indices()
        return [(vertices[a], vertices[b]) for a, b in zip(pairs[::2], pairs[1::2])]

    def save_to_file(self, path: PathType) -> None:
        """Write each edge as two coordinate lines followed by a blank line."""
        with open(path, "w", encoding="utf-8") as out:
            for v1, v2 in self.edges():
                out.write(f"{_fmt_point(v1)}\n")
                out.write(f"{_fmt_point(v2)}\n\n")


@dataclass(frozen=True)
class Sphere(Shape):
    """A sphere centred on the origin."""

    radius: float

    def _point(self, phi: float, theta: float) -> Vec3:
        r = self.radius
        return Vec3(
            r * math.sin(phi) * math.cos(theta),
            r * math.sin(phi) * math.sin(theta),
            r * math.cos(phi),
        )

    def edges(self) -> EdgeList:
        """Meridian and parallel segments over a 20 by 20 grid."""
        edges: EdgeList = []
        for i in range(SPHERE_SLICES):
            theta1 = i * 2.0 * _PI / SPHERE_SLICES
            theta2 = (i + 1) * 2.0 * _PI / SPHERE_SLICES
            for j in range(SPHERE_STACKS):
                phi1 = j * _PI / SPHERE_STACKS
                phi2 = (j + 1) * _PI / SPHERE_STACKS
                p1 = self._point(phi1, theta1)
                edges.append((p1, self._point(phi2, theta1)))
                edges.append((p1, self._point(phi1, theta2)))
        return edges

    def surface_points(self) -> list[list[Vec3]]:
        """One row of 100 points from the north pole downwards for each of 100 meridians."""
        return [
            [
                self._point(_PI * j / SPHERE_SAMPLES, 2 * _PI * i / SPHERE_SAMPLES)
                for j in range(SPHERE_SAMPLES)
            ]
            for i in range(SPHERE_SAMPLES)
        ]

    def save_to_file(self, path: PathType) -> None:
        """Write the surface points, one meridian per block separated by blank lines."""
        with open(path, "w", encoding="utf-8") as out:
            for row in self.surface_points():
                for point in row:
                    out.write(f"{_fmt_point(point)}\n")
                out.write("\n")


@dataclass(frozen=True)
class Circle:
    """A circle in the XY plane approximated by a closed polyline."""

    radius: float
    num_points: int

    def __post_init__(self) -> None:
        if self.num_points <= 0:
            raise ValueError("num_points must be positive")

    def points(self) -> list[tuple[float, float]]:
        """num_points + 1 samples; the last closes the loop approximately."""
        samples = []
        for i in range(self.num_points + 1):
            angle = 2 * _CIRCLE_PI * i / self.num_points
            samples.append((self.radius * math.cos(angle), self.radius * math.sin(angle)))
        return samples

    def save_to_file(self, path: PathType) -> None:
        """Write one "x y" line per sample."""
        with open(path, "w", encoding="utf-8") as out:
            for x, y in self.points():
                out.write(f"{_fmt(x)} {_fmt(y)}\n")