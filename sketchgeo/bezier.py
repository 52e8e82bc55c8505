"""Bezier curves, their surfaces of revolution and an interactive editor model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from .vector import Vec3

Quad = tuple[Vec3, Vec3, Vec3, Vec3]

CURVE_RESOLUTION = 100
ANGLE_RESOLUTION = 36


def de_casteljau(t: float, points: Sequence[Vec3]) -> Vec3:
    """Evaluate the Bezier curve with the given control points at parameter t."""
    if not points:
        raise ValueError("a Bezier curve needs at least one control point")
    level = list(points)
    while len(level) > 1:
        level = [(1 - t) * a + t * b for a, b in zip(level, level[1:])]
    return level[0]


def sample_curve(points: Sequence[Vec3], resolution: int = CURVE_RESOLUTION) -> list[Vec3]:
    """Evaluate the curve at resolution + 1 evenly spaced parameters from 0 to 1."""
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    return [de_casteljau(i / resolution, points) for i in range(resolution + 1)]


def revolve_curve(
    curve_points: Sequence[Vec3], angle_resolution: int = ANGLE_RESOLUTION
) -> list[Quad]:
    """Sweep a polyline around the Y axis, returning the quads of the surface."""
    if angle_resolution <= 0:
        raise ValueError("angle_resolution must be positive")
    step = 360.0 / angle_resolution
    angles = [
        (math.radians(j * step), math.radians((j + 1) * step))
        for j in range(angle_resolution)
    ]

    def spin(p: Vec3, rad: float) -> Vec3:
        return Vec3(p.x * math.cos(rad), p.y, p.x * math.sin(rad))

    return [
        (spin(p1, rad1), spin(p1, rad2), spin(p2, rad2), spin(p2, rad1))
        for p1, p2 in zip(curve_points, curve_points[1:])
        for rad1, rad2 in angles
    ]


def revolved_surface(
    control_points: Sequence[Vec3],
    curve_resolution: int = CURVE_RESOLUTION,
    angle_resolution: int = ANGLE_RESOLUTION,
) -> list[Quad]:
    """Quads of the surface swept by the Bezier curve; empty below two control points."""
    if len(control_points) < 2:
        return []
    return revolve_curve(sample_curve(control_points, curve_resolution), angle_resolution)


def screen_to_ndc(x: float, y: float, width: float, height: float) -> Vec3:
    """Map a pixel position to normalised device coordinates on the z = 0 plane."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport size must be positive")
    return Vec3((2.0 * x) / width - 1.0, 1.0 - (2.0 * y) / height, 0.0)


def _default_points() -> list[Vec3]:
    return [Vec3(-0.5, -0.5, 0.0)]


@dataclass
class BezierEditor:
    """Control points edited by clicking and dragging in a viewport."""

    width: int = 800
    height: int = 600
    threshold: float = 0.3
    control_points: list[Vec3] = field(default_factory=_default_points)
    selected: int | None = None
    curve_resolution: int = CURVE_RESOLUTION
    angle_resolution: int = ANGLE_RESOLUTION

    def press(self, x: float, y: float) -> int:
        """Select the control point under the cursor, or add one there; return its index."""
        click = screen_to_ndc(x, y, self.width, self.height)
        for index, point in enumerate(self.control_points):
            if (point - click).length() < self.threshold:
                self.selected = index
                return index
        self.control_points.append(click)
        self.selected = len(self.control_points) - 1
        return self.selected

    def drag(self, x: float, y: float) -> None:
        """Move the selected control point to the cursor, if one is selected."""
        if self.selected is None:
            return
        self.control_points[self.selected] = screen_to_ndc(x, y, self.width, self.height)

    def release(self) -> None:
        """Deselect the control point."""
        self.selected = None

    def reset(self) -> None:
        """Remove every control point."""
        self.control_points.clear()
        self.selected = None

    def curve(self) -> list[Vec3]:
        """Sampled curve points; empty below two control points."""
        if len(self.control_points) < 2:
            return []
        return sample_curve(self.control_points, self.curve_resolution)

    def surface(self) -> list[Quad]:
        """Quads of the surface of revolution of the current curve."""
        return revolved_surface(
            self.control_points, self.curve_resolution, self.angle_resolution
        )