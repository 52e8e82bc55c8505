"""Sketch a polygon with the mouse and extrude it along its normal."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Sequence

from .vector import Vec3

CLOSE_THRESHOLD = 0.05
ROTATION_SENSITIVITY = 0.5
EXTRUSION_SCALE = 0.01


class MouseButton(enum.Flag):
    """Mouse buttons; combine with | for the set of buttons held down."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


def screen_to_world(x: float, y: float, width: float, height: float) -> Vec3:
    """Map a pixel position to the z = 0 plane in normalised device coordinates."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport size must be positive")
    return Vec3((2.0 * x) / width - 1.0, 1.0 - (2.0 * y) / height, 0.0)


def polygon_normal(points: Sequence[Vec3]) -> Vec3:
    """Unit normal from the sum of cross products of consecutive vertices."""
    total = Vec3()
    for current, following in zip(points, [*points[1:], *points[:1]]):
        total = total + current.cross(following)
    return total.normalized()


Segment = tuple[Vec3, Vec3]


@dataclass
class PolygonExtruder:
    """State of the polygon sketch: its points, whether it is closed, and the view."""

    width: int = 800
    height: int = 600
    points: list[Vec3] = field(default_factory=list)
    normal: Vec3 = field(default_factory=Vec3)
    extrusion_height: float = 0.0
    closed: bool = False
    rotating: bool = False
    last_pos: tuple[float, float] = (0.0, 0.0)
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    close_threshold: float = CLOSE_THRESHOLD

    def double_click(self, button: MouseButton, x: float, y: float) -> None:
        """Right double-click starts rotating; left double-click adds a point or closes."""
        if button == MouseButton.RIGHT:
            self.rotating = True
            self.last_pos = (x, y)
        elif button == MouseButton.LEFT:
            world = screen_to_world(x, y, self.width, self.height)
            if self.closed:
                return
            if self.points and self.is_close_to_first_point(world):
                self.closed = True
                self.normal = polygon_normal(self.points)
            else:
                self.points.append(world)

    def move(self, x: float, y: float, buttons: MouseButton = MouseButton.NONE) -> None:
        """Rotate the view while rotating, or set the extrusion height while dragging."""
        if self.rotating:
            dx = x - self.last_pos[0]
            dy = y - self.last_pos[1]
            self.rotation_x += dy * ROTATION_SENSITIVITY
            self.rotation_y += dx * ROTATION_SENSITIVITY
            self.last_pos = (x, y)
        elif self.closed and MouseButton.LEFT in buttons:
            self.extrusion_height = (y - self.height / 2.0) * EXTRUSION_SCALE

    def release(self, button: MouseButton) -> None:
        """Releasing the right button stops rotation."""
        if button == MouseButton.RIGHT:
            self.rotating = False

    def is_close_to_first_point(self, p: Vec3) -> bool:
        """True if p lies within the closing distance of the first point."""
        if not self.points:
            return False
        return (self.points[0] - p).length() < self.close_threshold

    def extrusion_edges(self) -> list[Segment]:
        """Outline of each side face of the extrusion; empty until the polygon is closed."""
        if not self.closed:
            return []
        offset = self.normal * self.extrusion_height
        edges: list[Segment] = []
        for base1, base2 in zip(self.points, [*self.points[1:], *self.points[:1]]):
            top1 = base1 + offset
            top2 = base2 + offset
            edges.extend(((base1, top1), (top1, top2), (top2, base2), (base2, base1)))
        return edges