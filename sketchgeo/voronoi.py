"""Voronoi cells by clipping a bounding box against perpendicular bisectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        return Point(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Edge:
    """A segment between two points."""

    a: Point
    b: Point


Polygon = list[Point]


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o)."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def dot(a: Point, b: Point) -> float:
    """Scalar product."""
    return a.x * b.x + a.y * b.y


def _within(value: float, lo: float, hi: float) -> bool:
    return min(lo, hi) - EPS <= value <= max(lo, hi) + EPS


def line_intersect(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Intersection of segments ab and cd, or None if parallel or disjoint."""
    a1 = b.y - a.y
    b1 = a.x - b.x
    c1 = a1 * a.x + b1 * a.y

    a2 = d.y - c.y
    b2 = c.x - d.x
    c2 = a2 * c.x + b2 * c.y

    det = a1 * b2 - a2 * b1
    if abs(det) < EPS:
        return None

    out = Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)
    inside = (
        _within(out.x, a.x, b.x)
        and _within(out.y, a.y, b.y)
        and _within(out.x, c.x, d.x)
        and _within(out.y, c.y, d.y)
    )
    return out if inside else None


def perpendicular_bisector(p1: Point, p2: Point) -> Edge:
    """A segment on the perpendicular bisector of p1 and p2, centred on their midpoint."""
    mid = Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)
    direction = Point(p2.y - p1.y, p1.x - p2.x)
    return Edge(mid + direction, mid - direction)


def is_left(bisector: Edge, site: Point, p: Point) -> bool:
    """True if p lies strictly on the same side of the bisector as the site."""
    return cross(bisector.a, bisector.b, p) * cross(bisector.a, bisector.b, site) > 0


def clip_polygon(poly: Sequence[Point], bisector: Edge, site: Point) -> Polygon:
    """Keep the part of the polygon on the site's side of the bisector."""
    clipped: Polygon = []
    for start, end in zip(poly, [*poly[1:], *poly[:1]]):
        inside_start = is_left(bisector, site, start)
        inside_end = is_left(bisector, site, end)
        if inside_start:
            clipped.append(start)
        if inside_start != inside_end:
            crossing = line_intersect(start, end, bisector.a, bisector.b)
            if crossing is not None:
                clipped.append(crossing)
    return clipped


def compute_voronoi_cells(sites: Sequence[Point], pad: float) -> list[Polygon]:
    """One cell per site, each clipped to the sites' bounding box grown by pad."""
    if not sites:
        return []
    xl = min(p.x for p in sites) - pad
    xr = max(p.x for p in sites) + pad
    yb = min(p.y for p in sites) - pad
    yt = max(p.y for p in sites) + pad
    box = [Point(xl, yt), Point(xr, yt), Point(xr, yb), Point(xl, yb)]

    cells: list[Polygon] = []
    for i, site in enumerate(sites):
        cell = list(box)
        for j, other in enumerate(sites):
            if i != j:
                cell = clip_polygon(cell, perpendicular_bisector(site, other), site)
        cells.append(cell)
    return cells