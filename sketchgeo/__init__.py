"""Geometry toolkit: Bezier revolves, Voronoi cells, wireframe primitives, meshes, extrusion and mesh files."""

__version__ = "0.1.0"

__all__ = [
    "bezier",
    "cli",
    "extrusion",
    "line",
    "meshes",
    "meshio",
    "scene",
    "shapes",
    "transform",
    "vector",
    "voronoi",
]