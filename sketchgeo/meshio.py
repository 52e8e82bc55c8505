"""Reading and writing triangle meshes: OBJ, ASCII STL and plain data files."""

from __future__ import annotations

from os import PathLike
from typing import Sequence, Union

from .vector import Vec3

PathType = Union[str, "PathLike[str]"]
Triangle = tuple[int, int, int]
Coords = tuple[float, float, float]

SOLID_NAME = "converted_from_obj"


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_point(values: Sequence[float]) -> str:
    return " ".join(_fmt(v) for v in values)


def compute_normal(v1: Vec3, v2: Vec3, v3: Vec3) -> Vec3:
    """Unit normal of the triangle; zero for a degenerate triangle."""
    return (v2 - v1).cross(v3 - v1).normalized()


def canonical_triangle(a: int, b: int, c: int) -> Triangle:
    """The smallest ordering of the three indices, so repeated faces compare equal."""
    first, second, third = sorted((a, b, c))
    return (first, second, third)


def read_obj(path: PathType) -> tuple[list[Vec3], list[Triangle]]:
    """Vertices and unique fan-triangulated faces (zero-based, sorted) of an OBJ file."""
    vertices: list[Vec3] = []
    faces: set[Triangle] = set()
    with open(path, encoding="utf-8") as source:
        for line in source:
            tokens = line.split()
            if not tokens:
                continue
            kind = tokens[0]
            if kind == "v":
                if len(tokens) < 4:
                    raise ValueError(f"malformed vertex line: {line.strip()!r}")
                x, y, z = (float(t) for t in tokens[1:4])
                vertices.append(Vec3(x, y, z))
            elif kind == "f":
                indices = [int(token.split("/")[0]) - 1 for token in tokens[1:]]
                first = indices[0] if indices else 0
                for b, c in zip(indices[1:], indices[2:]):
                    faces.add(canonical_triangle(first, b, c))
    return vertices, sorted(faces)


def convert_obj_to_stl(obj_file: PathType, stl_file: PathType) -> int:
    """Write the faces of an OBJ file as an ASCII STL; return the number of facets."""
    vertices, faces = read_obj(obj_file)
    for face in faces:
        if any(not 0 <= i < len(vertices) for i in face):
            raise ValueError(f"face {face} refers to a missing vertex")
    with open(stl_file, "w", encoding="utf-8") as out:
        out.write(f"solid {SOLID_NAME}\n")
        for i1, i2, i3 in faces:
            v1, v2, v3 = vertices[i1], vertices[i2], vertices[i3]
            normal = compute_normal(v1, v2, v3)
            out.write(f"  facet normal {_fmt_point(normal)}\n")
            out.write("    outer loop\n")
            for vertex in (v1, v2, v3):
                out.write(f"      vertex {_fmt_point(vertex)}\n")
            out.write("    endloop\n")
            out.write("  endfacet\n")
        out.write(f"endsolid {SOLID_NAME}\n")
    return len(faces)


def extract_triangles(stl_file: PathType) -> list[list[Coords]]:
    """Triangles of an ASCII STL file, read from its vertex lines in threes."""
    triangles: list[list[Coords]] = []
    current: list[Coords] = []
    with open(stl_file, encoding="utf-8") as source:
        for line in source:
            tokens = line.split()
            if not tokens or tokens[0] != "vertex":
                continue
            if len(tokens) < 4:
                raise ValueError(f"malformed vertex line: {line.strip()!r}")
            x, y, z = (float(t) for t in tokens[1:4])
            current.append((x, y, z))
            if len(current) == 3:
                triangles.append(current)
                current = []
    return triangles


def write_dat_file(dat_file: PathType, triangles: Sequence[Sequence[Sequence[float]]]) -> None:
    """Write each triangle as a closed loop of points followed by two blank lines."""
    with open(dat_file, "w", encoding="utf-8") as out:
        for triangle in triangles:
            for vertex in triangle:
                out.write(f"{_fmt_point(vertex[:3])}\n")
            out.write(f"{_fmt_point(triangle[0][:3])}\n")
            out.write("\n\n")


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def load_model(path: PathType) -> tuple[list[Vec3], list[int]]:
    """Vertices and flat zero-based face indices of an OBJ file, as the viewer reads it."""
    vertices: list[Vec3] = []
    indices: list[int] = []
    with open(path, encoding="utf-8") as source:
        for raw in source:
            line = raw.rstrip("\n")
            parts = [p for p in line.split(" ") if p]
            if line.startswith("v "):
                if len(parts) == 4:
                    x, y, z = (_to_float(p) for p in parts[1:])
                    vertices.append(Vec3(x, y, z))
            elif line.startswith("f "):
                indices.extend(_to_int(p.split("/")[0]) - 1 for p in parts[1:])
    return vertices, indices


def wireframe_edges(
    vertices: Sequence[Vec3], indices: Sequence[int]
) -> list[tuple[Vec3, Vec3]]:
    """Three edges for each complete triple of indices."""
    edges: list[tuple[Vec3, Vec3]] = []
    for start in range(0, len(indices) - 2, 3):
        triple = indices[start:start + 3]
        for index in triple:
            if not 0 <= index < len(vertices):
                raise IndexError(f"vertex index {index} out of range")
        v1, v2, v3 = (vertices[i] for i in triple)
        edges.extend(((v1, v2), (v2, v3), (v3, v1)))
    return edges