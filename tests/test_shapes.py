import math

import pytest

from sketchgeo.shapes import Circle, Cube, Cylinder, Shape, Sphere
from sketchgeo.vector import Vec3


def _read_blocks(path):
    text = path.read_text(encoding="utf-8")
    blocks = [b for b in text.split("\n\n") if b.strip()]
    return [[[float(v) for v in line.split()] for line in b.splitlines() if line.strip()] for b in blocks]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_cube_has_twelve_edges_with_box_lengths():
    cube = Cube(2.0, 4.0, 6.0)
    edges = cube.edges()
    assert len(edges) == 12
    lengths = sorted(round((a - b).length(), 9) for a, b in edges)
    assert lengths == [2.0] * 4 + [4.0] * 4 + [6.0] * 4


def test_cube_vertices_are_half_dimensions():
    cube = Cube(2.0, 4.0, 6.0)
    corners = {p for edge in cube.edges() for p in edge}
    assert len(corners) == 8
    for p in corners:
        assert (abs(p.x), abs(p.y), abs(p.z)) == (1.0, 2.0, 3.0)


def test_cylinder_buffers_sizes():
    cyl = Cylinder(1.5, 4.0)
    assert len(cyl.vertex_buffer()) == 100 * 6
    indices = cyl.edge_indices()
    assert len(indices) == 100 * 6
    assert max(indices) == 199
    assert indices[:6] == [0, 1, 0, 2, 1, 3]


def test_cylinder_edges_lie_on_surface():
    cyl = Cylinder(1.5, 4.0)
    edges = cyl.edges()
    assert len(edges) == 300
    for a, b in edges:
        for p in (a, b):
            assert math.hypot(p.x, p.y) == pytest.approx(1.5)
            assert abs(p.z) == pytest.approx(2.0)
    bottom, top = edges[0]
    assert bottom.z == pytest.approx(-2.0)
    assert top.z == pytest.approx(2.0)


def test_cylinder_save_round_trip(tmp_path):
    cyl = Cylinder(1.0, 2.0)
    path = tmp_path / "cylinder.dat"
    cyl.save_to_file(path)
    blocks = _read_blocks(path)
    assert len(blocks) == len(cyl.edges())
    for block, (a, b) in zip(blocks, cyl.edges()):
        assert len(block) == 2
        assert block[0] == pytest.approx(list(a), abs=1e-5)
        assert block[1] == pytest.approx(list(b), abs=1e-5)


def test_sphere_edges_on_sphere():
    sphere = Sphere(3.0)
    edges = sphere.edges()
    assert len(edges) == 20 * 20 * 2
    for a, b in edges:
        assert a.length() == pytest.approx(3.0)
        assert b.length() == pytest.approx(3.0)
    assert edges[0][0] == Vec3(0.0, 0.0, 3.0)


def test_sphere_surface_points_grid():
    sphere = Sphere(2.0)
    rows = sphere.surface_points()
    assert len(rows) == 100
    assert all(len(row) == 100 for row in rows)
    for row in rows:
        assert row[0].z == pytest.approx(2.0)
        for p in row:
            assert p.length() == pytest.approx(2.0)


def test_sphere_save_round_trip(tmp_path):
    sphere = Sphere(2.0)
    path = tmp_path / "sphere.dat"
    sphere.save_to_file(path)
    blocks = _read_blocks(path)
    assert len(blocks) == 100
    assert all(len(block) == 100 for block in blocks)
    for point in blocks[7]:
        assert math.sqrt(sum(c * c for c in point)) == pytest.approx(2.0, rel=1e-4)


def test_circle_points():
    circle = Circle(2.0, 8)
    points = circle.points()
    assert len(points) == 9
    assert points[0] == pytest.approx((2.0, 0.0))
    for x, y in points:
        assert math.hypot(x, y) == pytest.approx(2.0)


def test_circle_rejects_non_positive_count():
    with pytest.raises(ValueError):
        Circle(1.0, 0)


def test_circle_save_round_trip(tmp_path):
    circle = Circle(1.0, 12)
    path = tmp_path / "circle.dat"
    circle.save_to_file(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 13
    for line, expected in zip(lines, circle.points()):
        values = [float(v) for v in line.split()]
        assert values == pytest.approx(list(expected), abs=1e-5)