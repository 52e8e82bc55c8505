import pytest

from sketchgeo.extrusion import (
    MouseButton,
    PolygonExtruder,
    polygon_normal,
    screen_to_world,
)
from sketchgeo.vector import Vec3


def _closed_triangle() -> PolygonExtruder:
    ext = PolygonExtruder(width=800, height=600)
    ext.double_click(MouseButton.LEFT, 400, 300)
    ext.double_click(MouseButton.LEFT, 600, 300)
    ext.double_click(MouseButton.LEFT, 600, 150)
    ext.double_click(MouseButton.LEFT, 401, 300)
    return ext


def test_screen_to_world_centre_and_corner():
    assert screen_to_world(400, 300, 800, 600) == Vec3(0.0, 0.0, 0.0)
    assert screen_to_world(0, 0, 800, 600) == Vec3(-1.0, 1.0, 0.0)


def test_screen_to_world_rejects_empty_viewport():
    with pytest.raises(ValueError):
        screen_to_world(1, 1, 0, 600)


def test_polygon_normal_is_unit_and_flips_with_order():
    square = [Vec3(-1, -1, 0), Vec3(1, -1, 0), Vec3(1, 1, 0), Vec3(-1, 1, 0)]
    normal = polygon_normal(square)
    assert normal.length() == pytest.approx(1.0)
    assert normal.z > 0
    reversed_normal = polygon_normal(list(reversed(square)))
    assert reversed_normal == -normal


def test_points_are_added_until_closed():
    ext = PolygonExtruder()
    ext.double_click(MouseButton.LEFT, 400, 300)
    ext.double_click(MouseButton.LEFT, 600, 300)
    assert len(ext.points) == 2
    assert ext.points[1] == screen_to_world(600, 300, 800, 600)
    assert not ext.closed


def test_clicking_near_first_point_closes_polygon():
    ext = _closed_triangle()
    assert ext.closed
    assert len(ext.points) == 3
    assert ext.normal == Vec3(0.0, 0.0, 1.0)
    ext.double_click(MouseButton.LEFT, 100, 100)
    assert len(ext.points) == 3


def test_first_click_is_never_a_close():
    ext = PolygonExtruder()
    assert not ext.is_close_to_first_point(Vec3())
    ext.double_click(MouseButton.LEFT, 400, 300)
    assert not ext.closed
    assert ext.is_close_to_first_point(Vec3(0.01, 0.0, 0.0))
    assert not ext.is_close_to_first_point(Vec3(0.2, 0.0, 0.0))


def test_drag_sets_extrusion_height_when_closed():
    ext = _closed_triangle()
    ext.move(10, 300, MouseButton.LEFT)
    assert ext.extrusion_height == pytest.approx(0.0)
    ext.move(10, 500, MouseButton.LEFT)
    assert ext.extrusion_height == pytest.approx(2.0)


def test_drag_without_left_button_keeps_height():
    ext = _closed_triangle()
    ext.move(10, 500, MouseButton.NONE)
    assert ext.extrusion_height == 0.0


def test_drag_before_closing_does_nothing():
    ext = PolygonExtruder()
    ext.double_click(MouseButton.LEFT, 400, 300)
    ext.move(10, 500, MouseButton.LEFT)
    assert ext.extrusion_height == 0.0


def test_right_double_click_rotates_until_release():
    ext = PolygonExtruder()
    ext.double_click(MouseButton.RIGHT, 100, 100)
    assert ext.rotating
    ext.move(110, 120)
    assert ext.rotation_y == pytest.approx(5.0)
    assert ext.rotation_x == pytest.approx(10.0)
    ext.release(MouseButton.RIGHT)
    assert not ext.rotating
    ext.move(200, 200)
    assert ext.rotation_y == pytest.approx(5.0)


def test_release_left_keeps_rotating():
    ext = PolygonExtruder()
    ext.double_click(MouseButton.RIGHT, 0, 0)
    ext.release(MouseButton.LEFT)
    assert ext.rotating


def test_extrusion_edges_empty_until_closed():
    ext = PolygonExtruder()
    ext.double_click(MouseButton.LEFT, 400, 300)
    assert ext.extrusion_edges() == []


def test_extrusion_edges_offset_by_normal():
    ext = _closed_triangle()
    ext.move(0, 500, MouseButton.LEFT)
    edges = ext.extrusion_edges()
    assert len(edges) == 4 * len(ext.points)
    offset = ext.normal * ext.extrusion_height
    for index, base in enumerate(ext.points):
        base1, top1 = edges[4 * index]
        assert base1 == base
        assert top1 == base + offset
        assert edges[4 * index + 3][1] == base