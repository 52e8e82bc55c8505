import pytest

from sketchgeo.meshio import (
    canonical_triangle,
    compute_normal,
    convert_obj_to_stl,
    extract_triangles,
    load_model,
    read_obj,
    wireframe_edges,
    write_dat_file,
)
from sketchgeo.vector import Vec3

QUAD_OBJ = """# a unit square
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vn 0 0 1
f 1 2 3 4
f 3 2 1
"""


@pytest.fixture
def quad_obj(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ, encoding="utf-8")
    return path


def test_compute_normal_unit_z():
    normal = compute_normal(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))
    assert normal == Vec3(0.0, 0.0, 1.0)


def test_compute_normal_degenerate_is_zero():
    normal = compute_normal(Vec3(0, 0, 0), Vec3(1, 1, 1), Vec3(2, 2, 2))
    assert normal == Vec3(0.0, 0.0, 0.0)


def test_canonical_triangle_ignores_order():
    assert canonical_triangle(3, 1, 2) == (1, 2, 3)
    assert canonical_triangle(2, 3, 1) == canonical_triangle(1, 3, 2)


def test_read_obj_fans_and_deduplicates(quad_obj):
    vertices, faces = read_obj(quad_obj)
    assert len(vertices) == 4
    assert vertices[2] == Vec3(1.0, 1.0, 0.0)
    assert faces == [(0, 1, 2), (0, 2, 3)]


def test_read_obj_slash_indices(tmp_path):
    path = tmp_path / "slash.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1/1/1 2/2/2 3/3/3\n", encoding="utf-8")
    _, faces = read_obj(path)
    assert faces == [(0, 1, 2)]


def test_read_obj_malformed_vertex(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 1 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_obj(path)


def test_convert_obj_to_stl_layout(quad_obj, tmp_path):
    stl = tmp_path / "quad.stl"
    count = convert_obj_to_stl(quad_obj, stl)
    assert count == 2
    lines = stl.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "solid converted_from_obj"
    assert lines[-1] == "endsolid converted_from_obj"
    assert lines[1] == "  facet normal 0 0 1"
    assert lines[2] == "    outer loop"
    assert lines[3] == "      vertex 0 0 0"
    assert sum(line.strip() == "endfacet" for line in lines) == count


def test_stl_round_trip(quad_obj, tmp_path):
    stl = tmp_path / "quad.stl"
    convert_obj_to_stl(quad_obj, stl)
    vertices, faces = read_obj(quad_obj)
    triangles = extract_triangles(stl)
    expected = [[tuple(vertices[i]) for i in face] for face in faces]
    assert triangles == expected


def test_convert_rejects_missing_vertex(tmp_path):
    obj = tmp_path / "broken.obj"
    obj.write_text("v 0 0 0\nf 1 2 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        convert_obj_to_stl(obj, tmp_path / "out.stl")


def test_extract_triangles_drops_partial(tmp_path):
    stl = tmp_path / "partial.stl"
    stl.write_text(
        "solid s\nvertex 1 2 3\nvertex 4 5 6\nvertex 7 8 9\nvertex 1 1 1\nendsolid s\n",
        encoding="utf-8",
    )
    assert extract_triangles(stl) == [[(1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 9.0)]]


def test_extract_triangles_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        extract_triangles(tmp_path / "nope.stl")


def test_write_dat_file_closes_loop(tmp_path):
    dat = tmp_path / "tri.dat"
    write_dat_file(dat, [[(1, 2, 3), (4, 5, 6), (7, 8, 9)]])
    assert dat.read_text(encoding="utf-8") == "1 2 3\n4 5 6\n7 8 9\n1 2 3\n\n\n"


def test_load_model_reads_vertices_and_indices(tmp_path):
    path = tmp_path / "model.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nv 1 2\nvn 0 0 1\nf 1/1 2/2 3/3\n", encoding="utf-8"
    )
    vertices, indices = load_model(path)
    assert vertices == [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)]
    assert indices == [0, 1, 2]


def test_wireframe_edges_per_triangle():
    vertices = [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)]
    edges = wireframe_edges(vertices, [0, 1, 2, 0])
    assert edges == [
        (vertices[0], vertices[1]),
        (vertices[1], vertices[2]),
        (vertices[2], vertices[0]),
    ]


def test_wireframe_edges_bad_index():
    with pytest.raises(IndexError):
        wireframe_edges([Vec3()], [0, 0, 5])