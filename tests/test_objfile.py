import pytest

from softrender.matrix import Vec3, Vec4
from softrender.model import WHITE
from softrender.objfile import parse_model, read_model

TRIANGLE = [
    "# a triangle\n",
    "v 0.0 0.0 0.0\n",
    "v 1.0 0.0 0.0\n",
    "v 0.0 1.0 0.0\n",
    "vt 0.0 0.0\n",
    "vn 0.0 0.0 1.0\n",
    "f 1/1/1 2/1/1 3/1/1\n",
]


def test_triangle_vertices_and_face():
    vertices, faces = parse_model(TRIANGLE)
    assert [v.position for v in vertices] == [
        Vec4(0.0, 0.0, 0.0, 1.0),
        Vec4(1.0, 0.0, 0.0, 1.0),
        Vec4(0.0, 1.0, 0.0, 1.0),
    ]
    assert [v.world_pos for v in vertices] == [v.position.xyz() for v in vertices]
    assert all(v.color == WHITE for v in vertices)
    assert len(faces) == 1
    assert faces[0].indices == (0, 1, 2)
    assert faces[0].normal == Vec3(0.0, 0.0, 1.0)


def test_normals_assigned_to_referenced_vertices():
    lines = [
        "v 0 0 0\n",
        "v 1 0 0\n",
        "v 0 1 0\n",
        "v 5 5 5\n",
        "vn 1 0 0\n",
        "vn 0 1 0\n",
        "f 1/1/1 2/1/2 3/1/2\n",
    ]
    vertices, _ = parse_model(lines)
    assert vertices[0].normal == Vec3(1.0, 0.0, 0.0)
    assert vertices[1].normal == Vec3(0.0, 1.0, 0.0)
    assert vertices[3].normal == Vec3()


def test_quad_is_split_into_two_triangles():
    lines = ["v 0 0 0\n", "v 1 0 0\n", "v 1 1 0\n", "v 0 1 0\n", "vn 0 0 1\n",
             "f 1/1/1 2/1/1 3/1/1 4/1/1\n"]
    _, faces = parse_model(lines)
    assert [f.indices for f in faces] == [(0, 1, 2), (0, 2, 3)]


def test_face_without_full_corners_is_skipped():
    lines = ["v 0 0 0\n", "v 1 0 0\n", "v 0 1 0\n", "f 1 2 3\n", "f 1//1 2//1 3//1\n"]
    vertices, faces = parse_model(lines)
    assert len(vertices) == 3
    assert faces == []


def test_vertex_index_out_of_range():
    lines = ["v 0 0 0\n", "vn 0 0 1\n", "f 1/1/1 2/1/1 3/1/1\n"]
    with pytest.raises(ValueError):
        parse_model(lines)


def test_normal_index_out_of_range():
    lines = ["v 0 0 0\n", "v 1 0 0\n", "v 0 1 0\n", "f 1/1/1 2/1/1 3/1/1\n"]
    with pytest.raises(ValueError):
        parse_model(lines)


def test_bad_coordinate_raises():
    with pytest.raises(ValueError):
        parse_model(["v 1.0 nope 2.0\n"])


def test_read_model_matches_parse(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("".join(TRIANGLE), encoding="utf-8")
    assert read_model(path) == parse_model(TRIANGLE)


def test_read_model_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_model(tmp_path / "missing.obj")