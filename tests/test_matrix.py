import math

import pytest

from softrender.matrix import Mat4, Vec2, Vec3, Vec4, collinear

TOL = 1e-9


def test_identity_is_neutral_for_multiplication():
    m = Mat4.translation(1.5, -2.0, 3.25) @ Mat4.rotation_x(0.3)
    assert list(Mat4.identity() @ m) == pytest.approx(list(m), abs=TOL)
    assert list(m @ Mat4.identity()) == pytest.approx(list(m), abs=TOL)


def test_identity_default_constructor_matches():
    assert Mat4() == Mat4.identity()


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        Mat4((1.0, 2.0, 3.0))


def test_translation_stored_in_last_column():
    m = Mat4.translation(4.0, 5.0, 6.0)
    assert (m[12], m[13], m[14]) == (4.0, 5.0, 6.0)
    assert (m[0, 3], m[1, 3], m[2, 3]) == (4.0, 5.0, 6.0)


def test_row_col_index_out_of_range():
    with pytest.raises(IndexError):
        Mat4.identity()[4, 0]


def test_translation_moves_point_by_offset():
    p = Vec4(1.0, 2.0, 3.0, 1.0)
    offset = Vec4(0.5, -1.5, 2.5, 0.0)
    moved = Mat4.translation(offset.x, offset.y, offset.z).transform_vec4(p)
    assert list(moved) == pytest.approx(
        [p.x + offset.x, p.y + offset.y, p.z + offset.z, p.w], abs=TOL
    )


def test_translation_ignores_directions():
    d = Vec4(1.0, 2.0, 3.0, 0.0)
    moved = Mat4.translation(9.0, 9.0, 9.0).transform_vec4(d)
    assert list(moved) == pytest.approx([1.0, 2.0, 3.0, 0.0], abs=TOL)


@pytest.mark.parametrize("factory", [Mat4.rotation_x, Mat4.rotation_y, Mat4.rotation_z])
def test_rotations_compose_additively(factory):
    combined = factory(0.4) @ factory(0.7)
    assert list(combined) == pytest.approx(list(factory(1.1)), abs=TOL)


@pytest.mark.parametrize("factory", [Mat4.rotation_x, Mat4.rotation_y, Mat4.rotation_z])
def test_rotation_inverse_rigid_round_trip(factory):
    r = factory(0.9)
    product = r @ r.inverse_rigid()
    assert list(product) == pytest.approx(list(Mat4.identity()), abs=TOL)


def test_inverse_rigid_of_rotation_and_translation():
    m = Mat4.translation(1.0, -2.0, 3.0) @ Mat4.rotation_y(0.6)
    inv = m.inverse_rigid()
    p = Vec4(0.3, 0.7, -1.1, 1.0)
    back = inv.transform_vec4(m.transform_vec4(p))
    assert list(back) == pytest.approx([0.3, 0.7, -1.1, 1.0], abs=TOL)
    assert list(m @ inv) == pytest.approx(list(Mat4.identity()), abs=TOL)


def test_multiply_matches_sequential_transform():
    a = Mat4.rotation_z(0.2) @ Mat4.translation(1.0, 2.0, 3.0)
    b = Mat4.scaling(2.0, 3.0, 4.0) @ Mat4.rotation_x(1.3)
    v = Vec4(0.5, -0.25, 2.0, 1.0)
    combined = (a @ b).transform_vec4(v)
    sequential = a.transform_vec4(b.transform_vec4(v))
    assert list(combined) == pytest.approx(list(sequential), abs=TOL)


def test_scaling_transform_vec3():
    out = Mat4.scaling(2.0, 3.0, 4.0).transform_vec3(Vec3(1.0, 1.0, 1.0))
    assert out == Vec3(2.0, 3.0, 4.0)


def test_transform_vec3_applies_translation():
    v = Vec3(1.0, 2.0, 3.0)
    out = Mat4.translation(0.5, 0.5, 0.5).transform_vec3(v)
    assert list(out) == pytest.approx([1.5, 2.5, 3.5], abs=TOL)


def test_transform_vec2_truncates_integer_points():
    out = Mat4.scaling(0.5, 0.5, 1.0).transform_vec2(Vec2(3, 3))
    assert out == Vec2(1, 1)


def test_transform_vec2_keeps_float_points():
    out = Mat4.translation(0.25, 0.5, 0.0).transform_vec2(Vec2(1.0, 2.0))
    assert out == Vec2(1.25, 2.5)


def test_format_has_four_aligned_rows():
    text = Mat4.translation(1.0, 2.0, 3.0).format()
    lines = text.splitlines()
    assert len(lines) == 4
    assert all(line.startswith("| ") and line.endswith(" |") for line in lines)
    assert len({len(line) for line in lines}) == 1
    assert str(Mat4.identity()) == Mat4.identity().format()


def test_vec3_add_sub_round_trip():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.5, 7.0)
    assert (a + b) - b == a


def test_add_scaled_equals_add_of_scaled():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0)
    assert list(a.add_scaled(b, -0.1)) == pytest.approx(list(a + b.scaled(-0.1)), abs=TOL)


def test_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_cross_is_orthogonal_to_inputs():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    dot = lambda u, v: u.x * v.x + u.y * v.y + u.z * v.z
    assert dot(c, a) == pytest.approx(0.0, abs=TOL)
    assert dot(c, b) == pytest.approx(0.0, abs=TOL)


def test_normalize_gives_unit_length():
    assert Vec3(3.0, -7.0, 2.0).normalize().length() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    assert Vec3().normalize() == Vec3(0.0, 0.0, 0.0)


def test_vec2_distance():
    assert Vec2(0, 0).distance(Vec2(3, 4)) == pytest.approx(5.0)
    a, b = Vec2(2, -1), Vec2(-6, 9)
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_vec4_xyz_drops_w():
    assert Vec4(1.0, 2.0, 3.0, 9.0).xyz() == Vec3(1.0, 2.0, 3.0)


def test_collinear_detects_line_and_triangle():
    assert collinear(Vec3(0, 0, 0), Vec3(1, 1, 5), Vec3(2, 2, -3), 1e-6) is True
    assert collinear(Vec4(0, 0, 0), Vec4(1, 0, 0), Vec4(0, 1, 0), 1e-6) is False


def test_rotation_preserves_length():
    v = Vec3(1.0, 2.0, 3.0)
    out = Mat4.rotation_z(math.pi / 3).transform_vec3(v)
    assert out.length() == pytest.approx(v.length())