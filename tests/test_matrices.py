import math

import pytest

from oogabooga.matrices import Matrix3, Matrix4
from oogabooga.vectors import Vector2, Vector3, Vector4, rotate_point_around_pivot


def assert_matrix_close(a, b):
    assert a.data == pytest.approx(b.data, abs=1e-9)


def assert_vec_close(a, b):
    assert tuple(a) == pytest.approx(tuple(b), abs=1e-9)


SAMPLE4 = Matrix4(
    (
        (2, 0, 1, 3),
        (1, 3, 0, -1),
        (0, 1, 4, 2),
        (1, 0, 0, 1),
    )
)
SAMPLE3 = Matrix3(((2, 1, 0), (0, 3, 1), (1, 0, 4)))


def test_identity_is_scalar_one():
    assert Matrix4.identity() == Matrix4.scalar(1)
    assert Matrix3.identity() == Matrix3.scalar(1)


def test_scalar_diagonal_positions():
    m = Matrix4.scalar(7)
    diag = [m.data[i] for i in (0, 5, 10, 15)]
    assert diag == [7, 7, 7, 7]
    assert sum(m.data) == sum(diag)


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix4(((1, 2), (3, 4)))
    with pytest.raises(ValueError):
        Matrix3(((1, 2, 3), (4, 5, 6)))


def test_identity_transform_is_noop():
    v = Vector4(1.5, -2, 3, 1)
    assert Matrix4.identity().transform(v) == v
    w = Vector3(4, 5, 1)
    assert Matrix3.identity().transform(w) == w


def test_translation_moves_origin():
    m = Matrix4.make_translation(Vector3(5, 6, 7))
    assert m.transform(Vector4(0, 0, 0, 1)) == Vector4(5, 6, 7, 1)
    assert m.data[3] == 5


def test_translation_ignores_directions():
    m = Matrix4.make_translation(Vector3(5, 6, 7))
    d = Vector4(1, 2, 3, 0)
    assert m.transform(d) == d


def test_translate_composes():
    m = Matrix4.identity().translate(Vector3(1, 2, 3)).translate(Vector3(4, 5, 6))
    got = m.transform(Vector4(0, 0, 0, 1))
    expected = Vector3(1, 2, 3) + Vector3(4, 5, 6)
    assert_vec_close(got.xyz, expected)


def test_scale_matrix():
    m = Matrix4.identity().scale(Vector3(2, 3, 4))
    assert m.transform(Vector4(1, 1, 1, 1)) == Vector4(2, 3, 4, 1)


def test_rotation_zero_is_identity():
    assert_matrix_close(Matrix4.make_rotation_z(0), Matrix4.identity())
    assert_matrix_close(Matrix3.make_rotation(0), Matrix3.identity())


def test_rotation_inverse_pair():
    r = 0.73
    m = Matrix4.make_rotation_z(r) @ Matrix4.make_rotation_z(-r)
    assert_matrix_close(m, Matrix4.identity())


def test_rotation_preserves_length():
    axis = Vector3(1, 2, 2).normalize()
    v = Vector4(3, -1, 2, 0)
    rotated = Matrix4.identity().rotate(axis, 1.1).transform(v)
    assert rotated.length() == pytest.approx(v.length())


def test_rotate_z_matches_make_rotation_z():
    assert_matrix_close(
        Matrix4.identity().rotate_z(0.4), Matrix4.make_rotation_z(0.4)
    )


def test_rotation_axis_is_fixed():
    axis = Vector3(0, 1, 0)
    v = Vector4(0, 5, 0, 1)
    assert_vec_close(Matrix4.make_rotation(axis, 2.0).transform(v), v)


def test_orthographic_maps_corners():
    m = Matrix4.make_orthographic_projection(0, 800, 0, 600, -1, 1)
    low = m.transform(Vector4(0, 0, 1, 1))
    high = m.transform(Vector4(800, 600, -1, 1))
    assert_vec_close(low, Vector4(-1, -1, -1, 1))
    assert_vec_close(high, Vector4(1, 1, 1, 1))


def test_matrix4_inverse_round_trip():
    inv = SAMPLE4.inverse()
    assert_matrix_close(SAMPLE4 @ inv, Matrix4.identity())
    assert_matrix_close(inv @ SAMPLE4, Matrix4.identity())


def test_matrix4_inverse_undoes_transform():
    m = Matrix4.make_translation(Vector3(3, -2, 9)).rotate_z(0.5)
    v = Vector4(1, 2, 3, 1)
    assert_vec_close(m.inverse().transform(m.transform(v)), v)


def test_singular_inverse_is_zero():
    singular = Matrix4(((1, 2, 3, 4), (2, 4, 6, 8), (0, 1, 0, 1), (1, 0, 1, 0)))
    assert singular.inverse() == Matrix4.scalar(0)
    assert Matrix3(((1, 2, 3), (2, 4, 6), (0, 0, 1))).inverse() == Matrix3.scalar(0)


def test_matrix3_inverse_round_trip():
    assert_matrix_close(SAMPLE3 @ SAMPLE3.inverse(), Matrix3.identity())


def test_matrix3_rotation_matches_vector_rotation():
    angle = 1.2
    p = Vector2(3, 1)
    got = Matrix3.make_rotation(angle).transform(Vector3(p.x, p.y, 1))
    expected = rotate_point_around_pivot(p, Vector2(0, 0), angle)
    assert_vec_close(got.xy, expected)


def test_matrix3_translate_and_scale():
    m = Matrix3.identity().translate(Vector2(4, 5)).scale(Vector2(2, 3))
    got = m.transform(Vector3(1, 1, 1))
    assert_vec_close(got, Vector3(2 + 4, 3 + 5, 1))


def test_matrix3_rotate_method():
    assert_matrix_close(
        Matrix3.identity().rotate(math.pi / 3), Matrix3.make_rotation(math.pi / 3)
    )


def test_to_matrix4_keeps_translation():
    m3 = Matrix3.make_translation(Vector2(7, -3))
    m4 = m3.to_matrix4()
    assert m4.transform(Vector4(0, 0, 0, 1)) == Vector4(7, -3, 0, 1)
    assert m4[2] == Matrix4.identity()[2]


def test_to_matrix4_of_identity():
    assert Matrix3.identity().to_matrix4() == Matrix4.identity()


def test_matmul_rejects_mixed_types():
    with pytest.raises(TypeError):
        Matrix4.identity() @ Matrix3.identity()