# -*- coding: utf-8 -*-
"""
Конструкторы преобразований и применение матрицы к вектору (v * M).
"""

import math

import numpy as np
import pytest

from tmath.math import scalar, Mat3, Mat4, Vec2, Vec3, Vec4


ANGLES = [0.0, 0.3, -1.2, math.pi / 2, math.pi, 2.5]


# ----------------------------------------------------------------------
# поворот
# ----------------------------------------------------------------------
@pytest.mark.parametrize("mat", [Mat3, Mat4])
def test_zero_rotation_is_identity(mat):
    assert mat.create_rotation_z(0, rounding=True) == mat.identity()
    assert mat.create_rotation_x(0) == mat.identity()
    assert mat.create_rotation_y(0) == mat.identity()


@pytest.mark.parametrize("angle", ANGLES)
def test_rotation_x_layout(angle):
    c, s = math.cos(angle), math.sin(angle)
    for mat in (Mat3, Mat4):
        m = mat.create_rotation_x(angle)
        assert m[0, 0] == 1.0
        assert (m[1, 1], m[1, 2], m[2, 1], m[2, 2]) == (c, -s, s, c)
        assert m[0, 1] == m[0, 2] == m[1, 0] == m[2, 0] == 0.0
    assert Mat4.create_rotation_x(angle).fourth_row == Vec4(0, 0, 0, 1)


@pytest.mark.parametrize("angle", ANGLES)
def test_rotation_y_layout(angle):
    c, s = math.cos(angle), math.sin(angle)
    for mat in (Mat3, Mat4):
        m = mat.create_rotation_y(angle)
        assert m[1, 1] == 1.0
        assert (m[0, 0], m[0, 2], m[2, 0], m[2, 2]) == (c, s, -s, c)
        assert m[0, 1] == m[1, 0] == m[1, 2] == m[2, 1] == 0.0


@pytest.mark.parametrize("angle", ANGLES)
def test_rotation_z_layout(angle):
    c, s = math.cos(angle), math.sin(angle)
    for mat in (Mat3, Mat4):
        m = mat.create_rotation_z(angle)
        assert m[2, 2] == 1.0
        assert (m[0, 0], m[0, 1], m[1, 0], m[1, 1]) == (c, s, -s, c)
        assert m[0, 2] == m[1, 2] == m[2, 0] == m[2, 1] == 0.0


def test_rounding_snaps_negative_zero_sine():
    # sin(-0.0) == -0.0; с округлением хранится +0.0
    rounded = Mat3.create_rotation_z(-0.0)
    raw = Mat3.create_rotation_z(-0.0, rounding=False)
    assert math.copysign(1.0, rounded[0, 1]) == 1.0
    assert math.copysign(1.0, raw[0, 1]) == -1.0
    # знак не влияет на равенство
    assert rounded == raw


def test_rotation_composition_is_not_commutative():
    a, b = 0.7, -1.1
    for mat in (Mat3, Mat4):
        assert mat.create_rotation_x(a) * mat.create_rotation_y(b) != \
            mat.create_rotation_y(b) * mat.create_rotation_x(a)


@pytest.mark.parametrize("mat", [Mat3, Mat4])
def test_create_rotation_composes_x_then_y_then_z(mat):
    radians = Vec3(0.2, -0.4, 1.3)
    expected = (mat.create_rotation_x(0.2)
                * mat.create_rotation_y(-0.4)
                * mat.create_rotation_z(1.3))
    assert mat.create_rotation(radians) == expected
    reversed_order = (mat.create_rotation_z(1.3)
                      * mat.create_rotation_y(-0.4)
                      * mat.create_rotation_x(0.2))
    assert mat.create_rotation(radians) != reversed_order


def test_uniform_rotation_matches_vector_form():
    assert Mat4.create_rotation_uniform(0.5) == Mat4.create_rotation(Vec3(0.5, 0.5, 0.5))
    assert Mat3.create_rotation_uniform(0.5, rounding=False) == \
        Mat3.create_rotation(Vec3(0.5, 0.5, 0.5), rounding=False)


def test_rotation_preserves_length():
    v = Vec3(1, 2, 3)
    rotated = v * Mat3.create_rotation(Vec3(0.3, 1.1, -0.7))
    assert rotated.magnitude == pytest.approx(v.magnitude)


def test_rotation_z_quarter_turn_on_vector():
    v = Vec3(1, 0, 0) * Mat3.create_rotation_z(math.pi / 2)
    assert np.allclose(v.as_np(), [0, 1, 0])


# ----------------------------------------------------------------------
# масштаб и перенос
# ----------------------------------------------------------------------
def test_scale_applied_to_vector():
    assert Vec3(1, 1, 1) * Mat3.create_scale(Vec3(2, 3, 4)) == Vec3(2, 3, 4)
    assert Vec4(1, 1, 1, 1) * Mat4.create_scale(Vec3(2, 3, 4)) == Vec4(2, 3, 4, 1)


def test_scale_layout():
    m = Mat4.create_scale(Vec3(2, 3, 4))
    assert m.scale == Vec3(2, 3, 4)
    assert m[3, 3] == 1.0
    assert m - Mat4.identity() == Mat4(np.diag([1.0, 2.0, 3.0, 0.0]))


def test_mat4_translation_in_last_row():
    m = Mat4.create_translation(Vec3(5, -6, 7))
    assert m.fourth_row == Vec4(5, -6, 7, 1)
    assert m.translation == Vec3(5, -6, 7)
    assert Vec4(1, 2, 3, 1) * m == Vec4(6, -4, 10, 1)
    # направление (W = 0) переносом не затрагивается
    assert Vec4(1, 2, 3, 0) * m == Vec4(1, 2, 3, 0)


def test_mat3_translation_is_2d_affine():
    m = Mat3.create_translation(Vec2(2, -3))
    assert m.third_row == Vec3(2, -3, 1)
    assert m.translation == Vec2(2, -3)
    assert Vec3(1, 1, 1) * m == Vec3(3, -2, 1)


def test_rotation_scale_translation_chain():
    chain = (Mat4.create_rotation_z(math.pi / 2)
             * Mat4.create_scale(Vec3(2, 2, 2))
             * Mat4.create_translation(Vec3(10, 0, 0)))
    p = Vec4(1, 0, 0, 1) * chain
    assert np.allclose(p.as_np(), [10, 2, 0, 1])


# ----------------------------------------------------------------------
# ортографическая проекция
# ----------------------------------------------------------------------
def test_centered_orthographic():
    m = Mat4.create_orthographic_centered(width=2, height=2, far=10, near=1)
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (1, 1, 1 / 9, 1)
    assert m[3, 2] == -1 / 9
    assert m[3, 0] == m[3, 1] == 0.0
    assert m[0, 3] == m[1, 3] == m[2, 3] == 0.0


def test_orthographic_volume():
    m = Mat4.create_orthographic(right=4, left=-2, top=3, bottom=-1, far=20, near=0)
    assert m[0, 0] == 2 / 6
    assert m[1, 1] == 2 / 4
    assert m[2, 2] == -2 / 20
    assert m.fourth_row == Vec4(-2 / 6, -2 / 4, -20 / 20, 1)
    # углы объёма отображаются в ±1
    corner = Vec4(4, 3, 0, 1) * m
    assert np.allclose(corner.as_np(), [1, 1, -1, 1])


def test_degenerate_orthographic_propagates_non_finite():
    m = Mat4.create_orthographic(0, 0, 1, 0, 1, 0)
    assert m[0, 0] == math.inf
    assert math.isnan(m[3, 0])
    c = Mat4.create_orthographic_centered(0, 2, 5, 5)
    assert c[0, 0] == math.inf
    assert c[2, 2] == math.inf
    assert c[3, 2] == -math.inf


# ----------------------------------------------------------------------
# out= и форма с возвратом
# ----------------------------------------------------------------------
@pytest.mark.parametrize("build", [
    lambda mat, out=None: mat.create_rotation_x(0.4, out=out),
    lambda mat, out=None: mat.create_rotation_y(-0.9, True, out=out),
    lambda mat, out=None: mat.create_rotation_z(2.0, False, out=out),
    lambda mat, out=None: mat.create_rotation(Vec3(0.1, 0.2, 0.3), out=out),
    lambda mat, out=None: mat.create_rotation_uniform(0.6, out=out),
    lambda mat, out=None: mat.create_scale(Vec3(2, 3, 4), out=out),
])
@pytest.mark.parametrize("mat", [Mat3, Mat4])
def test_out_form_matches_return_form(build, mat):
    target = mat(np.full((mat.SIZE, mat.SIZE), 7.0))
    result = build(mat, out=target)
    assert result is target
    assert target == build(mat)


def test_out_form_for_translation_and_projection():
    target = Mat4()
    assert Mat4.create_translation(Vec3(1, 2, 3), out=target) is target
    assert target == Mat4.create_translation(Vec3(1, 2, 3))
    Mat4.create_orthographic(2, -2, 2, -2, 10, 1, out=target)
    assert target == Mat4.create_orthographic(2, -2, 2, -2, 10, 1)
    Mat4.create_orthographic_centered(4, 3, 9, 1, out=target)
    assert target == Mat4.create_orthographic_centered(4, 3, 9, 1)
    m3 = Mat3()
    Mat3.create_translation(Vec2(4, 5), out=m3)
    assert m3 == Mat3.create_translation(Vec2(4, 5))


def test_out_must_match_matrix_type():
    with pytest.raises(TypeError):
        Mat4.create_rotation_x(0.1, out=Mat3())


# ----------------------------------------------------------------------
# v * M
# ----------------------------------------------------------------------
def test_vector_matrix_uses_row_vector_convention():
    m = Mat3.from_values(1, 2, 3,
                         4, 5, 6,
                         7, 8, 9)
    v = Vec3(1, 10, 100)
    assert v * m == Vec3(1 + 40 + 700, 2 + 50 + 800, 3 + 60 + 900)
    assert Vec3.multiply(v, m) == v * m
    assert v @ m == v * m


def test_vector_matrix_fma_chain_order():
    # x = fma(m00, vx, fma(m10, vy, m20 * vz))
    m = Mat3.from_values(1.0, 0, 0,
                         1.0, 0, 0,
                         1.0, 0, 0)
    e = 2.0 ** -30
    v = Vec3(1 + e, 1 + e, -(1 + e))
    expected = scalar.fma(1.0, 1 + e, scalar.fma(1.0, 1 + e, 1.0 * -(1 + e)))
    assert (v * m).x == expected

    m4 = Mat4.from_values(1 + e, 0, 0, 0,
                          0, 0, 0, 0,
                          0, 0, 0, 0,
                          -1.0, 0, 0, 0)
    w = Vec4(1 + e, 0, 0, 1.0)
    # fma сохраняет младший бит (1 + e)^2 - 1 = 2e + e^2
    assert (w * m4).x == 2 * e + e * e


def test_vector_matrix_requires_matching_dimension():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * Mat4()
    with pytest.raises(TypeError):
        Vec2(1, 2) * Mat3()
    with pytest.raises(TypeError):
        Mat3() * Vec3(1, 2, 3)
