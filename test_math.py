# -*- coding: utf-8 -*-
import numpy as np
from tmath.math.vec3 import Vec3
from tmath.math.vec4 import Vec4
from tmath.math.mat4 import Mat4

def test_vec3_ops():
    a = Vec3(2, -6, 3)
    b = Vec3(4, 3, 0.5)
    assert (a * b).as_np().tolist() == [8, -18, 1.5]
    assert (a / b).as_np().tolist() == [0.5, -2, 6]
    assert (0.5 * a).as_np().tolist() == [1, -3, 1.5]
    assert Vec3.cross(a, b).as_np().tolist() == [-3 - 9, -(1 - 12), 6 + 24]

def test_mat4_identity():
    I = Mat4.identity()
    assert np.allclose(I.to_np(), np.eye(4))

def test_mat4_translation():
    M = Mat4.create_translation(Vec3(1, 2, 3))
    p = Vec4(0, 0, 0, 1)
    res = p * M
    assert np.allclose(res.as_np(), np.array([1, 2, 3, 1]))

def test_rotation_chain():
    M = Mat4.create_rotation_z(np.pi / 2) * Mat4.create_translation(Vec3(0, 0, 5))
    res = Vec4(1, 0, 0, 1) * M
    assert np.allclose(res.as_np(), np.array([0, 1, 5, 1]))
