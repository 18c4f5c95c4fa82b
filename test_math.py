# -*- coding: utf-8 -*-
import math

import numpy as np

from swrast3d.math.mat4 import Mat4, normalize
from swrast3d.math.quat import Quat


def test_mat4_identity():
    I = Mat4.identity()
    assert np.allclose(I.to_np(), np.eye(4))


def test_mat4_translation():
    M = Mat4.translate(1, 2, 3)
    res = M @ np.array([0, 0, 0, 1])
    assert np.allclose(res, [1, 2, 3, 1])


def test_rotate_y_quarter_turn():
    res = Mat4.rotate_y(math.pi / 2) @ np.array([1, 0, 0, 1])
    assert np.allclose(res, [0, 0, -1, 1])


def test_model_scales_then_translates():
    M = Mat4.model((1, 2, 3), 2.0, (0, 0, 0))
    assert np.allclose(M @ np.array([1, 0, 0, 1]), [3, 2, 3, 1])


def test_model_rotation_order():
    rot = (0.3, -0.7, 1.1)
    expected = Mat4.rotate_z(rot[2]) @ Mat4.rotate_y(rot[1]) @ Mat4.rotate_x(rot[0])
    assert np.allclose(Mat4.model((0, 0, 0), 1.0, rot).m, expected.m)


def test_perspective_maps_near_and_far():
    P = Mat4.perspective(60.0, 4 / 3, 10.0, 5000.0)
    near = P @ np.array([0, 0, -10.0, 1])
    far = P @ np.array([0, 0, -5000.0, 1])
    assert math.isclose(near[2] / near[3], -1.0, abs_tol=1e-9)
    assert math.isclose(far[2] / far[3], 1.0, abs_tol=1e-9)


def test_look_at_puts_target_on_negative_z():
    V = Mat4.look_at((600, 0, 0), (0, 0, 0), (0, 1, 0))
    assert np.allclose(V @ np.array([0, 0, 0, 1]), [0, 0, -600, 1])


def test_viewport_top_left_origin():
    VP = Mat4.viewport(800, 600)
    assert np.allclose(VP @ np.array([-1, 1, 0.25, 1]), [0, 0, 0.25, 1])
    assert np.allclose(VP @ np.array([1, -1, 0.25, 1]), [800, 600, 0.25, 1])


def test_normal_matrix():
    assert np.allclose(Mat4.scale(2.0).normal_matrix(), np.eye(3) * 0.5)
    # вырожденная матрица → единичная
    assert np.allclose(Mat4.scale(0.0).normal_matrix(), np.eye(3))


def test_normalize_zero_vector():
    assert np.allclose(normalize(np.zeros(3)), np.zeros(3))
    assert np.allclose(normalize(np.array([3.0, 0, 4.0])), [0.6, 0, 0.8])


def test_quat_rotation():
    q = Quat.from_axis_angle((0, 1, 0), np.radians(90))
    rotated = q.rotate_vector((1, 0, 0))
    assert np.allclose(rotated, [0, 0, -1]), rotated


def test_quat_zero_axis_is_identity():
    q = Quat.from_axis_angle((0, 0, 0), 1.0)
    assert np.allclose(q.rotate_vector((1, 2, 3)), [1, 2, 3])
