# -*- coding: utf-8 -*-
import numpy as np
import pytest
from objweld.math import Vec2, Vec3, Point, Normal, Mat4


def test_vectors_store_float32():
    v = Vec3.from_np([1, 2, 3, 4])
    assert v == Vec3(1, 2, 3)
    assert v.as_np().dtype == np.float32
    assert Vec2(0.25, 0.5).as_np().tolist() == [0.25, 0.5]


def test_mat4_identity():
    I = Mat4.identity()
    assert np.allclose(I.to_np(), np.eye(4, dtype=np.float32))
    p = I * Point(Vec3(1, 2, 3))
    assert p == Point(Vec3(1, 2, 3))


def test_mat4_translation_moves_points_not_normals():
    M = Mat4.translate(1, 2, 3)
    p = M * Point(Vec3(0, 0, 0))
    n = M * Normal(Vec3(0, 0, 1))
    assert isinstance(p, Point)
    assert isinstance(n, Normal)
    assert np.allclose(p.as_np(), [1, 2, 3])
    assert np.allclose(n.as_np(), [0, 0, 1])


def test_mat4_scale_applies_to_normals_linearly():
    M = Mat4.scale(2, 1, 1)
    n = M * Normal(Vec3(1, 1, 0))
    # линейная часть без обращения и нормализации
    assert np.allclose(n.as_np(), [2, 1, 0])

    fixed = M.normal_matrix() * Normal(Vec3(1, 1, 0))
    assert np.allclose(fixed.as_np(), [0.5, 1, 0])


def test_mat4_composition_order():
    M = Mat4.translate(1, 0, 0) @ Mat4.scale(2, 2, 2)
    p = M * Point(Vec3(1, 1, 1))
    assert np.allclose(p.as_np(), [3, 2, 2])


def test_mat4_normal_matrix_rejects_singular():
    with pytest.raises(np.linalg.LinAlgError):
        Mat4.scale(0, 1, 1).normal_matrix()


def test_rigid_transform_matches_euler():
    rigid = Mat4.rigid((0, 2, 0), 90, (0, 5, 0))
    p = rigid * Point(Vec3(1, 0, 0))
    assert np.allclose(p.as_np(), [0, 5, -1], atol=1e-6)
    assert np.allclose(rigid.to_np()[0:3, 0:3], Mat4.rotate_y(90).to_np()[0:3, 0:3], atol=1e-6)


def test_rigid_rejects_zero_axis():
    with pytest.raises(ValueError):
        Mat4.rigid((0, 0, 0), 45)
