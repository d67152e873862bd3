"""core.affine の同次変換ヘルパをテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from dragoncurve.core.affine import (
    rotation,
    rotation_about,
    transform_points,
    translation,
    uniform_scaling,
)


def test_translation_and_scaling_compose_right_to_left() -> None:
    m = translation(10.0, 20.0) @ uniform_scaling(2.0)
    out = transform_points(m, np.array([[1.0, 1.0], [-1.0, 0.5]]))
    np.testing.assert_allclose(out, [[12.0, 22.0], [8.0, 21.0]])


def test_positive_rotation_is_counter_clockwise_on_screen() -> None:
    # y 下向き座標なので、+x は画面上方向（-y）へ回る。
    out = transform_points(rotation(math.pi / 2), np.array([[1.0, 0.0], [0.0, 1.0]]))
    np.testing.assert_allclose(out, [[0.0, -1.0], [1.0, 0.0]], atol=1e-12)


def test_rotation_about_keeps_pivot_fixed() -> None:
    pivot = np.array([3.0, -2.0])
    m = rotation_about(pivot, 1.1)
    out = transform_points(m, pivot[None, :])
    np.testing.assert_allclose(out[0], pivot, atol=1e-12)


def test_transform_points_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        transform_points(np.eye(3), np.zeros((3, 3)))
