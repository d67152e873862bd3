"""core.screen_fit の画面フィット変換をテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from dragoncurve.core.affine import transform_points
from dragoncurve.core.curve import generate_dragon
from dragoncurve.core.screen_fit import fit_to_screen


def test_fit_rectangle_binds_on_tighter_axis() -> None:
    vertices = np.array([[0.0, 0.0], [2.0, 0.0], [2.0, 1.0], [0.0, 1.0]])
    m = fit_to_screen(vertices, 400.0, 100.0)
    out = transform_points(m, vertices)

    # centroid (1, 0.5), max_x=1, max_y=0.5 -> scale=min(190/1, 47.5/0.5)=95
    expected = np.array([[105.0, 2.5], [295.0, 2.5], [295.0, 97.5], [105.0, 97.5]])
    np.testing.assert_allclose(out, expected, rtol=0.0, atol=1e-9)


@pytest.mark.parametrize("folds", [2, 5, 9])
@pytest.mark.parametrize("angle", [math.pi / 2, 1.0, 2.5])
@pytest.mark.parametrize("viewport", [(800.0, 600.0), (300.0, 900.0)])
def test_fit_stays_inside_bounds_and_is_centered(
    folds: int, angle: float, viewport: tuple[float, float]
) -> None:
    width, height = viewport
    vertices = generate_dragon(folds, angle)
    m = fit_to_screen(vertices, width, height)

    center = transform_points(m, vertices.mean(axis=0)[None, :])[0]
    np.testing.assert_allclose(center, [width / 2, height / 2], rtol=0.0, atol=1e-6)

    out = transform_points(m, vertices)
    half_w, half_h = np.abs(out - center).max(axis=0)
    x_bound = width * 0.475
    y_bound = height * 0.475
    assert half_w <= x_bound + 1e-6
    assert half_h <= y_bound + 1e-6
    # どちらか一方の軸がちょうど境界に接する。
    assert max(half_w / x_bound, half_h / y_bound) == pytest.approx(1.0)


def test_fit_clamps_zero_extent_axis() -> None:
    # folds=0 は y 方向の広がりが 0（そのままだとゼロ除算）。
    vertices = generate_dragon(0, math.pi / 2)
    m = fit_to_screen(vertices, 800.0, 600.0)
    assert np.all(np.isfinite(m))

    out = transform_points(m, vertices)
    np.testing.assert_allclose(out, [[20.0, 300.0], [780.0, 300.0]], rtol=0.0, atol=1e-9)


def test_fit_single_point_is_finite_and_centered() -> None:
    m = fit_to_screen(np.array([[3.0, 4.0]]), 100.0, 50.0)
    assert np.all(np.isfinite(m))
    out = transform_points(m, np.array([[3.0, 4.0]]))
    np.testing.assert_allclose(out, [[50.0, 25.0]])


def test_fit_custom_margin() -> None:
    vertices = np.array([[-1.0, -1.0], [1.0, 1.0]])
    m = fit_to_screen(vertices, 100.0, 100.0, margin=0.0)
    out = transform_points(m, vertices)
    np.testing.assert_allclose(out, [[0.0, 0.0], [100.0, 100.0]])


def test_fit_matrix_is_read_only() -> None:
    m = fit_to_screen(generate_dragon(3, 1.0), 100.0, 100.0)
    with pytest.raises(ValueError):
        m[0, 0] = 0.0


def test_fit_rejects_empty_vertices() -> None:
    with pytest.raises(ValueError):
        fit_to_screen(np.zeros((0, 2)), 100.0, 100.0)


@pytest.mark.parametrize("viewport", [(0.0, 100.0), (100.0, -1.0)])
def test_fit_rejects_non_positive_viewport(viewport: tuple[float, float]) -> None:
    with pytest.raises(ValueError):
        fit_to_screen(generate_dragon(2, 1.0), *viewport)


@pytest.mark.parametrize("margin", [-0.1, 1.0])
def test_fit_rejects_bad_margin(margin: float) -> None:
    with pytest.raises(ValueError):
        fit_to_screen(generate_dragon(2, 1.0), 100.0, 100.0, margin=margin)
