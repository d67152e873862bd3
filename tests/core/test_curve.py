"""core.curve のドラゴン曲線生成をテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from dragoncurve.core.curve import DragonCurve, generate_dragon, vertex_count


@pytest.mark.parametrize("folds", range(0, 11))
def test_vertex_count_is_power_of_two_plus_one(folds: int) -> None:
    vertices = generate_dragon(folds, math.pi / 2)
    assert vertices.shape == (2**folds + 1, 2)
    assert vertex_count(folds) == 2**folds + 1
    assert vertices.dtype == np.float64


def test_zero_folds_returns_base_segment() -> None:
    vertices = generate_dragon(0, 1.234)
    assert vertices.tolist() == [[0.0, 0.0], [1.0, 0.0]]


def test_one_fold_at_right_angle() -> None:
    vertices = generate_dragon(1, math.pi / 2)
    expected = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0]])
    np.testing.assert_allclose(vertices, expected, rtol=0.0, atol=1e-12)


def test_two_folds_at_right_angle() -> None:
    vertices = generate_dragon(2, math.pi / 2)
    expected = np.array(
        [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 2.0]],
    )
    np.testing.assert_allclose(vertices, expected, rtol=0.0, atol=1e-12)


def test_straight_angle_unfolds_into_a_line() -> None:
    vertices = generate_dragon(2, math.pi)
    expected = np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0], [4.0, 0.0]])
    np.testing.assert_allclose(vertices, expected, rtol=0.0, atol=1e-12)


def test_zero_angle_folds_back_onto_itself() -> None:
    vertices = generate_dragon(1, 0.0)
    assert vertices.tolist() == [[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]]


@pytest.mark.parametrize("angle", [math.pi / 2, 1.0, -2.5, 7.0])
def test_prefix_is_preserved_across_folds(angle: float) -> None:
    previous = generate_dragon(0, angle)
    for folds in range(1, 9):
        current = generate_dragon(folds, angle)
        assert current[0].tolist() == [0.0, 0.0]
        assert np.array_equal(current[: previous.shape[0]], previous)
        previous = current


def test_generation_is_deterministic() -> None:
    a = generate_dragon(9, 0.777)
    b = generate_dragon(9, 0.777)
    assert np.array_equal(a, b)
    assert a.tobytes() == b.tobytes()


@pytest.mark.parametrize("angle", [math.pi / 2, 0.3, 2.0])
def test_every_edge_has_unit_length(angle: float) -> None:
    # 回転は長さを保つため、継ぎ目も含めて全ての辺が長さ 1 のまま連続する。
    vertices = generate_dragon(7, angle)
    lengths = np.linalg.norm(np.diff(vertices, axis=0), axis=1)
    np.testing.assert_allclose(lengths, 1.0, rtol=0.0, atol=1e-9)


def test_seam_starts_at_previous_last_vertex() -> None:
    angle = 0.9
    before = generate_dragon(4, angle)
    after = generate_dragon(5, angle)
    n = before.shape[0]
    pivot = before[-1]
    assert np.array_equal(after[n - 1], pivot)
    # 後半の先頭は「最後から 2 番目」を pivot 回りに回したもの。
    np.testing.assert_allclose(
        np.linalg.norm(after[n] - pivot),
        np.linalg.norm(before[-2] - pivot),
        rtol=0.0,
        atol=1e-12,
    )


def test_dragon_curve_reuses_buffer_without_leaking_state() -> None:
    curve = DragonCurve()
    big = curve.curve(6, 0.5)
    small = curve.curve(2, 0.5)

    assert curve.capacity >= big.shape[0]
    assert np.array_equal(small, generate_dragon(2, 0.5))
    # 以前に返した配列は後続の呼び出しで書き換わらない。
    assert np.array_equal(big, generate_dragon(6, 0.5))


def test_returned_vertices_are_read_only() -> None:
    vertices = generate_dragon(3, 0.5)
    with pytest.raises(ValueError):
        vertices[0, 0] = 1.0


@pytest.mark.parametrize("folds", [-1, 1.5, "3"])
def test_invalid_folds_raise(folds: object) -> None:
    with pytest.raises(ValueError):
        generate_dragon(folds, 0.0)  # type: ignore[arg-type]
