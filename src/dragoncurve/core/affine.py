# どこで: `src/dragoncurve/core/affine.py`。
# 何を: 2D 同次座標（3x3 行列）のアフィン変換ヘルパを提供する。
# なぜ: 折り返し（回転）と画面フィット（拡大+平行移動）で同じ行列表現を共有するため。

from __future__ import annotations

import numpy as np


def translation(dx: float, dy: float) -> np.ndarray:
    """平行移動行列を返す。"""
    m = np.eye(3, dtype=np.float64)
    m[0, 2] = float(dx)
    m[1, 2] = float(dy)
    return m


def uniform_scaling(scale: float) -> np.ndarray:
    """等方スケール行列を返す。"""
    s = float(scale)
    return np.array(
        [[s, 0.0, 0.0], [0.0, s, 0.0], [0.0, 0.0, 1.0]],
        dtype=np.float64,
    )


def rotation(angle: float) -> np.ndarray:
    """回転行列を返す。

    Parameters
    ----------
    angle : float
        回転角 [rad]。

    Notes
    -----
    座標系は画面と同じ y 下向き。正の角度は画面上で反時計回りになる。
    """
    c = float(np.cos(angle))
    s = float(np.sin(angle))
    return np.array(
        [[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]],
        dtype=np.float64,
    )


def rotation_about(pivot: np.ndarray, angle: float) -> np.ndarray:
    """`pivot` を中心に `angle` 回転する合成行列（T(+p) @ R @ T(-p)）を返す。"""
    px, py = float(pivot[0]), float(pivot[1])
    return translation(px, py) @ rotation(angle) @ translation(-px, -py)


def transform_points(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """shape (N,2) の点列へ 3x3 同次変換を適用し、shape (N,2) float64 を返す。"""
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points は shape (N,2) の 2 次元配列である必要がある")
    m = np.asarray(matrix, dtype=np.float64)
    # row-vector のため転置で適用し、最後に並進成分を足す。
    return pts @ m[:2, :2].T + m[:2, 2]


__all__ = ["rotation", "rotation_about", "transform_points", "translation", "uniform_scaling"]
