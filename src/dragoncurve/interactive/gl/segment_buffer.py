# どこで: `src/dragoncurve/interactive/gl/segment_buffer.py`。
# 何を: 画面座標のポリラインとセグメント色から GL_LINES 用のインターリーブ頂点配列を生成する。
# なぜ: セグメントごとに色が異なるため、各線分の両端へ同じ色を持たせた頂点を作る必要がある。

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[attr-defined]

# 1 頂点あたりの float 数（x, y, r, g, b）。
FLOATS_PER_VERTEX = 5


def build_segment_vertices(points: np.ndarray, colors: np.ndarray) -> np.ndarray:
    """ポリライン頂点とセグメント色から GL_LINES 用の頂点配列を生成する。

    Parameters
    ----------
    points : np.ndarray
        shape (N,2) の画面座標。
    colors : np.ndarray
        shape (N-1,3) のセグメント色。

    Returns
    -------
    np.ndarray
        float32 型 shape (2*(N-1), 5) の配列。行 `2i` と `2i+1` がセグメント `i` の両端。
    """
    pts = np.ascontiguousarray(points, dtype=np.float32)
    cols = np.ascontiguousarray(colors, dtype=np.float32)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("points は shape (N,2) の 2 次元配列である必要がある")
    if cols.ndim != 2 or cols.shape[1] != 3:
        raise ValueError("colors は shape (M,3) の 2 次元配列である必要がある")
    if pts.shape[0] < 2:
        return np.zeros((0, FLOATS_PER_VERTEX), dtype=np.float32)
    if cols.shape[0] != pts.shape[0] - 1:
        raise ValueError(
            f"colors の行数は points の行数 - 1 である必要がある: got={cols.shape[0]} vs {pts.shape[0]}"
        )
    return _build_segment_vertices_numba(pts, cols)


@njit(cache=True)  # type: ignore[misc]
def _build_segment_vertices_numba(points: np.ndarray, colors: np.ndarray) -> np.ndarray:
    """GL_LINES 用のインターリーブ頂点配列を生成する（Numba 版）。"""
    m = points.shape[0] - 1
    out = np.empty((2 * m, 5), dtype=np.float32)
    for i in range(m):
        for k in range(2):
            row = 2 * i + k
            out[row, 0] = points[i + k, 0]
            out[row, 1] = points[i + k, 1]
            out[row, 2] = colors[i, 0]
            out[row, 3] = colors[i, 1]
            out[row, 4] = colors[i, 2]
    return out
