# どこで: `src/dragoncurve/core/screen_fit.py`。
# 何を: 頂点列を画面中央へ寄せ、余白を残して等方スケールする変換行列を求める。
# なぜ: 折り返し回数や角度が変わっても、曲線が常にビューポート内へ収まるようにするため。

from __future__ import annotations

import numpy as np

from dragoncurve.core.affine import translation, uniform_scaling

DEFAULT_MARGIN = 0.05

# 片軸の広がりが 0 のとき（folds=0 の y 方向など）の下限値。
DEGENERATE_EXTENT_EPS = 1e-9


def fit_to_screen(
    vertices: np.ndarray,
    viewport_width: float,
    viewport_height: float,
    *,
    margin: float = DEFAULT_MARGIN,
) -> np.ndarray:
    """頂点列をビューポートへフィットさせる 3x3 同次変換を返す。

    Parameters
    ----------
    vertices : np.ndarray
        shape (N,2) の頂点列。N >= 1。
    viewport_width, viewport_height : float
        ビューポート寸法 [px]。正の値。
    margin : float, default 0.05
        ビューポートに対する余白の割合。`[0, 1)`。

    Returns
    -------
    np.ndarray
        float64 型 shape (3,3) の変換行列（読み取り専用）。
        `T(w/2, h/2) @ S(scale) @ T(-centroid)` の合成。

    Notes
    -----
    スケールは x/y 各軸の `bound / max_deviation` の小さい方を採用し、縦横比を保つ。
    重心からの最大偏差が 0 の軸は `DEGENERATE_EXTENT_EPS` に丸めるため、
    スケールは常に有限になる（その軸は拘束条件にならない）。
    """
    pts = np.asarray(vertices, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError("vertices は shape (N,2) の 2 次元配列である必要がある")
    if pts.shape[0] == 0:
        raise ValueError("vertices は少なくとも 1 頂点を含む必要がある")

    width = float(viewport_width)
    height = float(viewport_height)
    if not (width > 0.0 and height > 0.0):
        raise ValueError(
            f"viewport は正の寸法である必要がある: got=({viewport_width!r}, {viewport_height!r})"
        )
    m = float(margin)
    if not (0.0 <= m < 1.0):
        raise ValueError(f"margin は [0, 1) の範囲である必要がある: got={margin!r}")

    center = pts.mean(axis=0)
    deviation = np.abs(pts - center).max(axis=0)
    max_x = max(float(deviation[0]), DEGENERATE_EXTENT_EPS)
    max_y = max(float(deviation[1]), DEGENERATE_EXTENT_EPS)

    x_bound = width * (1.0 - m) * 0.5
    y_bound = height * (1.0 - m) * 0.5
    scale = min(x_bound / max_x, y_bound / max_y)

    to_origin = translation(-float(center[0]), -float(center[1]))
    to_center = translation(width / 2.0, height / 2.0)
    out = to_center @ uniform_scaling(scale) @ to_origin
    out.setflags(write=False)
    return out


__all__ = ["DEFAULT_MARGIN", "DEGENERATE_EXTENT_EPS", "fit_to_screen"]
