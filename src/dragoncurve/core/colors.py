# どこで: `src/dragoncurve/core/colors.py`。
# 何を: HSL→RGB 変換と、曲線の位置に応じた虹色グラデーションを提供する。
# なぜ: セグメントごとの色を GPU 転送前に配列としてまとめて作るため。

from __future__ import annotations

import colorsys
import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

DEFAULT_SATURATION = 0.5
DEFAULT_LIGHTNESS = 0.5


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    """HSL（各 0..1、hue は周回）を RGB（各 0..1）に変換する。

    Notes
    -----
    1 色ずつの参照実装。描画経路は `rainbow_segment_colors`（Numba 版）を使い、
    その結果はこの関数と一致することをテストで確認している。
    """
    # colorsys は HLS 順の引数を取る。
    r, g, b = colorsys.hls_to_rgb(float(hue) % 1.0, float(lightness), float(saturation))
    return float(r), float(g), float(b)


def rainbow_segment_colors(
    segment_count: int,
    *,
    saturation: float = DEFAULT_SATURATION,
    lightness: float = DEFAULT_LIGHTNESS,
) -> np.ndarray:
    """ポリラインの各セグメント色を返す。

    Parameters
    ----------
    segment_count : int
        セグメント数（頂点数 - 1）。1 以上。
    saturation, lightness : float
        固定の彩度・明度（0..1）。

    Returns
    -------
    np.ndarray
        float32 型 shape (segment_count, 3) の RGB 配列。
        セグメント `i` の色相は `i / segment_count`。
    """
    n = int(segment_count)
    if n < 1:
        raise ValueError(f"segment_count は 1 以上である必要がある: got={segment_count!r}")
    return _rainbow_numba(n, float(saturation), float(lightness))


@njit(cache=True)  # type: ignore[misc]
def _hue_channel(p: float, q: float, t: float) -> float:
    t = t - math.floor(t)
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


@njit(cache=True)  # type: ignore[misc]
def _rainbow_numba(n: int, saturation: float, lightness: float) -> np.ndarray:
    """セグメント色の配列を生成する（Numba 版）。"""
    out = np.empty((n, 3), dtype=np.float32)
    if lightness <= 0.5:
        q = lightness * (1.0 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2.0 * lightness - q
    for i in range(n):
        h = i / n
        out[i, 0] = _hue_channel(p, q, h + 1.0 / 3.0)
        out[i, 1] = _hue_channel(p, q, h)
        out[i, 2] = _hue_channel(p, q, h - 1.0 / 3.0)
    return out


__all__ = ["DEFAULT_LIGHTNESS", "DEFAULT_SATURATION", "hsl_to_rgb", "rainbow_segment_colors"]
