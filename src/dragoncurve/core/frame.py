# どこで: `src/dragoncurve/core/frame.py`。
# 何を: 現在の状態から 1 フレーム分の画面座標と色を組み立てる。
# なぜ: 生成→フィット→座標変換→色付けの流れを GL から切り離してテストできるようにするため。

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from dragoncurve.core.affine import transform_points
from dragoncurve.core.colors import (
    DEFAULT_LIGHTNESS,
    DEFAULT_SATURATION,
    rainbow_segment_colors,
)
from dragoncurve.core.controls import CurveState
from dragoncurve.core.curve import DragonCurve
from dragoncurve.core.screen_fit import DEFAULT_MARGIN, fit_to_screen


@dataclass(frozen=True, slots=True)
class FrameGeometry:
    """1 フレーム分の描画データ。

    Parameters
    ----------
    points : np.ndarray
        float32 型 shape (N,2) の画面座標 [px]（y 下向き）。
    colors : np.ndarray
        float32 型 shape (N-1,3) のセグメント色。セグメント `i` は `points[i] -> points[i+1]`。
    transform : np.ndarray
        曲線座標から画面座標への 3x3 同次変換。
    """

    points: np.ndarray
    colors: np.ndarray
    transform: np.ndarray

    @property
    def segment_count(self) -> int:
        return int(self.colors.shape[0])


def compose_frame(
    curve: DragonCurve,
    state: CurveState,
    width: float,
    height: float,
    *,
    margin: float = DEFAULT_MARGIN,
    saturation: float = DEFAULT_SATURATION,
    lightness: float = DEFAULT_LIGHTNESS,
) -> FrameGeometry:
    """状態 `state` の曲線を `width` x `height` のビューポートへ配置する。"""
    vertices = curve.curve(state.folds, state.angle)
    transform = fit_to_screen(vertices, width, height, margin=margin)
    points = transform_points(transform, vertices).astype(np.float32)
    colors = rainbow_segment_colors(
        vertices.shape[0] - 1,
        saturation=saturation,
        lightness=lightness,
    )
    return FrameGeometry(points=points, colors=colors, transform=transform)


__all__ = ["FrameGeometry", "compose_frame"]
