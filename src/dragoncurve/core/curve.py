# どこで: `src/dragoncurve/core/curve.py`。
# 何を: 折り返し回数と折り角からドラゴン曲線（紙折り曲線）の頂点列を生成する。
# なぜ: 毎フレーム再生成される頂点列を、描画系から独立した純粋関数として扱うため。

from __future__ import annotations

import operator

import numpy as np

from dragoncurve.core.affine import rotation_about, transform_points

BASE_SEGMENT = ((0.0, 0.0), (1.0, 0.0))


def vertex_count(folds: int) -> int:
    """`folds` 回折り返した後の頂点数（`2**folds + 1`）を返す。"""
    return (1 << _as_folds(folds)) + 1


def _as_folds(folds: int) -> int:
    try:
        n = operator.index(folds)
    except TypeError as exc:
        raise ValueError(f"folds は整数である必要がある: got={folds!r}") from exc
    if n < 0:
        raise ValueError(f"folds は 0 以上である必要がある: got={n}")
    return int(n)


class DragonCurve:
    """頂点バッファを使い回すドラゴン曲線ジェネレータ。

    Notes
    -----
    バッファは必要に応じて拡張し、縮小しない。
    `curve()` はバッファのコピーを writeable=False で返すため、
    呼び出し側が後続フレームの書き換えを観測することはない。
    """

    def __init__(self) -> None:
        self._buffer = np.zeros((2, 2), dtype=np.float64)
        self._length = 0

    @property
    def capacity(self) -> int:
        """現在確保している頂点数を返す。"""
        return int(self._buffer.shape[0])

    def _reserve(self, count: int) -> None:
        if count > self._buffer.shape[0]:
            self._buffer = np.zeros((count, 2), dtype=np.float64)

    def _double(self, angle: float) -> None:
        n = self._length
        # 頂点数は常に奇数（初回のみ基本線分の 2）。
        assert n % 2 == 1 or n == 2, n

        buf = self._buffer
        pivot = buf[n - 1]
        transform = rotation_about(pivot, angle)
        # pivot 自身を除き、末尾側から逆順に回転させたものを後半として連結する。
        reversed_old = buf[: n - 1][::-1]
        buf[n : 2 * n - 1] = transform_points(transform, reversed_old)
        self._length = 2 * n - 1

    def curve(self, folds: int, angle: float) -> np.ndarray:
        """`folds` 回折り返した頂点列を返す。

        Parameters
        ----------
        folds : int
            折り返し回数（0 以上）。
        angle : float
            折り角 [rad]。

        Returns
        -------
        np.ndarray
            float64 型 shape (2**folds + 1, 2) の頂点列（読み取り専用）。
        """
        count = vertex_count(folds)
        self._reserve(count)

        buf = self._buffer
        buf[0] = BASE_SEGMENT[0]
        buf[1] = BASE_SEGMENT[1]
        self._length = 2
        for _ in range(_as_folds(folds)):
            self._double(float(angle))

        out = buf[: self._length].copy()
        out.setflags(write=False)
        return out


def generate_dragon(folds: int, angle: float) -> np.ndarray:
    """ドラゴン曲線の頂点列を生成する（`DragonCurve().curve()` の関数版）。"""
    return DragonCurve().curve(folds, angle)


__all__ = ["BASE_SEGMENT", "DragonCurve", "generate_dragon", "vertex_count"]
