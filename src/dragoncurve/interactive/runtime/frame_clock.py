# どこで: `src/dragoncurve/interactive/runtime/frame_clock.py`。
# 何を: 角度の積分に使うフレーム間経過秒 `dt` の生成規則を提供する。
# なぜ: 「通常は実時間」「固定刻み（再現性が必要なとき）」を分離して見通しを良くするため。

from __future__ import annotations

import time


class RealTimeClock:
    """実時間ベースのフレーム時計。

    Notes
    -----
    `tick()` は前回の `tick()`（初回は開始時刻）からの経過秒を返す。
    """

    def __init__(self, *, start_time: float) -> None:
        self._last_tick = float(start_time)

    def tick(self) -> float:
        """フレームを進め、前フレームからの経過秒を返す。"""

        now = time.perf_counter()
        dt = max(0.0, float(now - self._last_tick))
        self._last_tick = now
        return dt


class FixedStepClock:
    """固定刻みのフレーム時計。

    Notes
    -----
    `tick()` は実時間と無関係に常に `1/fps` を返す。
    """

    def __init__(self, *, fps: float) -> None:
        _fps = float(fps)
        if _fps <= 0:
            raise ValueError("fps は正の値である必要がある")
        self._fps = _fps

    @property
    def fps(self) -> float:
        return float(self._fps)

    def tick(self) -> float:
        """フレームを 1 つ進め、固定の経過秒を返す。"""

        return 1.0 / float(self._fps)
