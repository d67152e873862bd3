# どこで: `src/dragoncurve/interactive/runtime/frame_driver.py`。
# 何を: 1 フレーム分の「入力反映 → 角度積分 → 曲線生成 → 画面フィット」を進めるドライバを提供する。
# なぜ: ウィンドウ/GL を持たない状態でもフレーム進行をテストできるよう、描画から切り離すため。

from __future__ import annotations

from typing import Iterable, Protocol

from dragoncurve.core.controls import CurveAction, CurveState, update_state
from dragoncurve.core.curve import DragonCurve
from dragoncurve.core.frame import FrameGeometry, compose_frame
from dragoncurve.interactive.render_settings import RenderSettings


class FrameClock(Protocol):
    def tick(self) -> float: ...


class CurveFrameDriver:
    """フレーム間状態を保持し、1 フレームずつ進める。"""

    def __init__(
        self,
        settings: RenderSettings,
        *,
        clock: FrameClock,
        state: CurveState | None = None,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._state = state if state is not None else CurveState()
        self._curve = DragonCurve()
        self._running = True

    @property
    def state(self) -> CurveState:
        return self._state

    @property
    def running(self) -> bool:
        return self._running

    def step(
        self,
        actions: Iterable[CurveAction],
        width: float,
        height: float,
    ) -> FrameGeometry | None:
        """1 フレーム進め、描画すべきジオメトリを返す。

        Returns
        -------
        FrameGeometry | None
            QUIT を受けた（または既に停止している）場合は None。
        """
        if not self._running:
            return None

        dt = self._clock.tick()
        if not update_state(self._state, actions, dt):
            self._running = False
            return None

        settings = self._settings
        return compose_frame(
            self._curve,
            self._state,
            width,
            height,
            margin=settings.margin,
            saturation=settings.saturation,
            lightness=settings.lightness,
        )
