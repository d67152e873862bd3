# どこで: `src/dragoncurve/interactive/runtime/curve_window_system.py`。
# 何を: ドラゴン曲線を描画ウィンドウへ毎フレーム描くサブシステムを提供する。
# なぜ: `src/dragoncurve/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import logging
import time
from typing import Callable

from dragoncurve.core.controls import CurveState
from dragoncurve.interactive.draw_window import create_draw_window
from dragoncurve.interactive.gl.draw_renderer import DrawRenderer
from dragoncurve.interactive.gl.segment_buffer import build_segment_vertices
from dragoncurve.interactive.render_settings import RenderSettings
from dragoncurve.interactive.runtime.frame_clock import FixedStepClock, RealTimeClock
from dragoncurve.interactive.runtime.frame_driver import CurveFrameDriver
from dragoncurve.interactive.runtime.key_queue import KeyPressQueue

_logger = logging.getLogger(__name__)


class CurveWindowSystem:
    """描画（メインウィンドウ）のサブシステム。"""

    def __init__(
        self,
        settings: RenderSettings,
        *,
        on_quit: Callable[[], None],
        state: CurveState | None = None,
        fixed_dt_fps: float | None = None,
    ) -> None:
        """描画用の window/renderer を初期化する。

        Parameters
        ----------
        settings : RenderSettings
            ウィンドウ寸法・線幅・配色など。
        on_quit : Callable[[], None]
            Q キーで終了要求が出たときに呼ぶ。
        state : CurveState | None
            初期状態。None の場合は既定値（folds=6, angle=π/2, 角速度 0）。
        fixed_dt_fps : float | None
            指定すると実時間ではなく `1/fixed_dt_fps` 秒刻みで角度を進める。
        """

        self._settings = settings
        self._on_quit = on_quit

        # 描画用の pyglet window を作成し、その window の OpenGL コンテキストに紐づく renderer を作る。
        self.window = create_draw_window(settings)
        self._renderer = DrawRenderer(self.window)

        self._keys = KeyPressQueue()
        self.window.push_handlers(on_key_press=self._keys.on_key_press)

        if fixed_dt_fps is not None:
            clock: FixedStepClock | RealTimeClock = FixedStepClock(fps=float(fixed_dt_fps))
        else:
            clock = RealTimeClock(start_time=time.perf_counter())
        self._driver = CurveFrameDriver(settings, clock=clock, state=state)

    @property
    def state(self) -> CurveState:
        return self._driver.state

    def _framebuffer_size(self) -> tuple[int, int]:
        getter = getattr(self.window, "get_framebuffer_size", None)
        if callable(getter):
            w, h = getter()
            return int(w), int(h)
        return int(self.window.width), int(self.window.height)

    def draw_frame(self) -> None:
        """1 フレーム分の描画を行う（`flip()` は呼ばない）。"""

        # --- 1) ビューポート更新 ---
        #
        # 最小化などで framebuffer が 0 になるフレームは、状態を進めずに描画を飛ばす。
        # 押下はフレーム単位で扱うため、飛ばしたフレームの入力も捨てる。
        actions = self._keys.drain()
        fb_w, fb_h = self._framebuffer_size()
        if fb_w <= 0 or fb_h <= 0:
            return
        self._renderer.viewport(fb_w, fb_h)

        # --- 2) 背景クリア ---
        self._renderer.clear(self._settings.background_color)

        # --- 3) 入力反映 + 曲線生成 + 画面フィット ---
        frame = self._driver.step(actions, float(fb_w), float(fb_h))
        if frame is None:
            _logger.info("Quit requested")
            self._on_quit()
            return

        # --- 4) 線分描画 ---
        #
        # 線幅は論理ピクセル基準の設定値を framebuffer 倍率に合わせて拡大する。
        pixel_ratio = fb_w / max(int(self.window.width), 1)
        vertices = build_segment_vertices(frame.points, frame.colors)
        self._renderer.render_segments(
            vertices,
            line_width=float(self._settings.line_width) * float(pixel_ratio),
        )

    def close(self) -> None:
        """GPU / window 資源を解放する。"""

        try:
            # renderer が保持している GPU リソースを破棄してから window を閉じる。
            self._renderer.release()
        except Exception:
            _logger.exception("Failed to release GL resources")
        finally:
            self.window.close()
