# どこで: `src/dragoncurve/interactive/draw_window.py`。
# 何を: ライブ描画用の pyglet ウィンドウ生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core をヘッドレスに保つため。

from __future__ import annotations

import pyglet
from pyglet.gl import Config
from pyglet.window import Window

from dragoncurve.interactive.render_settings import RenderSettings


def create_draw_window(settings: RenderSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。"""
    if settings.msaa_samples > 0:
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(  # type: ignore[abstract]
            double_buffer=True,
            sample_buffers=1,
            samples=int(settings.msaa_samples),
        )
    else:
        config = Config(double_buffer=True)  # type: ignore[abstract]
    width, height = settings.window_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        # ビューポート寸法は毎フレーム問い合わせるため、リサイズを許可する。
        resizable=True,
        caption=settings.caption,
        config=config,
    )
    return window
