"""
どこで: `src/dragoncurve/api/runner.py`。公開 API のランナー実装。
何を: pyglet + ModernGL を使い、キー操作に追従するドラゴン曲線をウィンドウに描画するランナーを提供する。
なぜ: `python -m dragoncurve` から実際に曲線をプレビューできる経路を用意するため。
"""

from __future__ import annotations

import logging
from pathlib import Path

import pyglet

from dragoncurve.core.controls import CurveState
from dragoncurve.core.runtime_config import runtime_config, set_config_path
from dragoncurve.interactive.render_settings import RenderSettings
from dragoncurve.interactive.runtime.curve_window_system import CurveWindowSystem
from dragoncurve.interactive.runtime.window_loop import WindowLoop, WindowTask

_logger = logging.getLogger(__name__)


def run(
    *,
    config_path: str | Path | None = None,
    state: CurveState | None = None,
    fixed_dt_fps: float | None = None,
) -> CurveState:
    """pyglet ウィンドウを生成し、ドラゴン曲線をリアルタイム描画する。

    Parameters
    ----------
    config_path : str | Path | None
        明示的に読む config.yaml。None の場合は同梱既定値と探索結果のみを使う。
    state : CurveState | None
        初期状態。None の場合は folds=6, angle=π/2, 角速度 0 から始める。
    fixed_dt_fps : float | None
        指定すると実時間ではなく固定刻み `1/fixed_dt_fps` 秒で角度を進める。

    Returns
    -------
    CurveState
        終了時点の状態。Q キーを押すかウィンドウを閉じると制御を返す。
    """

    if config_path is not None:
        set_config_path(config_path)
    cfg = runtime_config()
    _logger.info(
        "Config: %s", cfg.config_path if cfg.config_path is not None else "(packaged defaults)"
    )

    # pyglet の Window 作成前にオプションを設定する。
    # （vsync はウィンドウ作成時に参照される想定のため、ここで固定しておく）
    pyglet.options["vsync"] = True

    settings = RenderSettings.from_config(cfg)
    system = CurveWindowSystem(
        settings,
        on_quit=WindowLoop.request_exit,
        state=state,
        fixed_dt_fps=fixed_dt_fps,
    )
    system.window.set_location(*cfg.window_position)
    _logger.info("Window: %dx%d", *settings.window_size)

    loop = WindowLoop(
        WindowTask(window=system.window, draw_frame=system.draw_frame),
        fps=cfg.fps,
    )
    try:
        loop.run()
    finally:
        system.close()
        _logger.info("Closed")
    return system.state
