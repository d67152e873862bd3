# どこで: `src/dragoncurve/core/__init__.py`。
# 何を: ヘッドレスなコア（曲線生成・画面フィット・状態更新）を再エクスポートする。
# なぜ: pyglet / ModernGL を import せずにコアだけを利用できるようにするため。

from __future__ import annotations

from dragoncurve.core.controls import CurveAction, CurveState, update_state
from dragoncurve.core.curve import DragonCurve, generate_dragon
from dragoncurve.core.frame import FrameGeometry, compose_frame
from dragoncurve.core.screen_fit import fit_to_screen

__all__ = [
    "CurveAction",
    "CurveState",
    "DragonCurve",
    "FrameGeometry",
    "compose_frame",
    "fit_to_screen",
    "generate_dragon",
    "update_state",
]
