# どこで: `src/dragoncurve/interactive/runtime/key_queue.py`。
# 何を: pyglet のキー押下イベントを CurveAction に変換し、次フレームまで溜めておく。
# なぜ: 押しっぱなしではなく「押された瞬間」だけを 1 回の操作として扱うため。

from __future__ import annotations

import pyglet
from pyglet.window import key

from dragoncurve.core.controls import CurveAction

KEY_BINDINGS: dict[int, CurveAction] = {
    key.UP: CurveAction.MORE_FOLDS,
    key.DOWN: CurveAction.FEWER_FOLDS,
    key.LEFT: CurveAction.SLOWER,
    key.RIGHT: CurveAction.FASTER,
    key.Q: CurveAction.QUIT,
}


class KeyPressQueue:
    """エッジトリガのキー押下をフレーム単位で受け渡すキュー。"""

    def __init__(self, bindings: dict[int, CurveAction] | None = None) -> None:
        self._bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self._pending: list[CurveAction] = []

    def on_key_press(self, symbol: int, _modifiers: int) -> bool | None:
        """pyglet の on_key_press ハンドラ。"""
        action = self._bindings.get(symbol)
        if action is not None:
            self._pending.append(action)
            return pyglet.event.EVENT_HANDLED
        if symbol == key.ESCAPE:
            # pyglet 既定の「Esc で閉じる」を抑止し、終了は Q に一本化する。
            return pyglet.event.EVENT_HANDLED
        return None

    def drain(self) -> list[CurveAction]:
        """溜まった操作を押下順に返し、キューを空にする。"""
        actions = self._pending
        self._pending = []
        return actions

    def __len__(self) -> int:
        return len(self._pending)
