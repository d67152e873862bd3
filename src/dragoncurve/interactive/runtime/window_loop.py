# どこで: `src/dragoncurve/interactive/runtime/window_loop.py`。
# 何を: pyglet の描画ウィンドウを app loop（`pyglet.app.run()`）で回す最小ランナーを提供する。
# なぜ: OS 依存のイベント配送を pyglet に任せ、手動 `dispatch_events()` 由来の入力取りこぼしを避けるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pyglet


@dataclass(frozen=True, slots=True)
class WindowTask:
    """pyglet window と「flip しない描画関数」を束ねる。"""

    # 注: pyglet の Window 型は環境/バージョン差があるため Any に寄せる。
    window: Any

    # 1フレーム分の描画処理（back buffer へ描くだけ）。
    # `switch_to()` / `flip()` は pyglet（`Window.draw()`）が担当する前提。
    draw_frame: Callable[[], None]


class WindowLoop:
    """ウィンドウを一定間隔で描画し続ける。

    `draw_frame()` はウィンドウの back buffer へ描画するだけにし、`flip()` は pyglet が行う。
    フレーム末尾の flip と次の tick までの待機が、ループ唯一の中断点になる。
    """

    def __init__(
        self,
        task: WindowTask,
        *,
        fps: float,
    ) -> None:
        """ループを初期化する。

        Parameters
        ----------
        task : WindowTask
            1 フレームごとに描画したいウィンドウと描画処理。
        fps : float
            目標フレームレート。`<=0` の場合はスロットリングしない。
            `>0` の場合、`pyglet.clock.schedule_interval` で描画頻度を制御する。
        """

        self._task = task
        self._fps = float(fps)

    @staticmethod
    def request_exit(*_: object) -> None:
        """ループを止める（次のイベント処理で `pyglet.app.run()` が戻る）。"""
        # pyglet の on_close から呼ばれるコールバックは引数が来る場合があるため *args を受ける。
        pyglet.app.exit()

    def run(self) -> None:
        """ウィンドウが閉じられるか終了要求が出るまでループを実行する。"""

        task = self._task
        task.window.push_handlers(on_close=self.request_exit)
        task.window.push_handlers(on_draw=task.draw_frame)

        # 1フレームは `Window.draw`（on_draw → flip）で進める。
        def draw(dt: float) -> None:
            # 閉じられたウィンドウへ draw すると例外になり得るため、開いているときだけ描く。
            if task.window not in pyglet.app.windows:
                return
            task.window.draw(dt)

        # fps<=0 は「スロットリング無し（可能な限り回す）」として扱う。
        if self._fps <= 0:
            pyglet.clock.schedule(draw)
        else:
            pyglet.clock.schedule_interval(draw, 1.0 / float(self._fps))

        try:
            pyglet.app.run(interval=None)
        finally:
            pyglet.clock.unschedule(draw)
