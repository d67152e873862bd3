"""テスト全体の共通設定。"""

from __future__ import annotations

import pyglet

# `pyglet.window` の import 時に隠しウィンドウ（GL コンテキスト）を作らせない。
# 表示環境の無いマシンでもキー定義などを import できるようにする。
pyglet.options["shadow_window"] = False
