# どこで: `src/dragoncurve/__init__.py`。
# 何を: ルート `dragoncurve` パッケージを定義する。
# なぜ: import 起点を `dragoncurve` に統一するため。

from __future__ import annotations

from dragoncurve.api import run
from dragoncurve.core import CurveState, DragonCurve, fit_to_screen, generate_dragon

__all__ = ["CurveState", "DragonCurve", "fit_to_screen", "generate_dragon", "run"]
