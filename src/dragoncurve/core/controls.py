# どこで: `src/dragoncurve/core/controls.py`。
# 何を: 折り返し回数・折り角・角速度の状態と、キー操作によるその更新規則を定義する。
# なぜ: フレーム状態をグローバル変数でなく明示的なオブジェクトとして持ち、ヘッドレスでテストするため。

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_logger = logging.getLogger(__name__)

INITIAL_FOLDS = 6
INITIAL_ANGLE = math.pi / 2.0
INITIAL_ANGLE_VELOCITY = 0.0

# 1 回のキー押下で変わる角速度 [rad/s]。
ANGLE_VELOCITY_STEP = 0.01


class CurveAction(Enum):
    """キー押下 1 回に対応する操作。"""

    MORE_FOLDS = "more_folds"
    FEWER_FOLDS = "fewer_folds"
    SLOWER = "slower"
    FASTER = "faster"
    QUIT = "quit"


@dataclass(slots=True)
class CurveState:
    """プログラム全体で 1 つだけ持つフレーム間状態。"""

    folds: int = INITIAL_FOLDS
    angle: float = INITIAL_ANGLE
    angle_velocity: float = INITIAL_ANGLE_VELOCITY

    def apply(self, action: CurveAction) -> bool:
        """操作を 1 つ適用する。ループを終了すべきなら False を返す。"""
        if action is CurveAction.QUIT:
            return False

        if action is CurveAction.MORE_FOLDS:
            self.folds += 1
        elif action is CurveAction.FEWER_FOLDS:
            # 0 で飽和させ、負にはしない。
            self.folds = max(self.folds - 1, 0)
        elif action is CurveAction.SLOWER:
            self.angle_velocity -= ANGLE_VELOCITY_STEP
        elif action is CurveAction.FASTER:
            self.angle_velocity += ANGLE_VELOCITY_STEP
        else:  # pragma: no cover
            raise ValueError(f"未知の操作です: {action!r}")

        _logger.debug(
            "%s: folds=%d angle_velocity=%.3f", action.value, self.folds, self.angle_velocity
        )
        return True

    def advance(self, dt: float) -> None:
        """経過秒 `dt` だけ角度を進める。"""
        self.angle += self.angle_velocity * float(dt)


def update_state(state: CurveState, actions: Iterable[CurveAction], dt: float) -> bool:
    """1 フレーム分の入力と時間経過を状態へ反映する。

    Parameters
    ----------
    state : CurveState
        更新対象（in-place で変更する）。
    actions : Iterable[CurveAction]
        このフレームで押されたキーに対応する操作（押下順）。
    dt : float
        前フレームからの経過秒。

    Returns
    -------
    bool
        続行なら True。QUIT を受けた場合は以降の操作と角度の積分を行わず False。
    """
    for action in actions:
        if not state.apply(action):
            return False
    state.advance(dt)
    return True


__all__ = [
    "ANGLE_VELOCITY_STEP",
    "INITIAL_ANGLE",
    "INITIAL_ANGLE_VELOCITY",
    "INITIAL_FOLDS",
    "CurveAction",
    "CurveState",
    "update_state",
]
