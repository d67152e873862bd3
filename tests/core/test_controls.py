"""core.controls の状態更新規則をテスト。"""

from __future__ import annotations

import math

import pytest

from dragoncurve.core.controls import (
    ANGLE_VELOCITY_STEP,
    CurveAction,
    CurveState,
    update_state,
)


def test_initial_state() -> None:
    state = CurveState()
    assert state.folds == 6
    assert state.angle == pytest.approx(math.pi / 2)
    assert state.angle_velocity == 0.0


def test_up_up_down_from_six_yields_seven() -> None:
    state = CurveState()
    actions = [CurveAction.MORE_FOLDS, CurveAction.MORE_FOLDS, CurveAction.FEWER_FOLDS]
    assert update_state(state, actions, 0.0)
    assert state.folds == 7


def test_fewer_folds_saturates_at_zero() -> None:
    state = CurveState(folds=0)
    for _ in range(5):
        assert update_state(state, [CurveAction.FEWER_FOLDS], 0.0)
        assert state.folds == 0


def test_left_right_adjust_angle_velocity() -> None:
    state = CurveState()
    update_state(state, [CurveAction.FASTER, CurveAction.FASTER, CurveAction.SLOWER], 0.0)
    assert state.angle_velocity == pytest.approx(ANGLE_VELOCITY_STEP)
    update_state(state, [CurveAction.SLOWER] * 3, 0.0)
    assert state.angle_velocity == pytest.approx(-2 * ANGLE_VELOCITY_STEP)


def test_angle_integrates_velocity_over_frames() -> None:
    v = 0.37
    dt = 1.0 / 60.0
    n = 240
    state = CurveState(angle_velocity=v)
    initial = state.angle
    for _ in range(n):
        assert update_state(state, [], dt)
    assert state.angle == pytest.approx(initial + v * n * dt)


def test_quit_stops_without_advancing() -> None:
    state = CurveState(angle_velocity=1.0)
    before = state.angle
    running = update_state(
        state,
        [CurveAction.MORE_FOLDS, CurveAction.QUIT, CurveAction.MORE_FOLDS],
        1.0,
    )
    assert running is False
    # QUIT 以前の操作は反映され、以降の操作と角度の積分は行わない。
    assert state.folds == 7
    assert state.angle == before
