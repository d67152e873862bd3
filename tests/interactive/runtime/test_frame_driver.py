"""interactive.runtime.frame_driver のフレーム進行をテスト（ウィンドウ無し）。"""

from __future__ import annotations

import math

import pytest

from dragoncurve.core.controls import CurveAction, CurveState
from dragoncurve.interactive.render_settings import RenderSettings
from dragoncurve.interactive.runtime.frame_clock import FixedStepClock
from dragoncurve.interactive.runtime.frame_driver import CurveFrameDriver


def _driver(state: CurveState | None = None) -> CurveFrameDriver:
    return CurveFrameDriver(RenderSettings(), clock=FixedStepClock(fps=60.0), state=state)


def test_step_applies_actions_then_draws() -> None:
    driver = _driver()
    frame = driver.step([CurveAction.MORE_FOLDS], 800.0, 600.0)

    assert frame is not None
    assert driver.state.folds == 7
    assert frame.points.shape == (2**7 + 1, 2)
    assert frame.colors.shape == (2**7, 3)


def test_step_integrates_angle_with_clock() -> None:
    driver = _driver()
    driver.step([CurveAction.FASTER] * 3, 800.0, 600.0)
    for _ in range(9):
        driver.step([], 800.0, 600.0)

    assert driver.state.angle_velocity == pytest.approx(0.03)
    assert driver.state.angle == pytest.approx(math.pi / 2 + 0.03 * 10 / 60.0)


def test_quit_stops_the_driver() -> None:
    driver = _driver()
    assert driver.running
    assert driver.step([CurveAction.QUIT], 800.0, 600.0) is None
    assert not driver.running
    assert driver.step([], 800.0, 600.0) is None


def test_zero_folds_frame_is_drawable() -> None:
    driver = _driver(CurveState(folds=1))
    frame = driver.step([CurveAction.FEWER_FOLDS, CurveAction.FEWER_FOLDS], 320.0, 240.0)
    assert frame is not None
    assert driver.state.folds == 0
    assert frame.points.shape == (2, 2)
