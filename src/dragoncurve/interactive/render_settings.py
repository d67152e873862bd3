# どこで: `src/dragoncurve/interactive/render_settings.py`。
# 何を: interactive 描画設定の束を表すデータクラスを定義する。
# なぜ: `run` の引数を簡潔に保ちつつ、interactive 側の設定を一元管理するため。

from __future__ import annotations

from dataclasses import dataclass

from dragoncurve.core.runtime_config import RuntimeConfig


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """リアルタイム描画に用いる設定値の集合。"""

    window_size: tuple[int, int] = (960, 720)
    caption: str = "Dragon Curve"
    background_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    line_width: float = 2.0
    msaa_samples: int = 4
    margin: float = 0.05
    saturation: float = 0.5
    lightness: float = 0.5

    @classmethod
    def from_config(cls, cfg: RuntimeConfig) -> "RenderSettings":
        """起動時設定から描画設定を作る。"""
        return cls(
            window_size=cfg.window_size,
            caption=cfg.caption,
            background_color=cfg.background_color,
            line_width=cfg.line_width,
            msaa_samples=cfg.msaa_samples,
            margin=cfg.margin,
            saturation=cfg.saturation,
            lightness=cfg.lightness,
        )
