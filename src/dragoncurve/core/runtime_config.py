# どこで: `src/dragoncurve/core/runtime_config.py`。
# 何を: config.yaml による起動時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: ウィンドウ寸法や線幅などの見た目を、コードを書き換えずにユーザーが指定できるようにするため。

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """dragoncurve の起動時設定。"""

    config_path: Path | None
    window_size: tuple[int, int]
    window_position: tuple[int, int]
    caption: str
    fps: float
    background_color: tuple[float, float, float]
    line_width: float
    msaa_samples: int
    margin: float
    saturation: float
    lightness: float


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".dragoncurve" / "config.yaml",
        home / ".config" / "dragoncurve" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    try:
        seq = list(value)
    except TypeError as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        return (int(seq[0]), int(seq[1]))
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc


def _as_rgb(value: Any, *, key: str) -> tuple[float, float, float]:
    try:
        seq = [float(v) for v in value]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}") from exc
    if len(seq) != 3:
        raise RuntimeError(f"{key} は [r, g, b] の数値配列である必要があります: got={value!r}")
    if any(not (0.0 <= c <= 1.0) for c in seq):
        raise ValueError(f"{key} の各成分は 0..1 である必要があります: got={value!r}")
    return (seq[0], seq[1], seq[2])


def _as_float(value: Any, *, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _require(mapping: dict[str, Any], name: str, *, key: str) -> Any:
    value = mapping.get(name)
    if value is None:
        raise RuntimeError(
            f"{key} が未設定です（同梱 default_config.yaml を確認してください）"
        )
    return value


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    blob = (
        resources.files("dragoncurve")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="dragoncurve/resource/default_config.yaml")


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """トップレベルのセクション単位で override を重ねる（セクション内はキー単位で後勝ち）。"""

    out = dict(base)
    for name, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(name), dict):
            merged = dict(out[name])
            merged.update(value)
            out[name] = merged
        else:
            out[name] = value
    return out


def runtime_config() -> RuntimeConfig:
    """起動時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.dragoncurve/config.yaml` / `~/.config/dragoncurve/config.yaml`
    3) `run(config_path=...)` の `config_path`
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(explicit_path))

    version = _require(payload, "version", key="version")
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    window = _as_mapping(payload.get("window"), key="window")
    window_size = _as_int_pair(_require(window, "size", key="window.size"), key="window.size")
    if window_size[0] <= 0 or window_size[1] <= 0:
        raise ValueError(f"window.size は正の値である必要があります: got={window_size}")
    window_position = _as_int_pair(
        _require(window, "position", key="window.position"),
        key="window.position",
    )
    caption = str(_require(window, "caption", key="window.caption"))
    fps = _as_float(_require(window, "fps", key="window.fps"), key="window.fps")

    render = _as_mapping(payload.get("render"), key="render")
    background_color = _as_rgb(
        _require(render, "background_color", key="render.background_color"),
        key="render.background_color",
    )
    line_width = _as_float(
        _require(render, "line_width", key="render.line_width"),
        key="render.line_width",
    )
    if line_width <= 0:
        raise ValueError(f"render.line_width は正の値である必要があります: got={line_width}")
    msaa_samples = int(
        _as_float(_require(render, "msaa_samples", key="render.msaa_samples"), key="render.msaa_samples")
    )
    if msaa_samples < 0:
        raise ValueError(f"render.msaa_samples は 0 以上である必要があります: got={msaa_samples}")

    curve = _as_mapping(payload.get("curve"), key="curve")
    margin = _as_float(_require(curve, "margin", key="curve.margin"), key="curve.margin")
    if not (0.0 <= margin < 1.0):
        raise ValueError(f"curve.margin は [0, 1) の範囲である必要があります: got={margin}")
    saturation = _as_float(_require(curve, "saturation", key="curve.saturation"), key="curve.saturation")
    lightness = _as_float(_require(curve, "lightness", key="curve.lightness"), key="curve.lightness")
    for name, v in (("curve.saturation", saturation), ("curve.lightness", lightness)):
        if not (0.0 <= v <= 1.0):
            raise ValueError(f"{name} は 0..1 である必要があります: got={v}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        window_size=window_size,
        window_position=window_position,
        caption=caption,
        fps=fps,
        background_color=background_color,
        line_width=line_width,
        msaa_samples=msaa_samples,
        margin=margin,
        saturation=saturation,
        lightness=lightness,
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
