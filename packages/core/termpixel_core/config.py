"""Persistent settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 2


@dataclass
class DisplayConfig:
    hide_cursor: bool = True
    alternate_screen: bool = True
    fixed_columns: int | None = None
    fixed_rows: int | None = None


@dataclass
class DemoConfig:
    frame_delay_ms: int = 0
    wave_speed: float = 200.0
    hold_seconds: float | None = None


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 90.0
    rss_mb_max: float = 200.0
    fps_min: float = 10.0


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    display: DisplayConfig = field(default_factory=DisplayConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "termpixel"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "termpixel"
    return Path.home() / ".config" / "termpixel"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _optional_positive(value: Any) -> int | None:
    if value is None:
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _normalize_display(cfg: AppConfig) -> None:
    cfg.display.hide_cursor = bool(cfg.display.hide_cursor)
    cfg.display.alternate_screen = bool(cfg.display.alternate_screen)
    cfg.display.fixed_columns = _optional_positive(cfg.display.fixed_columns)
    cfg.display.fixed_rows = _optional_positive(cfg.display.fixed_rows)


def _normalize_demo(cfg: AppConfig) -> None:
    cfg.demo.frame_delay_ms = max(0, min(1000, int(cfg.demo.frame_delay_ms)))
    cfg.demo.wave_speed = float(cfg.demo.wave_speed)
    if cfg.demo.hold_seconds is not None:
        cfg.demo.hold_seconds = float(max(0.0, cfg.demo.hold_seconds))


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(32.0, cfg.performance.rss_mb_max))
    cfg.performance.fps_min = float(max(1.0, cfg.performance.fps_min))


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 kept the terminal override at top level as "size": [columns, rows].
        display = dict(data.get("display", {}) or {})
        size = data.pop("size", None)
        if isinstance(size, (list, tuple)) and len(size) == 2:
            display.setdefault("fixed_columns", size[0])
            display.setdefault("fixed_rows", size[1])
        data["display"] = display
        data.setdefault("diagnostics", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        display=_merge(DisplayConfig, data.get("display", {})),
        demo=_merge(DemoConfig, data.get("demo", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_display(cfg)
    _normalize_demo(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
