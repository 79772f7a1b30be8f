"""
Viewer Configuration
====================
Window size, display variant and input tuning, read from an optional JSON
file. The display variant is resolved to its class here, once, so nothing
downstream looks anything up by name.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any

from simview.app.display import DISPLAYS, Display
from simview.errors import ConfigError
from simview.render.viewport import EuclideanViewport, Mode

logger = logging.getLogger(__name__)

ZOOM_KINDS = ("linear", "exponential")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ViewerConfig:
    display: str = "generic"
    width: int = 1280
    height: int = 800
    fps: int = 60
    zoom_kind: str = "exponential"
    zoom_step: float = 1.1
    zoom_min: float = 0.001
    zoom_max: float = 10000.0
    rotation_sensitivity: float = 0.5  # degrees per pixel
    mode: Mode = Mode.ISOMETRIC
    grid_spacing: float = 0.0
    log_level: str = "INFO"
    display_factory: type[Display] = field(default=DISPLAYS["generic"], repr=False)


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def config_from_dict(data: dict[str, Any]) -> ViewerConfig:
    known = {f.name for f in fields(ViewerConfig)} - {"display_factory"}
    unknown = set(data) - known
    _check(not unknown, f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    values = dict(data)
    if "mode" in values:
        try:
            values["mode"] = Mode(values["mode"])
        except ValueError as e:
            raise ConfigError(f"Unknown mode {values['mode']!r}") from e
    try:
        cfg = ViewerConfig(**values)
    except TypeError as e:
        raise ConfigError(str(e)) from e

    _check(cfg.display in DISPLAYS,
           f"Unknown display {cfg.display!r}; expected one of {', '.join(DISPLAYS)}")
    _check(cfg.width > 0 and cfg.height > 0, f"Window size must be positive: {cfg.width}x{cfg.height}")
    _check(cfg.fps > 0, f"fps must be positive, got {cfg.fps}")
    _check(cfg.zoom_kind in ZOOM_KINDS, f"zoom_kind must be one of {ZOOM_KINDS}")
    _check(cfg.zoom_step > 0, f"zoom_step must be positive, got {cfg.zoom_step}")
    _check(0 <= cfg.zoom_min <= cfg.zoom_max, "zoom bounds must satisfy 0 <= zoom_min <= zoom_max")
    _check(cfg.rotation_sensitivity > 0, "rotation_sensitivity must be positive")
    _check(cfg.mode in EuclideanViewport.SUPPORTED_MODES,
           f"mode {cfg.mode.value!r} cannot be selected in the configuration")
    _check(cfg.grid_spacing >= 0, "grid_spacing must not be negative")
    _check(cfg.log_level.upper() in LOG_LEVELS, f"log_level must be one of {LOG_LEVELS}")

    cfg.log_level = cfg.log_level.upper()
    cfg.display_factory = DISPLAYS[cfg.display]
    return cfg


def load_config(path: str | None = None) -> ViewerConfig:
    """Read a JSON configuration; a missing file gives the defaults."""
    if path is None or not os.path.exists(path):
        if path is not None:
            logger.info("No configuration at %s, using defaults", path)
        return config_from_dict({})
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    _check(isinstance(data, dict), f"{path}: top level must be an object")
    return config_from_dict(data)
