"""Loads YAML/JSON configuration files and global meta settings."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_meta_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package meta configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "meta_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


def _capacity_limit(value: Any) -> int:
    if value is None:
        return sys.maxsize
    return min(int(value), sys.maxsize)


META_CONFIG: Dict[str, Any] = load_meta_config()
LOG_LEVEL: str = str(META_CONFIG.get("log_level", "WARNING")).upper()
LOG_FILE: Optional[str] = META_CONFIG.get("log_file")
DEEP_COPY_FILL: bool = bool(META_CONFIG.get("deep_copy_fill", True))
MAX_CAPACITY: int = _capacity_limit(META_CONFIG.get("max_capacity"))


def apply_config(config: Dict[str, Any]) -> None:
    """Merge ``config`` into the active settings."""
    if "log_level" in config:
        set_log_level(config["log_level"])
    if "log_file" in config:
        set_log_file(config["log_file"])
    if "deep_copy_fill" in config:
        set_deep_copy_fill(bool(config["deep_copy_fill"]))
    if "max_capacity" in config:
        set_max_capacity(config["max_capacity"])


def set_log_level(value: str) -> None:
    """Override the level applied by :func:`get_logger`.

    Loggers already handed out under the ``gridstore`` namespace are updated
    too, since most of them are created once at import time.
    """
    global LOG_LEVEL
    LOG_LEVEL = str(value).upper()
    META_CONFIG["log_level"] = LOG_LEVEL
    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if name.split(".")[0] == "gridstore" and isinstance(existing, logging.Logger):
            existing.setLevel(LOG_LEVEL)


def set_log_file(value: Optional[str]) -> None:
    """Override the optional log file path."""
    global LOG_FILE
    LOG_FILE = value
    META_CONFIG["log_file"] = value


def set_deep_copy_fill(value: bool) -> None:
    """Enable or disable deep copies of fill values."""
    global DEEP_COPY_FILL
    DEEP_COPY_FILL = value
    META_CONFIG["deep_copy_fill"] = value


def set_max_capacity(value: Optional[int]) -> None:
    """Override the per-axis capacity ceiling (``None`` restores the platform limit)."""
    global MAX_CAPACITY
    MAX_CAPACITY = _capacity_limit(value)
    META_CONFIG["max_capacity"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
        "deep_copy_fill": DEEP_COPY_FILL,
        "max_capacity": MAX_CAPACITY,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
