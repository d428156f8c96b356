from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".basket_config.yaml"


def _default_config_path() -> Path:
    try:
        return Path.home() / CONFIG_FILENAME
    except (RuntimeError, KeyError):
        return Path(CONFIG_FILENAME)


USER_CONFIG_PATH = _default_config_path()

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TTIMEOUTLEN = 0.05


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def get_user_theme() -> str:
    return (os.getenv("BASKET_THEME") or str(_load_config().get("theme", ""))).strip()


def get_log_file() -> Optional[Path]:
    raw = (os.getenv("BASKET_LOG_FILE") or str(_load_config().get("log_file", "") or "")).strip()
    return Path(raw).expanduser() if raw else None


def get_log_level() -> str:
    return str(_load_config().get("log_level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()


def get_ttimeoutlen() -> float:
    """Escape-key latency; prompt_toolkit waits this long to tell ESC from a sequence."""
    try:
        return max(0.0, float(os.getenv("BASKET_TUI_TTIMEOUTLEN", DEFAULT_TTIMEOUTLEN)))
    except ValueError:
        return DEFAULT_TTIMEOUTLEN
