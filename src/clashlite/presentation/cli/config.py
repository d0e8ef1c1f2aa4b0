"""CLI configuration helpers."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Literal, TypedDict

StatusMode = Literal["every_turn", "final"]

_DEFAULT_STATUS_MODE: StatusMode = "every_turn"


class CliConfig(TypedDict):
    seed: int | None
    status_mode: StatusMode


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "ClashLite"
        return Path.home() / "ClashLite"
    return Path.home() / ".config" / "clash_lite"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_status_mode(value: object) -> StatusMode:
    return "final" if value == "final" else _DEFAULT_STATUS_MODE


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def default_config() -> CliConfig:
    return {"seed": None, "status_mode": _DEFAULT_STATUS_MODE}


def load_config(path: Path | None = None) -> CliConfig:
    """Load config from disk or return defaults. The file is never written."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    settings: Dict[str, object] = raw
    return {
        "seed": _normalize_seed(settings.get("seed")),
        "status_mode": _normalize_status_mode(settings.get("status_mode")),
    }
