"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

from scenescript.services.scene_runner import DEFAULT_START_SCENE

_DEFAULT_TEXT_MODE = "instant"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "SceneScript"
        return Path.home() / "SceneScript"
    return Path.home() / ".config" / "scenescript"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, str]:
    return {
        "text_display_mode": _DEFAULT_TEXT_MODE,
        "language": "",
        "start_scene": DEFAULT_START_SCENE,
    }


def _normalize_text_mode(value: object) -> str:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_language(value: object) -> str:
    if isinstance(value, str) and value.replace("_", "").replace("-", "").isalnum():
        return value
    return ""


def _normalize_start_scene(value: object) -> str:
    if isinstance(value, str) and value.strip() and not any(ch.isspace() for ch in value):
        return value
    return DEFAULT_START_SCENE


def _normalize(raw: Dict[str, object]) -> Dict[str, str]:
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "language": _normalize_language(raw.get("language")),
        "start_scene": _normalize_start_scene(raw.get("start_scene")),
    }


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
