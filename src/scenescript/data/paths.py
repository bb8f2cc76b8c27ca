"""Helpers for resolving data file locations."""
from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_SCRIPT_NAME = "scenes.csl"


def get_repo_root() -> Path:
    """Return the repository root, or the bundle root when frozen."""
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[3]


def get_data_path() -> Path:
    return get_repo_root() / "data"


def get_scripts_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding bundled scene scripts."""
    if base_path is not None:
        return Path(base_path)
    return get_data_path() / "scripts"


def get_strings_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding localization string tables."""
    if base_path is not None:
        return Path(base_path)
    return get_data_path() / "strings"


def get_default_script_path() -> Path:
    """Scripts are looked up in the working directory first, like the web loader."""
    return Path.cwd() / DEFAULT_SCRIPT_NAME
