"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import textwrap
from typing import Sequence

from scenescript.core.types import TextDisplayMode

DEFAULT_WIDTH = 72

_TEXT_DISPLAY_MODE: TextDisplayMode = "instant"


def debug_enabled() -> bool:
    """Return True only when SCENESCRIPT_DEBUG is explicitly set to '1'."""
    return os.getenv("SCENESCRIPT_DEBUG") == "1"


def set_text_display_mode(mode: str) -> None:
    global _TEXT_DISPLAY_MODE
    _TEXT_DISPLAY_MODE = "step" if mode == "step" else "instant"


def wrap_text(text: str, width: int = DEFAULT_WIDTH) -> list[str]:
    """
    Wrap text on word boundaries, keeping the author's explicit line breaks.

    Args:
        text: The text to wrap; may contain newlines and tabs
        width: Maximum width per line

    Returns:
        List of wrapped lines; blank source lines are preserved as ''
    """
    if width <= 0:
        return text.split("\n")
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph.strip():
            lines.append("")
            continue
        lines.extend(
            textwrap.wrap(
                paragraph,
                width=width,
                expand_tabs=True,
                replace_whitespace=False,
                break_long_words=False,
                break_on_hyphens=False,
            )
            or [""]
        )
    return lines


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_choices(choices: Sequence[str]) -> None:
    """Display numbered choices."""
    if not choices:
        return
    render_heading("Choices")
    for idx, label in enumerate(choices, start=1):
        print(f"{idx}. {label}")


def pause_for_continue() -> None:
    """Wait for Enter when text is shown step by step."""
    if _TEXT_DISPLAY_MODE == "step":
        input("Press Enter to continue...")
