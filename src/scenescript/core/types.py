"""Shared type aliases for the core and domain layers."""
from typing import Literal

StyleProperty = Literal["background", "foreground", "font", "fontsize"]
TextDisplayMode = Literal["instant", "step"]
Severity = Literal["ERROR", "WARN"]

__all__ = ["Severity", "StyleProperty", "TextDisplayMode"]
