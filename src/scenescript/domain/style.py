"""Presentation style tracked by the interpreter."""
from __future__ import annotations

from dataclasses import dataclass, replace

from scenescript.core.types import StyleProperty

DEFAULT_BACKGROUND = "#000000"
DEFAULT_FOREGROUND = "#f5f5dc"
DEFAULT_FONT = "'Garamond', serif"
DEFAULT_FONTSIZE = 16


@dataclass(slots=True)
class StyleState:
    """Current background, foreground, font family and font size."""

    background: str = DEFAULT_BACKGROUND
    foreground: str = DEFAULT_FOREGROUND
    font: str = DEFAULT_FONT
    fontsize: int = DEFAULT_FONTSIZE

    def apply(self, prop: StyleProperty, value: str | int) -> None:
        if prop == "fontsize":
            if not isinstance(value, int):
                raise ValueError("fontsize must be an integer.")
            self.fontsize = value
        elif prop == "background":
            self.background = str(value)
        elif prop == "foreground":
            self.foreground = str(value)
        elif prop == "font":
            self.font = str(value)
        else:
            raise ValueError(f"Unknown style property '{prop}'.")

    def snapshot(self) -> StyleState:
        """Return a copy safe to hand to a renderer."""
        return replace(self)
