"""Recording collaborators for interpreter and runner tests."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from scenescript.domain.style import StyleState
from scenescript.services.ports import MenuOption


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, object]] = []

    def render_text(self, text: str) -> None:
        self.calls.append(("text", text))

    def render_image(self, source: str) -> None:
        self.calls.append(("image", source))

    def clear_transient_output(self) -> None:
        self.calls.append(("clear", None))

    def apply_style(self, style: StyleState) -> None:
        self.calls.append(("style", style))

    @property
    def texts(self) -> List[str]:
        return [value for kind, value in self.calls if kind == "text"]


class ScriptedChooser:
    """Answers menus from a fixed list of indexes and records every menu."""

    def __init__(self, selections: Sequence[int] = ()) -> None:
        self._selections = list(selections)
        self.menus: List[List[str]] = []

    def present_choices(self, options: Sequence[MenuOption]) -> int:
        self.menus.append([option.label for option in options])
        if not self._selections:
            raise AssertionError(f"Unexpected menu: {self.menus[-1]}")
        return self._selections.pop(0)
