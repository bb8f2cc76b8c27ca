"""Console implementations of the renderer and choice presenter."""
from __future__ import annotations

from typing import Sequence

from scenescript.domain.style import StyleState
from scenescript.presentation.cli.render import (
    DEFAULT_WIDTH,
    debug_enabled,
    pause_for_continue,
    render_choices,
    wrap_text,
)
from scenescript.services.ports import MenuOption


class ConsoleRenderer:
    """Prints scene output to stdout."""

    def __init__(self, *, width: int = DEFAULT_WIDTH) -> None:
        self._width = width
        self._unread_lines = 0
        self.style = StyleState()

    def render_text(self, text: str) -> None:
        for line in wrap_text(text, self._width):
            print(line)
            self._unread_lines += 1

    def render_image(self, source: str) -> None:
        print(f"[image: {source}]")
        self._unread_lines += 1

    def clear_transient_output(self) -> None:
        if self._unread_lines:
            pause_for_continue()
            print("\n---")
        self._unread_lines = 0

    def apply_style(self, style: StyleState) -> None:
        self.style = style
        if debug_enabled():
            print(
                f"[style] background={style.background} foreground={style.foreground} "
                f"font={style.font} fontsize={style.fontsize}"
            )

    def acknowledge(self) -> None:
        """Mark printed output as read (the player just answered a prompt)."""
        self._unread_lines = 0


class ConsoleChoicePresenter:
    """Shows a numbered menu and blocks on input until a valid pick."""

    def __init__(self, renderer: ConsoleRenderer | None = None) -> None:
        self._renderer = renderer

    def present_choices(self, options: Sequence[MenuOption]) -> int:
        render_choices([option.label for option in options])
        index = prompt_choice(len(options))
        if self._renderer is not None:
            self._renderer.acknowledge()
        return index


def prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
