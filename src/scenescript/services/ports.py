"""Collaborator interfaces the interpreter drives.

Rendering, input and localization live outside the engine; anything that
implements these protocols can be plugged into a SceneRunner.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from scenescript.domain.defs import Statement
from scenescript.domain.style import StyleState


@dataclass(frozen=True, slots=True)
class MenuOption:
    """A presented menu entry: resolved label plus the body run on selection."""

    label: str
    body: Tuple[Statement, ...]


class Renderer(Protocol):
    def render_text(self, text: str) -> None:
        ...

    def render_image(self, source: str) -> None:
        ...

    def clear_transient_output(self) -> None:
        ...

    def apply_style(self, style: StyleState) -> None:
        ...


class ChoicePresenter(Protocol):
    def present_choices(self, options: Sequence[MenuOption]) -> int:
        """Block until the player picks an option; return its index."""
        ...


class Localizer(Protocol):
    def resolve(self, text: str) -> str:
        ...


class ConditionContext(Protocol):
    """Read-only view used when evaluating conditions."""

    def has(self, name: str) -> bool:
        ...
