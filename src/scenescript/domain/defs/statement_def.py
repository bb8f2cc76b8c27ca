"""Statement definitions that make up a scene body."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from scenescript.core.types import StyleProperty
from scenescript.domain.defs.expr_def import BoolExpr


@dataclass(frozen=True, slots=True)
class PrintStatement:
    """Literal text or a localization key to display."""

    text: str


@dataclass(frozen=True, slots=True)
class ImageStatement:
    source: str


@dataclass(frozen=True, slots=True)
class SetFlagStatement:
    flag_id: str


@dataclass(frozen=True, slots=True)
class UnsetFlagStatement:
    flag_id: str


@dataclass(frozen=True, slots=True)
class AddItemStatement:
    item_id: str


@dataclass(frozen=True, slots=True)
class RemoveItemStatement:
    item_id: str


@dataclass(frozen=True, slots=True)
class StyleChangeStatement:
    """Style update; `value` is an int only for `fontsize`."""

    property: StyleProperty
    value: str | int


@dataclass(frozen=True, slots=True)
class GotoStatement:
    target_scene_id: str


@dataclass(frozen=True, slots=True)
class ChoiceStatement:
    """Single menu entry with the statements run when it is selected."""

    label: str
    body: Tuple[Statement, ...] = ()


@dataclass(frozen=True, slots=True)
class IfStatement:
    condition: BoolExpr
    then_body: Tuple[Statement, ...] = ()
    else_body: Tuple[Statement, ...] = ()


Statement = Union[
    PrintStatement,
    ImageStatement,
    SetFlagStatement,
    UnsetFlagStatement,
    AddItemStatement,
    RemoveItemStatement,
    StyleChangeStatement,
    GotoStatement,
    ChoiceStatement,
    IfStatement,
]
