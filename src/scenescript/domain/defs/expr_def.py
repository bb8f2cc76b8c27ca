"""Boolean condition trees produced by the expression parser."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class AndExpr:
    left: BoolExpr
    right: BoolExpr


@dataclass(frozen=True, slots=True)
class OrExpr:
    left: BoolExpr
    right: BoolExpr


@dataclass(frozen=True, slots=True)
class NotExpr:
    operand: BoolExpr


@dataclass(frozen=True, slots=True)
class HasExpr:
    """Explicit `has <name>` test."""

    name: str


@dataclass(frozen=True, slots=True)
class IdentExpr:
    """Bare identifier; evaluates exactly like `has <name>`."""

    name: str


@dataclass(frozen=True, slots=True)
class TrueExpr:
    pass


@dataclass(frozen=True, slots=True)
class FalseExpr:
    pass


BoolExpr = Union[AndExpr, OrExpr, NotExpr, HasExpr, IdentExpr, TrueExpr, FalseExpr]
