"""Domain definition exports."""

from .expr_def import AndExpr, BoolExpr, FalseExpr, HasExpr, IdentExpr, NotExpr, OrExpr, TrueExpr
from .program_def import Program, SceneBody
from .statement_def import (
    AddItemStatement,
    ChoiceStatement,
    GotoStatement,
    IfStatement,
    ImageStatement,
    PrintStatement,
    RemoveItemStatement,
    SetFlagStatement,
    Statement,
    StyleChangeStatement,
    UnsetFlagStatement,
)

__all__ = [
    "AddItemStatement",
    "AndExpr",
    "BoolExpr",
    "ChoiceStatement",
    "FalseExpr",
    "GotoStatement",
    "HasExpr",
    "IdentExpr",
    "IfStatement",
    "ImageStatement",
    "NotExpr",
    "OrExpr",
    "PrintStatement",
    "Program",
    "RemoveItemStatement",
    "SceneBody",
    "SetFlagStatement",
    "Statement",
    "StyleChangeStatement",
    "TrueExpr",
    "UnsetFlagStatement",
]
