"""Evaluation of boolean condition trees against game state."""
from __future__ import annotations

from scenescript.domain.defs import (
    AndExpr,
    BoolExpr,
    FalseExpr,
    HasExpr,
    IdentExpr,
    NotExpr,
    OrExpr,
    TrueExpr,
)
from scenescript.services.ports import ConditionContext


def evaluate_condition(expr: BoolExpr, context: ConditionContext) -> bool:
    """Return the truth value of ``expr``; and/or short-circuit."""
    if isinstance(expr, OrExpr):
        return evaluate_condition(expr.left, context) or evaluate_condition(expr.right, context)
    if isinstance(expr, AndExpr):
        return evaluate_condition(expr.left, context) and evaluate_condition(expr.right, context)
    if isinstance(expr, NotExpr):
        return not evaluate_condition(expr.operand, context)
    if isinstance(expr, (HasExpr, IdentExpr)):
        return context.has(expr.name)
    if isinstance(expr, TrueExpr):
        return True
    if isinstance(expr, FalseExpr):
        return False
    raise TypeError(f"Unsupported condition node: {type(expr).__name__}")
