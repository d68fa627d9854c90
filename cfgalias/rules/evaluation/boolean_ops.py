"""
Boolean operators for DSL expressions.

Handles AllExpr, AnyExpr, NotExpr evaluation with short-circuit semantics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dsl_nodes import (
    AllExpr,
    AnyExpr,
    NotExpr,
)
from .protocols import ExprEvaluatorProtocol

if TYPE_CHECKING:
    from ...facts import FactsProvider


def eval_all(
    expr: AllExpr,
    facts: "FactsProvider",
    evaluator: ExprEvaluatorProtocol,
) -> bool:
    """
    Evaluate AllExpr (AND) with short-circuit.

    Returns False on first failing child; children after it are never
    evaluated. all() is True.
    """
    for child in expr.children:
        if not evaluator.evaluate(child, facts):
            return False  # Short-circuit: first failure wins
    return True


def eval_any(
    expr: AnyExpr,
    facts: "FactsProvider",
    evaluator: ExprEvaluatorProtocol,
) -> bool:
    """
    Evaluate AnyExpr (OR) with short-circuit.

    Returns True on first passing child. any() is False.
    """
    for child in expr.children:
        if evaluator.evaluate(child, facts):
            return True  # Short-circuit: first success wins
    return False


def eval_not(
    expr: NotExpr,
    facts: "FactsProvider",
    evaluator: ExprEvaluatorProtocol,
) -> bool:
    """Evaluate NotExpr (negation)."""
    return not evaluator.evaluate(expr.child, facts)
