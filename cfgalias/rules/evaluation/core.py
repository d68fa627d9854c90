"""
DSL Expression Evaluator for alias expressions.

Evaluates resolved expression trees against a FactsProvider.

Key Features:
- Short-circuit evaluation for AllExpr/AnyExpr
- Alias references evaluate the expression bound at registration time
- Raw fact fallback for bare identifiers
- Pure: reads facts only, never raises for missing data

Usage:
    evaluator = ExprEvaluator()
    ok = evaluator.evaluate(expr, facts)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dsl_nodes import (
    Expr,
    AllExpr,
    AnyExpr,
    NotExpr,
    Equals,
    FeaturePresent,
    Reference,
    AliasRef,
    FactFlag,
)

from .boolean_ops import eval_all, eval_any, eval_not
from .condition_ops import eval_equals, eval_feature, eval_fact_flag
from .reference_ops import eval_alias_ref

if TYPE_CHECKING:
    from ...facts import FactsProvider


class ExprEvaluator:
    """
    Evaluates DSL expression trees against facts.

    Stateless - can be reused across evaluations and shared between
    threads, since neither trees nor facts are mutated.

    Example:
        evaluator = ExprEvaluator()

        # all(unix, feature = "surfman", not(wasm))
        expr = AllExpr((
            FactFlag("unix"),
            FeaturePresent("surfman"),
            NotExpr(AliasRef("wasm", wasm_expr)),
        ))
        ok = evaluator.evaluate(expr, facts)
    """

    def evaluate(self, expr: Expr, facts: "FactsProvider") -> bool:
        """
        Evaluate an expression tree against facts.

        Args:
            expr: The expression to evaluate.
            facts: FactsProvider supplying raw configuration.

        Returns:
            True if the expression holds.

        Raises:
            TypeError: If the tree contains a non-expression object.
        """
        if isinstance(expr, AllExpr):
            return eval_all(expr, facts, self)
        elif isinstance(expr, AnyExpr):
            return eval_any(expr, facts, self)
        elif isinstance(expr, NotExpr):
            return eval_not(expr, facts, self)
        elif isinstance(expr, Equals):
            return eval_equals(expr, facts)
        elif isinstance(expr, FeaturePresent):
            return eval_feature(expr, facts)
        elif isinstance(expr, AliasRef):
            return eval_alias_ref(expr, facts, self)
        elif isinstance(expr, (FactFlag, Reference)):
            return eval_fact_flag(expr, facts)
        else:
            raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def evaluate_expression(expr: Expr, facts: "FactsProvider") -> bool:
    """
    Convenience function to evaluate an expression.

    Args:
        expr: The expression to evaluate.
        facts: FactsProvider supplying raw configuration.

    Returns:
        Evaluation outcome.
    """
    return ExprEvaluator().evaluate(expr, facts)
