"""
Alias reference evaluation for DSL expressions.

An AliasRef carries the referenced alias's expression, bound when the
referencing alias was registered. Evaluation recurses into that target; no
registry lookup happens at evaluation time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dsl_nodes import AliasRef
from .protocols import ExprEvaluatorProtocol

if TYPE_CHECKING:
    from ...facts import FactsProvider


def eval_alias_ref(
    expr: AliasRef,
    facts: "FactsProvider",
    evaluator: ExprEvaluatorProtocol,
) -> bool:
    """Evaluate the bound alias expression."""
    return evaluator.evaluate(expr.target, facts)
