"""
Evaluator interface seen by the per-node operation modules.

boolean_ops and reference_ops recurse through the evaluator they are given
rather than importing core, which imports them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..dsl_nodes import Expr

if TYPE_CHECKING:
    from ...facts import FactsProvider


class ExprEvaluatorProtocol(Protocol):
    """Anything that can evaluate a resolved tree against facts."""

    def evaluate(self, expr: Expr, facts: "FactsProvider") -> bool: ...
