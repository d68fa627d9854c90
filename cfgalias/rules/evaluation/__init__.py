"""
DSL Expression Evaluation Package.

This package provides the expression evaluator for alias expressions,
split into focused modules:

- core.py: ExprEvaluator class and main evaluate() dispatch
- boolean_ops.py: AllExpr, AnyExpr, NotExpr evaluation
- condition_ops.py: Equals, FeaturePresent and raw flag tests
- reference_ops.py: AliasRef evaluation
- trace.py: explain() traces for reporting

Usage:
    from cfgalias.rules.evaluation import ExprEvaluator, evaluate_expression

    evaluator = ExprEvaluator()
    ok = evaluator.evaluate(expr, facts)
"""

from .core import ExprEvaluator, evaluate_expression
from .trace import TraceNode, explain

__all__ = [
    "ExprEvaluator",
    "evaluate_expression",
    "TraceNode",
    "explain",
]
