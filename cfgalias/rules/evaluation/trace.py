"""
Evaluation traces for explaining alias results.

explain() walks a tree with the same short-circuit rules as ExprEvaluator
and records every visited node. Children that short-circuiting never
reached are recorded as skipped, with no value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
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
    expr_to_source,
)
from .condition_ops import eval_equals, eval_feature, eval_fact_flag

if TYPE_CHECKING:
    from ...facts import FactsProvider


@dataclass
class TraceNode:
    """
    One visited node of an evaluation.

    Attributes:
        label: Short description (e.g. 'all', 'target_arch = "wasm32"', 'alias wasm')
        value: Evaluated result, or None when skipped
        children: Traces of child nodes in source order
    """
    label: str
    value: bool | None
    children: list["TraceNode"] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        """Check if short-circuiting skipped this node."""
        return self.value is None

    def format_lines(self, indent: int = 0) -> list[str]:
        """Format trace as indented text lines."""
        status = "SKIP" if self.value is None else ("TRUE" if self.value else "FALSE")
        lines = [f"{'  ' * indent}{self.label} = {status}"]
        for child in self.children:
            lines.extend(child.format_lines(indent + 1))
        return lines


def _skipped(expr: Expr) -> TraceNode:
    return TraceNode(label=_label(expr), value=None)


def _label(expr: Expr) -> str:
    if isinstance(expr, AllExpr):
        return "all"
    if isinstance(expr, AnyExpr):
        return "any"
    if isinstance(expr, NotExpr):
        return "not"
    if isinstance(expr, AliasRef):
        return f"alias {expr.name}"
    if isinstance(expr, (FactFlag, Reference)):
        return f"flag {expr.name}"
    return expr_to_source(expr)


def explain(expr: Expr, facts: "FactsProvider") -> TraceNode:
    """
    Evaluate an expression and record how each node contributed.

    Args:
        expr: The expression to evaluate.
        facts: FactsProvider supplying raw configuration.

    Returns:
        Root TraceNode; its value equals ExprEvaluator().evaluate(expr, facts).
    """
    if isinstance(expr, (AllExpr, AnyExpr)):
        # all: stop at first False; any: stop at first True
        stop_on = isinstance(expr, AnyExpr)
        node = TraceNode(label=_label(expr), value=not stop_on)
        for i, child in enumerate(expr.children):
            child_trace = explain(child, facts)
            node.children.append(child_trace)
            if child_trace.value == stop_on:
                node.value = stop_on
                node.children.extend(_skipped(c) for c in expr.children[i + 1:])
                break
        return node

    if isinstance(expr, NotExpr):
        inner = explain(expr.child, facts)
        return TraceNode(label="not", value=not inner.value, children=[inner])

    if isinstance(expr, AliasRef):
        inner = explain(expr.target, facts)
        return TraceNode(label=_label(expr), value=inner.value, children=[inner])

    if isinstance(expr, Equals):
        return TraceNode(label=_label(expr), value=eval_equals(expr, facts))

    if isinstance(expr, FeaturePresent):
        return TraceNode(label=_label(expr), value=eval_feature(expr, facts))

    if isinstance(expr, (FactFlag, Reference)):
        return TraceNode(label=_label(expr), value=eval_fact_flag(expr, facts))

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")
