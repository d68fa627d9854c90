"""
DSL Utility Functions for the alias expression language.

This module provides tree walkers over expression trees:
- Reference collection (used by the resolver for cycle detection)
- Source rendering (canonical text form for logs and reports)
"""

from __future__ import annotations

from .boolean import AllExpr, AnyExpr, NotExpr
from .condition import Equals, FeaturePresent
from .reference import Reference, AliasRef, FactFlag
from .types import Expr
from .constants import ALL_KEYWORD, ANY_KEYWORD, NOT_KEYWORD, FEATURE_KEYWORD


# =============================================================================
# Reference Collection
# =============================================================================

def get_referenced_names(expr: Expr) -> list[str]:
    """
    Collect identifier names referenced by bare-word leaves.

    Only unresolved References are collected; bound AliasRef/FactFlag
    leaves are already final. Order is first occurrence, no duplicates.

    Args:
        expr: Expression to walk.

    Returns:
        List of referenced names in source order.
    """
    names: list[str] = []
    seen: set[str] = set()

    def _walk(e: Expr) -> None:
        if isinstance(e, (AllExpr, AnyExpr)):
            for child in e.children:
                _walk(child)
        elif isinstance(e, NotExpr):
            _walk(e.child)
        elif isinstance(e, Reference):
            if e.name not in seen:
                seen.add(e.name)
                names.append(e.name)

    _walk(expr)
    return names


def is_resolved(expr: Expr) -> bool:
    """Check that no unresolved Reference remains in the tree."""
    if isinstance(expr, (AllExpr, AnyExpr)):
        return all(is_resolved(c) for c in expr.children)
    if isinstance(expr, NotExpr):
        return is_resolved(expr.child)
    return not isinstance(expr, Reference)


# =============================================================================
# Source Rendering
# =============================================================================

def quote_literal(value: str) -> str:
    """Render a string literal with the escapes the lexer understands."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def expr_to_source(expr: Expr) -> str:
    """
    Render an expression tree back to canonical source text.

    Bound references render as their bare name, so a resolved tree prints
    the same as the tree it came from. Parsing the result yields an equal
    unresolved tree.

    Args:
        expr: Expression to render.

    Returns:
        Source text, e.g. 'all(unix, feature = "a", not(wasm))'.
    """
    if isinstance(expr, AllExpr):
        return f"{ALL_KEYWORD}({', '.join(expr_to_source(c) for c in expr.children)})"

    elif isinstance(expr, AnyExpr):
        return f"{ANY_KEYWORD}({', '.join(expr_to_source(c) for c in expr.children)})"

    elif isinstance(expr, NotExpr):
        return f"{NOT_KEYWORD}({expr_to_source(expr.child)})"

    elif isinstance(expr, Equals):
        return f"{expr.key} = {quote_literal(expr.value)}"

    elif isinstance(expr, FeaturePresent):
        return f"{FEATURE_KEYWORD} = {quote_literal(expr.name)}"

    elif isinstance(expr, (Reference, AliasRef, FactFlag)):
        return expr.name

    else:
        raise ValueError(f"Unknown expression type: {type(expr)}")


__all__ = [
    "get_referenced_names",
    "is_resolved",
    "quote_literal",
    "expr_to_source",
]
