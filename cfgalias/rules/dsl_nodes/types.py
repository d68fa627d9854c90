"""
DSL Type Aliases for the alias expression language.

Placed in a separate module to avoid circular imports.
"""

from __future__ import annotations

from .boolean import AllExpr, AnyExpr, NotExpr
from .condition import Equals, FeaturePresent
from .reference import Reference, AliasRef, FactFlag


# =============================================================================
# Type Alias
# =============================================================================

# All expression types that can appear in a condition tree
Expr = (
    AllExpr | AnyExpr | NotExpr
    | Equals | FeaturePresent
    | Reference | AliasRef | FactFlag
)

# Leaves that consult raw facts directly
LeafExpr = Equals | FeaturePresent | FactFlag


__all__ = [
    "Expr",
    "LeafExpr",
]
