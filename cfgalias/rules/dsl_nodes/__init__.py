"""
DSL AST Node Types for the alias expression language.

Nodes are frozen dataclasses: a tree is built once by the parser and is
never mutated afterwards, only resolved (which builds a new tree) and
evaluated.

Node Categories:
- Boolean expression nodes: AllExpr, AnyExpr, NotExpr
- Leaf tests: Equals, FeaturePresent
- Identifier leaves: Reference (unresolved), AliasRef and FactFlag (bound)

Type Hierarchy:
    Expr = AllExpr | AnyExpr | NotExpr | Equals | FeaturePresent
           | Reference | AliasRef | FactFlag

Usage:
    # all(unix, feature = "surfman", not(wasm))
    expr = AllExpr((
        Reference(name="unix"),
        FeaturePresent(name="surfman"),
        NotExpr(Reference(name="wasm")),
    ))
"""

# Constants
from .constants import (
    ALL_KEYWORD,
    ANY_KEYWORD,
    NOT_KEYWORD,
    COMBINATOR_KEYWORDS,
    FEATURE_KEYWORD,
    IDENTIFIER_PATTERN,
)

# Boolean expression nodes
from .boolean import (
    AllExpr,
    AnyExpr,
    NotExpr,
)

# Leaf tests
from .condition import (
    Equals,
    FeaturePresent,
)

# Identifier leaves
from .reference import (
    Reference,
    AliasRef,
    FactFlag,
)

# Type aliases
from .types import Expr, LeafExpr

# Utility functions
from .utils import (
    get_referenced_names,
    is_resolved,
    quote_literal,
    expr_to_source,
)


__all__ = [
    # Constants
    "ALL_KEYWORD",
    "ANY_KEYWORD",
    "NOT_KEYWORD",
    "COMBINATOR_KEYWORDS",
    "FEATURE_KEYWORD",
    "IDENTIFIER_PATTERN",
    # Boolean expression nodes
    "AllExpr",
    "AnyExpr",
    "NotExpr",
    # Leaf tests
    "Equals",
    "FeaturePresent",
    # Identifier leaves
    "Reference",
    "AliasRef",
    "FactFlag",
    # Type aliases
    "Expr",
    "LeafExpr",
    # Utility functions
    "get_referenced_names",
    "is_resolved",
    "quote_literal",
    "expr_to_source",
]
