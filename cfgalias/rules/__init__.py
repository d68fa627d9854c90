"""
Alias expression language: nodes, parser, resolver and evaluator.

Design principles:
- Parse once into immutable trees
- Bind names at registration time, in declaration order
- Evaluate as a pure function of (tree, facts)
- Report malformed input as structured errors, never during evaluation
"""

from .errors import (
    AliasError,
    ExprSyntaxError,
    DeclarationError,
    CyclicOrForwardReferenceError,
)
from .dsl_nodes import (
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
    get_referenced_names,
)
from .dsl_lexer import Token, TokenKind, tokenize
from .dsl_parser import parse_expr
from .resolver import (
    Alias,
    AliasFailure,
    AliasRegistry,
    AliasResolver,
    build_registry,
)
from .evaluation import (
    ExprEvaluator,
    evaluate_expression,
    TraceNode,
    explain,
)

__all__ = [
    # Errors
    "AliasError",
    "ExprSyntaxError",
    "DeclarationError",
    "CyclicOrForwardReferenceError",
    # Nodes
    "Expr",
    "AllExpr",
    "AnyExpr",
    "NotExpr",
    "Equals",
    "FeaturePresent",
    "Reference",
    "AliasRef",
    "FactFlag",
    "expr_to_source",
    "get_referenced_names",
    # Parsing
    "Token",
    "TokenKind",
    "tokenize",
    "parse_expr",
    # Resolution
    "Alias",
    "AliasFailure",
    "AliasRegistry",
    "AliasResolver",
    "build_registry",
    # Evaluation
    "ExprEvaluator",
    "evaluate_expression",
    "TraceNode",
    "explain",
]
