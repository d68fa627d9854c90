"""
DSL Constants for the alias expression language.

This module defines the constant values shared by the lexer, parser and
node types:
- Combinator keywords
- The feature-test keyword
- Identifier shape
"""

from __future__ import annotations

import re

# =============================================================================
# Keywords
# =============================================================================

ALL_KEYWORD = "all"
ANY_KEYWORD = "any"
NOT_KEYWORD = "not"

# Keywords that must be followed by a parenthesised argument list
COMBINATOR_KEYWORDS = frozenset({
    ALL_KEYWORD,    # Conjunction: all(a, b, ...)
    ANY_KEYWORD,    # Disjunction: any(a, b, ...)
    NOT_KEYWORD,    # Negation: not(a)
})

# `feature = "name"` tests an enabled optional feature.
# A bare `feature` with no `=` is an ordinary identifier.
FEATURE_KEYWORD = "feature"

# =============================================================================
# Identifiers
# =============================================================================

# Bare word: letters, digits, underscore and hyphen; never starts with a digit
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_\-]*")


__all__ = [
    "ALL_KEYWORD",
    "ANY_KEYWORD",
    "NOT_KEYWORD",
    "COMBINATOR_KEYWORDS",
    "FEATURE_KEYWORD",
    "IDENTIFIER_PATTERN",
]
