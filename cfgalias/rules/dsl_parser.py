"""
DSL Parser: source text to AST conversion for alias expressions.

Grammar:
```
expr         := combinator | equality | feature_test | identifier
combinator   := ("all" | "any") "(" [expr_list] ")" | "not" "(" expr ")"
expr_list    := expr ("," expr)* [","]
equality     := identifier "=" string_literal
feature_test := "feature" "=" string_literal
```

The parser is a single left-to-right pass with one token of lookahead and
no backtracking. The head token picks the production; argument lists are
consumed by recursion, so commas inside a nested combinator belong to that
combinator and never split the outer list.

Usage:
    expr = parse_expr('all(unix, feature = "surfman", not(wasm))')
"""

from __future__ import annotations

from .dsl_nodes import (
    Expr, AllExpr, AnyExpr, NotExpr,
    Equals, FeaturePresent, Reference,
    ALL_KEYWORD, ANY_KEYWORD, NOT_KEYWORD,
    COMBINATOR_KEYWORDS, FEATURE_KEYWORD,
)
from .dsl_lexer import Token, TokenKind, tokenize
from .errors import ExprSyntaxError


class _ExprParser:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._pos = 0

    # -------------------------------------------------------------------------
    # Token helpers
    # -------------------------------------------------------------------------

    def _peek(self, ahead: int = 0) -> Token:
        idx = min(self._pos + ahead, len(self._tokens) - 1)
        return self._tokens[idx]

    def _advance(self) -> Token:
        tok = self._peek()
        if tok.kind != TokenKind.EOF:
            self._pos += 1
        return tok

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        tok = self._peek()
        if tok.kind != kind:
            raise ExprSyntaxError(tok.position, expected, tok.describe())
        return self._advance()

    # -------------------------------------------------------------------------
    # Productions
    # -------------------------------------------------------------------------

    def parse(self) -> Expr:
        """Parse a complete expression and require end of input."""
        expr = self._parse_expr()
        tok = self._peek()
        if tok.kind != TokenKind.EOF:
            raise ExprSyntaxError(tok.position, "end of input", tok.describe())
        return expr

    def _parse_expr(self) -> Expr:
        tok = self._peek()
        if tok.kind != TokenKind.IDENT:
            raise ExprSyntaxError(tok.position, "expression", tok.describe())

        if tok.text in COMBINATOR_KEYWORDS:
            return self._parse_combinator()

        nxt = self._peek(1)
        if nxt.kind == TokenKind.EQ:
            self._advance()  # identifier
            self._advance()  # '='
            literal = self._expect(TokenKind.STRING, "string literal after '='")
            if tok.text == FEATURE_KEYWORD:
                return FeaturePresent(name=literal.text)
            return Equals(key=tok.text, value=literal.text)

        self._advance()
        return Reference(name=tok.text)

    def _parse_combinator(self) -> Expr:
        keyword = self._advance()
        self._expect(TokenKind.LPAREN, f"'(' after '{keyword.text}'")

        if keyword.text == NOT_KEYWORD:
            child = self._parse_expr()
            self._expect(TokenKind.RPAREN, "')' closing not(...)")
            return NotExpr(child)

        children = self._parse_expr_list(keyword.text)
        if keyword.text == ALL_KEYWORD:
            return AllExpr(children)
        if keyword.text == ANY_KEYWORD:
            return AnyExpr(children)
        raise ExprSyntaxError(keyword.position, "combinator keyword", keyword.describe())

    def _parse_expr_list(self, keyword: str) -> tuple[Expr, ...]:
        """Parse arguments up to and including the closing ')'."""
        children: list[Expr] = []

        # all() / any(): legal, vacuous
        if self._peek().kind == TokenKind.RPAREN:
            self._advance()
            return ()

        while True:
            children.append(self._parse_expr())
            tok = self._peek()
            if tok.kind == TokenKind.COMMA:
                self._advance()
                # Trailing comma before ')'
                if self._peek().kind == TokenKind.RPAREN:
                    self._advance()
                    break
                continue
            if tok.kind == TokenKind.RPAREN:
                self._advance()
                break
            raise ExprSyntaxError(
                tok.position, f"',' or ')' in {keyword}(...)", tok.describe()
            )
        return tuple(children)


def parse_expr(source: str) -> Expr:
    """
    Parse one alias expression from source text.

    Args:
        source: Expression text, e.g. 'any(feature = "a", feature = "b")'.

    Returns:
        Unresolved expression tree.

    Raises:
        ExprSyntaxError: If the source is empty or malformed.
    """
    if not isinstance(source, str):
        raise TypeError(f"Expression source must be str, got {type(source).__name__}")
    tokens = tokenize(source)
    return _ExprParser(tokens).parse()


__all__ = [
    "parse_expr",
]
