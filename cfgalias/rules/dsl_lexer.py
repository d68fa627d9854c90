"""
DSL Lexer: source text to tokens for the alias expression language.

Token set:
    IDENT   bare word    [A-Za-z_][A-Za-z0-9_-]*
    STRING  literal      "..." with \\" and \\\\ escapes
    LPAREN  (
    RPAREN  )
    COMMA   ,
    EQ      =
    EOF     end of input

Whitespace separates tokens and is otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .dsl_nodes import IDENTIFIER_PATTERN
from .errors import ExprSyntaxError


class TokenKind(Enum):
    """Token categories produced by the lexer."""
    IDENT = auto()
    STRING = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    EQ = auto()
    EOF = auto()


_PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
    "=": TokenKind.EQ,
}


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Attributes:
        kind: Token category
        text: Identifier text, decoded string value, or punctuation
        position: 0-based offset of the token's first character
    """
    kind: TokenKind
    text: str
    position: int

    def describe(self) -> str:
        """Human-readable form used in syntax error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        if self.kind == TokenKind.IDENT:
            return f"identifier '{self.text}'"
        if self.kind == TokenKind.STRING:
            return f'string "{self.text}"'
        return f"'{self.text}'"


def scan_string(source: str, start: int) -> tuple[str, int]:
    """
    Scan a string literal starting at the opening quote.

    Args:
        source: Full source text.
        start: Offset of the opening '"'.

    Returns:
        Tuple of (decoded value, offset just past the closing quote).

    Raises:
        ExprSyntaxError: If the literal is unterminated or uses an
            unknown escape.
    """
    chars: list[str] = []
    i = start + 1
    while i < len(source):
        c = source[i]
        if c == '"':
            return "".join(chars), i + 1
        if c == "\\":
            if i + 1 >= len(source):
                break
            nxt = source[i + 1]
            if nxt not in ('"', "\\"):
                raise ExprSyntaxError(i, 'escape \\" or \\\\', f"'\\{nxt}'")
            chars.append(nxt)
            i += 2
            continue
        chars.append(c)
        i += 1
    raise ExprSyntaxError(start, "closing '\"'", "end of input")


def tokenize(source: str) -> list[Token]:
    """
    Split expression source into tokens.

    The returned list always ends with a single EOF token.

    Args:
        source: Expression source text.

    Returns:
        List of tokens.

    Raises:
        ExprSyntaxError: On an unexpected character or bad string literal.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)
    while i < n:
        c = source[i]
        if c.isspace():
            i += 1
            continue
        if c in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[c], c, i))
            i += 1
            continue
        if c == '"':
            value, end = scan_string(source, i)
            tokens.append(Token(TokenKind.STRING, value, i))
            i = end
            continue
        match = IDENTIFIER_PATTERN.match(source, i)
        if match:
            tokens.append(Token(TokenKind.IDENT, match.group(0), i))
            i = match.end()
            continue
        raise ExprSyntaxError(i, "identifier, string literal or one of '(),='", f"'{c}'")
    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


__all__ = [
    "TokenKind",
    "Token",
    "scan_string",
    "tokenize",
]
