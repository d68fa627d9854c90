"""
Error types for alias parsing and resolution.

All errors are ValueError subclasses carrying structured fields so callers
can report them without parsing the message.
"""

from __future__ import annotations


class AliasError(ValueError):
    """Base class for alias parse and resolution errors."""


class ExprSyntaxError(AliasError):
    """
    Raised when an expression source is malformed.

    Attributes:
        position: 0-based character offset of the offending token
        expected: What the parser was looking for
        found: What it found instead
    """

    def __init__(self, position: int, expected: str, found: str):
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(
            f"Syntax error at position {position}: expected {expected}, found {found}"
        )


class DeclarationError(AliasError):
    """
    Raised when the `name : { expression }` declaration list is malformed.

    Attributes:
        position: 0-based character offset in the declaration text
        expected: What the reader was looking for
        found: What it found instead
    """

    def __init__(self, position: int, expected: str, found: str):
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(
            f"Declaration error at position {position}: expected {expected}, found {found}"
        )


class CyclicOrForwardReferenceError(AliasError):
    """
    Raised when an alias references itself or a later alias it may not see.

    Attributes:
        alias: Alias being registered
        reference: Offending referenced name
        reason: "self", "cycle" or "forward"
        chain: Alias names along the detected path (for cycles)
    """

    def __init__(
        self,
        alias: str,
        reference: str,
        reason: str,
        chain: list[str] | None = None,
    ):
        self.alias = alias
        self.reference = reference
        self.reason = reason
        self.chain = chain or []
        if reason == "self":
            detail = f"alias '{alias}' references itself"
        elif reason == "cycle":
            path = " -> ".join(self.chain) if self.chain else f"{alias} -> {reference}"
            detail = f"alias '{alias}' is part of a reference cycle: {path}"
        else:
            detail = (
                f"alias '{alias}' references '{reference}', "
                f"which is declared later in the batch"
            )
        super().__init__(detail)


__all__ = [
    "AliasError",
    "ExprSyntaxError",
    "DeclarationError",
    "CyclicOrForwardReferenceError",
]
