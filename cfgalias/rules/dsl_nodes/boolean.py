"""
Combinator nodes: all(...), any(...) and not(...).

Empty argument lists are legal:
all() is vacuously true and any() is vacuously false.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Expr


@dataclass(frozen=True)
class AllExpr:
    """
    all(...): true when no child is false.

    Children are evaluated left to right and evaluation stops at the
    first false one, so all() is true.

    Attributes:
        children: Tuple of child expressions (may be empty)

    Examples:
        AllExpr((unix, feature_a))   # all(unix, feature = "a")
        AllExpr(())                  # all() -> always true
    """
    children: tuple["Expr", ...] = ()

    def __post_init__(self):
        """Validate children container."""
        if not isinstance(self.children, tuple):
            raise TypeError(
                f"AllExpr: children must be a tuple, got {type(self.children).__name__}"
            )

    def __repr__(self) -> str:
        return f"All({', '.join(map(repr, self.children))})"


@dataclass(frozen=True)
class AnyExpr:
    """
    any(...): true when some child is true.

    Evaluation stops at the first true child, so any() is false.

    Attributes:
        children: Tuple of child expressions (may be empty)

    Examples:
        AnyExpr((wasm, glutin))   # any(wasm, glutin)
    """
    children: tuple["Expr", ...] = ()

    def __post_init__(self):
        """Validate children container."""
        if not isinstance(self.children, tuple):
            raise TypeError(
                f"AnyExpr: children must be a tuple, got {type(self.children).__name__}"
            )

    def __repr__(self) -> str:
        return f"Any({', '.join(map(repr, self.children))})"


@dataclass(frozen=True)
class NotExpr:
    """
    not(...): exactly one child, negated.

    Attributes:
        child: Negated expression

    Examples:
        NotExpr(wasm)  # not(wasm)
    """
    child: "Expr"

    def __repr__(self) -> str:
        return f"Not({self.child!r})"


__all__ = [
    "AllExpr",
    "AnyExpr",
    "NotExpr",
]
