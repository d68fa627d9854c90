"""
DSL Reference Nodes for the alias expression language.

A bare identifier is parsed as a Reference. When an alias is registered the
resolver replaces every Reference with one of two bound forms:
- AliasRef: points at an earlier alias's expression (shared, not copied)
- FactFlag: raw single-flag fact test, looked up at evaluation time
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Expr


@dataclass(frozen=True)
class Reference:
    """
    An unresolved bare identifier.

    Attributes:
        name: Identifier exactly as written in the source

    Examples:
        Reference(name="unix")
        Reference(name="wasm")   # may name an alias declared earlier
    """
    name: str

    def __post_init__(self):
        """Validate Reference parameters."""
        if not self.name:
            raise ValueError("Reference: name is required")

    def __repr__(self) -> str:
        return f"Ref({self.name!r})"


@dataclass(frozen=True)
class AliasRef:
    """
    A reference bound to a previously registered alias.

    The target is the exact expression object the alias held at binding
    time. A later re-declaration of the same name does not change it.

    Attributes:
        name: Alias name
        target: Resolved expression of the referenced alias
    """
    name: str
    target: "Expr"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AliasRef):
            return NotImplemented
        return self.name == other.name and self.target is other.target

    def __hash__(self) -> int:
        return hash((self.name, id(self.target)))

    def __repr__(self) -> str:
        return f"Alias({self.name!r})"


@dataclass(frozen=True)
class FactFlag:
    """
    A reference bound to a raw fact flag.

    True when the fact is bound to any value or the name is an enabled
    feature.

    Attributes:
        name: Identifier exactly as written in the source
    """
    name: str

    def __repr__(self) -> str:
        return f"Flag({self.name!r})"


__all__ = [
    "Reference",
    "AliasRef",
    "FactFlag",
]
