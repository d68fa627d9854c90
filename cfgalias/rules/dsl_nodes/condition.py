"""
DSL Leaf Test Nodes for the alias expression language.

This module defines the leaf tests that read raw facts:
- Equals: key = "value" membership test
- FeaturePresent: feature = "name" test
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Equals:
    """
    Equality test against a multi-valued fact.

    A fact is a comma-separated list of values; the test is true when
    `value` is one of them (exact string match, no wildcarding).

    Attributes:
        key: Fact key exactly as written (normalized only at lookup time)
        value: String literal to look for

    Examples:
        Equals(key="target_arch", value="wasm32")   # target_arch = "wasm32"
        Equals(key="target-os", value="linux")       # same fact as TARGET_OS
    """
    key: str
    value: str

    def __post_init__(self):
        """Validate Equals parameters."""
        if not self.key:
            raise ValueError("Equals: key is required")

    def __repr__(self) -> str:
        return f"Eq({self.key!r}, {self.value!r})"


@dataclass(frozen=True)
class FeaturePresent:
    """
    Test for an enabled optional feature.

    Attributes:
        name: Feature name from the string literal

    Examples:
        FeaturePresent(name="glutin")   # feature = "glutin"
    """
    name: str

    def __repr__(self) -> str:
        return f"Feature({self.name!r})"


__all__ = [
    "Equals",
    "FeaturePresent",
]
