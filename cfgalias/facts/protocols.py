"""
Facts provider protocol and key normalization.

The core reads build configuration only through FactsProvider. All
lookups receive normalized keys and never fail: an unknown key is an empty
result, not an error.
"""

from __future__ import annotations

from typing import Protocol


def normalize_key(name: str) -> str:
    """
    Normalize an identifier for fact lookup.

    Matching is case-insensitive and treats '-' and '_' as the same, so
    `target-arch` and `TARGET_ARCH` address one fact.
    """
    return name.strip().lower().replace("-", "_")


class FactsProvider(Protocol):
    """Read-only source of raw configuration facts."""

    def lookup_fact(self, key: str) -> frozenset[str]:
        """Values bound under `key` (empty when unknown)."""
        ...

    def has_fact(self, key: str) -> bool:
        """True when any value, even an empty one, is bound under `key`."""
        ...

    def has_feature(self, name: str) -> bool:
        """True when the optional feature `name` is enabled."""
        ...


__all__ = [
    "normalize_key",
    "FactsProvider",
]
