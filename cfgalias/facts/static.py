"""
In-memory facts and the YAML facts file loader.

Example YAML:
    facts:
      target_arch: wasm32
      target_os: linux
      target_feature: [sse, sse2]
      unix: ""
    features:
      - glutin
      - wgl
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from .protocols import normalize_key


def _as_values(value: Any) -> frozenset[str]:
    """Coerce a YAML/dict fact value to a set of strings."""
    if value is None:
        return frozenset({""})
    if isinstance(value, bool):
        return frozenset({"true" if value else "false"})
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(v) for v in value)
    return frozenset(str(value).split(","))


class StaticFacts:
    """
    FactsProvider over a fixed mapping.

    String values are treated like environment values and split on commas;
    lists are taken as-is. `None` binds an empty flag value.

    Examples:
        StaticFacts({"target_arch": "wasm32", "unix": ""}, features={"glutin"})
    """

    def __init__(
        self,
        facts: Mapping[str, Any] | None = None,
        features: Iterable[str] = (),
    ):
        self._facts: dict[str, frozenset[str]] = {
            normalize_key(k): _as_values(v) for k, v in (facts or {}).items()
        }
        self._features: frozenset[str] = frozenset(normalize_key(f) for f in features)

    def lookup_fact(self, key: str) -> frozenset[str]:
        return self._facts.get(normalize_key(key), frozenset())

    def has_fact(self, key: str) -> bool:
        return normalize_key(key) in self._facts

    def has_feature(self, name: str) -> bool:
        return normalize_key(name) in self._features

    def fact_keys(self) -> list[str]:
        return sorted(self._facts)

    def enabled_features(self) -> list[str]:
        return sorted(self._features)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "facts": {k: sorted(v) for k, v in sorted(self._facts.items())},
            "features": sorted(self._features),
        }

    def __repr__(self) -> str:
        return f"StaticFacts(facts={self.fact_keys()}, features={self.enabled_features()})"


def load_facts(path: Path | str) -> StaticFacts:
    """
    Load a facts snapshot from a YAML file.

    Args:
        path: YAML file with optional `facts` mapping and `features` list

    Returns:
        StaticFacts instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or does not have the
            expected shape
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in facts file {path}: {e}") from e

    if data is None:
        return StaticFacts()
    if not isinstance(data, dict):
        raise ValueError(f"Facts file must hold a mapping: {path}")

    facts = data.get("facts") or {}
    features = data.get("features") or []
    if not isinstance(facts, dict):
        raise ValueError(f"'facts' must be a mapping in {path}")
    if not isinstance(features, list):
        raise ValueError(f"'features' must be a list in {path}")
    bad_keys = [k for k in facts if not isinstance(k, str)]
    if bad_keys:
        raise ValueError(f"Fact keys must be strings in {path}, got {bad_keys!r}")

    return StaticFacts(facts, features=[str(f) for f in features])


__all__ = [
    "StaticFacts",
    "load_facts",
]
