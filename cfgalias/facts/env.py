"""
Environment-backed facts.

Facts are read from environment variables using the naming the build
tool exports to build scripts:

    CARGO_CFG_TARGET_ARCH=wasm32          -> target_arch = "wasm32"
    CARGO_CFG_TARGET_FEATURE=sse,sse2     -> multi-valued fact
    CARGO_CFG_UNIX=                       -> bare flag `unix`
    CARGO_FEATURE_GLUTIN=1                -> feature = "glutin"

The environment is copied once at construction, so an EnvFacts instance is
an immutable snapshot for the duration of a run.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from .protocols import normalize_key

DEFAULT_FACT_PREFIX = "CARGO_CFG_"
DEFAULT_FEATURE_PREFIX = "CARGO_FEATURE_"

# Value a feature variable must hold for the feature to count as enabled
FEATURE_ENABLED_VALUE = "1"


def env_var_name(prefix: str, name: str) -> str:
    """Build the environment variable name for a fact or feature key."""
    return prefix + normalize_key(name).upper()


class EnvFacts:
    """
    FactsProvider over a snapshot of environment variables.

    Attributes:
        fact_prefix: Prefix of fact variables (default CARGO_CFG_)
        feature_prefix: Prefix of feature variables (default CARGO_FEATURE_)
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        fact_prefix: str = DEFAULT_FACT_PREFIX,
        feature_prefix: str = DEFAULT_FEATURE_PREFIX,
    ):
        self._environ: dict[str, str] = dict(os.environ if environ is None else environ)
        self.fact_prefix = fact_prefix
        self.feature_prefix = feature_prefix

    @classmethod
    def from_config(cls, environ: Mapping[str, str] | None = None) -> "EnvFacts":
        """Create EnvFacts using prefixes from the global config."""
        from ..config import get_config

        config = get_config()
        return cls(
            environ=environ,
            fact_prefix=config.facts.fact_prefix,
            feature_prefix=config.facts.feature_prefix,
        )

    def lookup_fact(self, key: str) -> frozenset[str]:
        raw = self._environ.get(env_var_name(self.fact_prefix, key))
        if raw is None:
            return frozenset()
        return frozenset(raw.split(","))

    def has_fact(self, key: str) -> bool:
        return env_var_name(self.fact_prefix, key) in self._environ

    def has_feature(self, name: str) -> bool:
        value = self._environ.get(env_var_name(self.feature_prefix, name))
        return value == FEATURE_ENABLED_VALUE

    def fact_keys(self) -> list[str]:
        """Normalized keys of every fact variable in the snapshot."""
        return sorted(
            normalize_key(var[len(self.fact_prefix):])
            for var in self._environ
            if var.startswith(self.fact_prefix) and len(var) > len(self.fact_prefix)
        )

    def enabled_features(self) -> list[str]:
        """Normalized names of every enabled feature in the snapshot."""
        return sorted(
            normalize_key(var[len(self.feature_prefix):])
            for var, value in self._environ.items()
            if var.startswith(self.feature_prefix)
            and len(var) > len(self.feature_prefix)
            and value == FEATURE_ENABLED_VALUE
        )

    def __repr__(self) -> str:
        return (
            f"EnvFacts(facts={len(self.fact_keys())}, "
            f"features={len(self.enabled_features())})"
        )


__all__ = [
    "DEFAULT_FACT_PREFIX",
    "DEFAULT_FEATURE_PREFIX",
    "FEATURE_ENABLED_VALUE",
    "env_var_name",
    "EnvFacts",
]
