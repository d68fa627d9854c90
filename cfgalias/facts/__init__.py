"""
Facts providers.

The evaluator reads build configuration through the FactsProvider
protocol. Two providers ship here:
- EnvFacts: snapshot of CARGO_CFG_* / CARGO_FEATURE_* variables
- StaticFacts: in-memory mapping, also loadable from YAML
"""

from .protocols import FactsProvider, normalize_key
from .env import (
    EnvFacts,
    env_var_name,
    DEFAULT_FACT_PREFIX,
    DEFAULT_FEATURE_PREFIX,
    FEATURE_ENABLED_VALUE,
)
from .static import StaticFacts, load_facts

__all__ = [
    "FactsProvider",
    "normalize_key",
    "EnvFacts",
    "env_var_name",
    "DEFAULT_FACT_PREFIX",
    "DEFAULT_FEATURE_PREFIX",
    "FEATURE_ENABLED_VALUE",
    "StaticFacts",
    "load_facts",
]
