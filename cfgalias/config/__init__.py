"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    ForwardRefPolicy,
    FORWARD_REF_POLICIES,
    DEFAULT_SIGNAL_PREFIX,
    FactsConfig,
    ResolveConfig,
    EmitConfig,
    LogConfig,
)

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "ForwardRefPolicy",
    "FORWARD_REF_POLICIES",
    "DEFAULT_SIGNAL_PREFIX",
    "FactsConfig",
    "ResolveConfig",
    "EmitConfig",
    "LogConfig",
]
