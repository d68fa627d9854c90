"""
Configuration management for cfgalias.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..facts.env import DEFAULT_FACT_PREFIX, DEFAULT_FEATURE_PREFIX


# Forward reference policy for the resolver
class ForwardRefPolicy:
    FALLBACK = "fallback"  # Later-declared name degrades to a raw fact lookup
    ERROR = "error"        # Later-declared name is a CyclicOrForwardReferenceError


FORWARD_REF_POLICIES = (ForwardRefPolicy.FALLBACK, ForwardRefPolicy.ERROR)

DEFAULT_SIGNAL_PREFIX = "alias-signal="

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class FactsConfig:
    """
    Where raw facts come from in the environment.

    A fact `target_os` is read from `{fact_prefix}TARGET_OS`; a feature
    `glutin` is enabled when `{feature_prefix}GLUTIN` equals "1".
    """
    fact_prefix: str = DEFAULT_FACT_PREFIX
    feature_prefix: str = DEFAULT_FEATURE_PREFIX

    def __post_init__(self):
        """Validate prefixes."""
        if not self.fact_prefix:
            raise ValueError("CFGALIAS_FACT_PREFIX must not be empty")
        if not self.feature_prefix:
            raise ValueError("CFGALIAS_FEATURE_PREFIX must not be empty")
        if self.fact_prefix == self.feature_prefix:
            raise ValueError(
                f"Fact and feature prefixes must differ, both are '{self.fact_prefix}'"
            )


@dataclass
class ResolveConfig:
    """Alias resolution settings."""
    forward_refs: str = ForwardRefPolicy.FALLBACK

    def __post_init__(self):
        """Validate and normalize the forward reference policy."""
        self.forward_refs = self.forward_refs.strip().lower()
        if self.forward_refs not in FORWARD_REF_POLICIES:
            raise ValueError(
                f"CFGALIAS_FORWARD_REFS must be one of {list(FORWARD_REF_POLICIES)}, "
                f"got '{self.forward_refs}'"
            )

    @property
    def strict(self) -> bool:
        """Check if forward references are rejected."""
        return self.forward_refs == ForwardRefPolicy.ERROR


@dataclass
class EmitConfig:
    """Signal emission settings."""
    signal_prefix: str = DEFAULT_SIGNAL_PREFIX

    def __post_init__(self):
        """Validate prefix."""
        if not self.signal_prefix:
            raise ValueError("CFGALIAS_SIGNAL_PREFIX must not be empty")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_dir: Optional[str] = None

    def __post_init__(self):
        """Validate log level."""
        self.level = self.level.upper()
        if self.level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {list(VALID_LOG_LEVELS)}, got '{self.level}'"
            )


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Load environment variables from multiple files
        # Priority: env_file > .env > cfgalias.env (later files override earlier)
        for env_name in ["cfgalias.env", ".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        # Initialize sub-configs
        self.facts = self._load_facts_config()
        self.resolve = self._load_resolve_config()
        self.emit = self._load_emit_config()
        self.log = self._load_log_config()

        self._initialized = True

    def _load_facts_config(self) -> FactsConfig:
        """Load facts prefixes from environment."""
        return FactsConfig(
            fact_prefix=os.getenv("CFGALIAS_FACT_PREFIX", DEFAULT_FACT_PREFIX),
            feature_prefix=os.getenv("CFGALIAS_FEATURE_PREFIX", DEFAULT_FEATURE_PREFIX),
        )

    def _load_resolve_config(self) -> ResolveConfig:
        """Load resolver settings from environment."""
        return ResolveConfig(
            forward_refs=os.getenv("CFGALIAS_FORWARD_REFS", ForwardRefPolicy.FALLBACK),
        )

    def _load_emit_config(self) -> EmitConfig:
        """Load emission settings from environment."""
        return EmitConfig(
            signal_prefix=os.getenv("CFGALIAS_SIGNAL_PREFIX", DEFAULT_SIGNAL_PREFIX),
        )

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("LOG_DIR") or None,
        )

    def to_dict(self) -> dict:
        """Summary of active settings for display."""
        return {
            "fact_prefix": self.facts.fact_prefix,
            "feature_prefix": self.facts.feature_prefix,
            "forward_refs": self.resolve.forward_refs,
            "signal_prefix": self.emit.signal_prefix,
            "log_level": self.log.level,
            "log_dir": self.log.log_dir,
        }


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config so the next get_config() reloads it."""
    Config._instance = None
