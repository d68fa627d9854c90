"""
Configuration tests.
"""

import pytest

from cfgalias.config import (
    Config,
    EmitConfig,
    FactsConfig,
    LogConfig,
    ResolveConfig,
    get_config,
    reset_config,
)


class TestDefaults:
    """No environment overrides."""

    def test_defaults(self):
        config = get_config()
        assert config.facts.fact_prefix == "CARGO_CFG_"
        assert config.facts.feature_prefix == "CARGO_FEATURE_"
        assert config.resolve.forward_refs == "fallback"
        assert config.resolve.strict is False
        assert config.emit.signal_prefix == "alias-signal="
        assert config.log.level == "WARNING"
        assert config.log.log_dir is None

    def test_singleton(self):
        assert get_config() is get_config()
        assert Config() is get_config()

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_to_dict(self):
        data = get_config().to_dict()
        assert data["forward_refs"] == "fallback"
        assert data["signal_prefix"] == "alias-signal="


class TestEnvironment:
    """Environment variables and .env files."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CFGALIAS_FORWARD_REFS", "ERROR")
        monkeypatch.setenv("CFGALIAS_SIGNAL_PREFIX", "cargo:rustc-cfg=")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = get_config()
        assert config.resolve.forward_refs == "error"
        assert config.resolve.strict is True
        assert config.emit.signal_prefix == "cargo:rustc-cfg="
        assert config.log.level == "DEBUG"

    def test_dotenv_file(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CFGALIAS_SIGNAL_PREFIX=from-dotenv=\n", encoding="utf-8")
        # Register for cleanup; load_dotenv writes os.environ directly
        monkeypatch.setenv("CFGALIAS_SIGNAL_PREFIX", "")
        monkeypatch.delenv("CFGALIAS_SIGNAL_PREFIX")
        assert get_config().emit.signal_prefix == "from-dotenv="

    def test_invalid_value(self, monkeypatch):
        monkeypatch.setenv("CFGALIAS_FORWARD_REFS", "maybe")
        with pytest.raises(ValueError):
            get_config()


class TestValidation:
    """Sub-config validation."""

    def test_prefixes_must_differ(self):
        with pytest.raises(ValueError):
            FactsConfig(fact_prefix="X_", feature_prefix="X_")

    def test_empty_prefixes(self):
        with pytest.raises(ValueError):
            FactsConfig(fact_prefix="")
        with pytest.raises(ValueError):
            EmitConfig(signal_prefix="")

    def test_policy_normalized(self):
        assert ResolveConfig(forward_refs=" Fallback ").forward_refs == "fallback"

    def test_bad_log_level(self):
        with pytest.raises(ValueError):
            LogConfig(level="LOUD")
