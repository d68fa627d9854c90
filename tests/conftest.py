"""
Pytest configuration for cfgalias tests.
"""

import pytest

from cfgalias.config import reset_config
from cfgalias.facts import StaticFacts
from cfgalias.utils.logger import setup_logger
from tests.harness import RecordingFacts


CONFIG_ENV_VARS = (
    "CFGALIAS_FACT_PREFIX",
    "CFGALIAS_FEATURE_PREFIX",
    "CFGALIAS_FORWARD_REFS",
    "CFGALIAS_SIGNAL_PREFIX",
    "LOG_LEVEL",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Default config per test: no config env vars, no .env files in cwd."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    setup_logger(log_level="WARNING")
    yield
    reset_config()


@pytest.fixture
def empty_facts() -> StaticFacts:
    """No facts, no features."""
    return StaticFacts()


@pytest.fixture
def wasm_facts() -> StaticFacts:
    """wasm32 target with a couple of features."""
    return StaticFacts(
        {"target_arch": "wasm32", "target_os": "unknown", "target_feature": "simd128"},
        features={"glutin", "serde"},
    )


@pytest.fixture
def linux_facts() -> StaticFacts:
    """x86_64 Linux target with the unix flag set."""
    return StaticFacts(
        {
            "target_arch": "x86_64",
            "target_os": "linux",
            "target_family": "unix",
            "target_feature": "sse,sse2,fxsr",
            "unix": "",
        },
        features={"surfman"},
    )


@pytest.fixture
def recording_facts() -> RecordingFacts:
    """Recording stub with feature 'a' enabled and nothing else."""
    return RecordingFacts(features={"a"})
