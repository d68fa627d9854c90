"""
Facts provider tests.

Validates:
1. EnvFacts variable naming (CARGO_CFG_* / CARGO_FEATURE_*)
2. EnvFacts is a snapshot of the environment
3. StaticFacts value coercion and key normalization
4. YAML facts file loading
"""

import pytest

from cfgalias.config import reset_config
from cfgalias.facts import (
    EnvFacts,
    StaticFacts,
    env_var_name,
    load_facts,
    normalize_key,
)


ENVIRON = {
    "CARGO_CFG_TARGET_ARCH": "wasm32",
    "CARGO_CFG_TARGET_FEATURE": "sse,sse2",
    "CARGO_CFG_UNIX": "",
    "CARGO_FEATURE_GLUTIN": "1",
    "CARGO_FEATURE_SERDE_JSON": "1",
    "CARGO_FEATURE_DISABLED": "0",
    "PATH": "/usr/bin",
}


class TestNormalizeKey:
    """Lookup key normalization."""

    @pytest.mark.parametrize("raw, expected", [
        ("target_arch", "target_arch"),
        ("target-arch", "target_arch"),
        ("TARGET_ARCH", "target_arch"),
        (" Target-Arch ", "target_arch"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_key(raw) == expected

    def test_env_var_name(self):
        assert env_var_name("CARGO_CFG_", "target-arch") == "CARGO_CFG_TARGET_ARCH"
        assert env_var_name("CARGO_FEATURE_", "serde-json") == "CARGO_FEATURE_SERDE_JSON"


class TestEnvFacts:
    """Environment-backed facts."""

    def test_lookup_splits_on_comma(self):
        facts = EnvFacts(environ=ENVIRON)
        assert facts.lookup_fact("target_arch") == frozenset({"wasm32"})
        assert facts.lookup_fact("target_feature") == frozenset({"sse", "sse2"})

    def test_unknown_fact_is_empty(self):
        facts = EnvFacts(environ=ENVIRON)
        assert facts.lookup_fact("target_os") == frozenset()
        assert not facts.has_fact("target_os")

    def test_set_but_empty_flag(self):
        facts = EnvFacts(environ=ENVIRON)
        assert facts.has_fact("unix")

    def test_features_require_value_one(self):
        facts = EnvFacts(environ=ENVIRON)
        assert facts.has_feature("glutin")
        assert facts.has_feature("serde-json")
        assert not facts.has_feature("disabled")
        assert not facts.has_feature("missing")

    def test_snapshot_at_construction(self):
        environ = {"CARGO_CFG_TARGET_OS": "linux"}
        facts = EnvFacts(environ=environ)
        environ["CARGO_CFG_TARGET_OS"] = "windows"
        environ["CARGO_FEATURE_LATE"] = "1"
        assert facts.lookup_fact("target_os") == frozenset({"linux"})
        assert not facts.has_feature("late")

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CARGO_CFG_TARGET_ENDIAN", "little")
        facts = EnvFacts()
        assert facts.lookup_fact("target_endian") == frozenset({"little"})

    def test_custom_prefixes(self):
        facts = EnvFacts(
            environ={"MY_CFG_OS": "linux", "MY_FEAT_FAST": "1"},
            fact_prefix="MY_CFG_",
            feature_prefix="MY_FEAT_",
        )
        assert facts.lookup_fact("os") == frozenset({"linux"})
        assert facts.has_feature("fast")

    def test_from_config(self, monkeypatch):
        monkeypatch.setenv("CFGALIAS_FACT_PREFIX", "BUILD_CFG_")
        reset_config()
        facts = EnvFacts.from_config(environ={"BUILD_CFG_OS": "linux"})
        assert facts.fact_prefix == "BUILD_CFG_"
        assert facts.lookup_fact("os") == frozenset({"linux"})

    def test_listing(self):
        facts = EnvFacts(environ=ENVIRON)
        assert facts.fact_keys() == ["target_arch", "target_feature", "unix"]
        assert facts.enabled_features() == ["glutin", "serde_json"]


class TestStaticFacts:
    """In-memory facts."""

    def test_string_values_split(self):
        facts = StaticFacts({"target_feature": "sse,sse2"})
        assert facts.lookup_fact("target_feature") == frozenset({"sse", "sse2"})

    def test_value_coercion(self):
        facts = StaticFacts({"list": ["a", "b"], "flag": None, "yes": True, "num": 64})
        assert facts.lookup_fact("list") == frozenset({"a", "b"})
        assert facts.lookup_fact("flag") == frozenset({""})
        assert facts.lookup_fact("yes") == frozenset({"true"})
        assert facts.lookup_fact("num") == frozenset({"64"})
        assert facts.has_fact("flag")

    def test_keys_normalized(self):
        facts = StaticFacts({"Target-Arch": "x86"}, features={"Serde-Json"})
        assert facts.lookup_fact("target_arch") == frozenset({"x86"})
        assert facts.has_feature("serde_json")
        assert facts.fact_keys() == ["target_arch"]

    def test_to_dict(self):
        facts = StaticFacts({"os": "linux"}, features={"b", "a"})
        assert facts.to_dict() == {"facts": {"os": ["linux"]}, "features": ["a", "b"]}


class TestLoadFacts:
    """YAML facts files."""

    def test_load(self, tmp_path):
        path = tmp_path / "facts.yml"
        path.write_text(
            "facts:\n"
            "  target_arch: wasm32\n"
            "  target_feature: [simd128, atomics]\n"
            "  unix: ''\n"
            "features:\n"
            "  - glutin\n",
            encoding="utf-8",
        )
        facts = load_facts(path)
        assert facts.lookup_fact("target_arch") == frozenset({"wasm32"})
        assert facts.lookup_fact("target_feature") == frozenset({"simd128", "atomics"})
        assert facts.has_fact("unix")
        assert facts.has_feature("glutin")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "facts.yml"
        path.write_text("", encoding="utf-8")
        facts = load_facts(path)
        assert facts.fact_keys() == []
        assert facts.enabled_features() == []

    @pytest.mark.parametrize("content", [
        "- a\n- b\n",
        "facts: [a, b]\n",
        "features: glutin\n",
        "facts:\n  1: x\n",
        "facts:\n  true: x\n",
        "facts:\n  null: x\n",
        "facts: [unclosed\n",
    ])
    def test_bad_shape(self, tmp_path, content):
        path = tmp_path / "facts.yml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ValueError):
            load_facts(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_facts(tmp_path / "nope.yml")
