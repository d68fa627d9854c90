"""
Evaluator tests.

Validates:
1. Vacuous all()/any()
2. Double negation
3. Short-circuit order (via RecordingFacts)
4. Equality over comma-separated fact values
5. Key normalization for fact and feature lookups
6. Raw fact flag fallback for bare identifiers
"""

import pytest

from cfgalias.facts import EnvFacts, StaticFacts
from cfgalias.rules import (
    AllExpr,
    AnyExpr,
    NotExpr,
    Equals,
    FeaturePresent,
    Reference,
    AliasRef,
    FactFlag,
    ExprEvaluator,
    evaluate_expression,
    parse_expr,
)
from tests.harness import RecordingFacts


FACT_SETS = [
    StaticFacts(),
    StaticFacts({"target_arch": "wasm32"}),
    StaticFacts({"unix": "", "target_os": "linux"}, features={"a", "b"}),
    EnvFacts(environ={}),
]


class TestVacuous:
    """all() and any() ignore facts entirely."""

    @pytest.mark.parametrize("facts", FACT_SETS)
    def test_empty_all_is_true(self, facts):
        assert evaluate_expression(AllExpr(()), facts) is True

    @pytest.mark.parametrize("facts", FACT_SETS)
    def test_empty_any_is_false(self, facts):
        assert evaluate_expression(AnyExpr(()), facts) is False


class TestDoubleNegation:
    """not(not(E)) == E."""

    @pytest.mark.parametrize("source", [
        "unix",
        'target_arch = "wasm32"',
        'feature = "a"',
        "any()",
        'all(unix, not(feature = "b"))',
    ])
    @pytest.mark.parametrize("facts", FACT_SETS)
    def test_not_not(self, source, facts):
        expr = parse_expr(source)
        assert evaluate_expression(NotExpr(NotExpr(expr)), facts) == evaluate_expression(expr, facts)


class TestShortCircuit:
    """Children after the deciding one are never evaluated."""

    def test_all_stops_at_first_false(self):
        facts = RecordingFacts()
        expr = parse_expr('all(feature = "a", feature = "b")')
        assert evaluate_expression(expr, facts) is False
        assert facts.keys() == ["a"]

    def test_all_evaluates_everything_when_true(self):
        facts = RecordingFacts(features={"a", "b"})
        expr = parse_expr('all(feature = "a", feature = "b")')
        assert evaluate_expression(expr, facts) is True
        assert facts.keys() == ["a", "b"]

    def test_any_stops_at_first_true(self, recording_facts):
        expr = parse_expr('any(feature = "a", feature = "b")')
        assert evaluate_expression(expr, recording_facts) is True
        assert recording_facts.keys() == ["a"]

    def test_any_evaluates_everything_when_false(self):
        facts = RecordingFacts()
        expr = parse_expr('any(feature = "a", x = "1", y)')
        assert evaluate_expression(expr, facts) is False
        assert facts.keys() == ["a", "x", "y"]

    def test_nested_short_circuit(self, recording_facts):
        expr = parse_expr('all(any(feature = "a", feature = "b"), not(feature = "a"), feature = "c")')
        assert evaluate_expression(expr, recording_facts) is False
        assert "b" not in recording_facts.keys()
        assert "c" not in recording_facts.keys()


class TestEquals:
    """key = "value" against multi-valued facts."""

    def test_single_value(self, wasm_facts):
        assert evaluate_expression(parse_expr('target_arch = "wasm32"'), wasm_facts)
        assert not evaluate_expression(parse_expr('target_arch = "x86_64"'), wasm_facts)

    def test_membership_in_comma_list(self, linux_facts):
        assert evaluate_expression(parse_expr('target_feature = "sse2"'), linux_facts)
        assert evaluate_expression(parse_expr('target_feature = "fxsr"'), linux_facts)

    def test_no_substring_match(self, linux_facts):
        assert not evaluate_expression(parse_expr('target_feature = "ss"'), linux_facts)
        assert not evaluate_expression(parse_expr('target_feature = "sse,sse2"'), linux_facts)

    def test_unknown_key_is_false(self, empty_facts):
        assert not evaluate_expression(parse_expr('target_arch = "wasm32"'), empty_facts)


class TestNormalization:
    """Identifier spellings that address the same fact."""

    @pytest.mark.parametrize("key", ["target_arch", "target-arch", "TARGET_ARCH", "Target-Arch"])
    def test_fact_keys(self, key, wasm_facts):
        assert evaluate_expression(Equals(key, "wasm32"), wasm_facts)

    def test_env_fact_keys(self):
        facts = EnvFacts(environ={"CARGO_CFG_TARGET_ARCH": "wasm32"})
        assert evaluate_expression(parse_expr('target-arch = "wasm32"'), facts)
        assert evaluate_expression(parse_expr('TARGET_ARCH = "wasm32"'), facts)

    def test_feature_names(self):
        facts = StaticFacts(features={"foo_bar"})
        assert evaluate_expression(FeaturePresent("foo-bar"), facts)
        assert evaluate_expression(FeaturePresent("FOO_BAR"), facts)

    def test_values_are_case_sensitive(self, wasm_facts):
        assert not evaluate_expression(Equals("target_arch", "WASM32"), wasm_facts)


class TestFactFlagFallback:
    """Bare identifiers not bound to an alias test raw facts."""

    def test_enabled_feature(self):
        facts = StaticFacts(features={"foo"})
        assert evaluate_expression(FactFlag("foo"), facts)

    def test_set_but_empty_fact(self, linux_facts):
        assert evaluate_expression(FactFlag("unix"), linux_facts)

    def test_valued_fact(self, linux_facts):
        assert evaluate_expression(FactFlag("target_os"), linux_facts)

    def test_unknown_name(self, linux_facts):
        assert not evaluate_expression(FactFlag("windows"), linux_facts)

    def test_unresolved_reference_behaves_like_flag(self):
        facts = StaticFacts({"unix": ""}, features={"foo"})
        assert evaluate_expression(Reference("unix"), facts)
        assert evaluate_expression(Reference("foo"), facts)
        assert not evaluate_expression(Reference("bar"), facts)

    def test_env_bare_flag(self):
        facts = EnvFacts(environ={"CARGO_CFG_UNIX": "", "CARGO_FEATURE_FOO": "1"})
        assert evaluate_expression(parse_expr("all(unix, foo)"), facts)


class TestAliasRef:
    """Bound aliases evaluate their target."""

    def test_evaluates_target(self, wasm_facts):
        wasm = Equals("target_arch", "wasm32")
        assert evaluate_expression(AliasRef("wasm", wasm), wasm_facts)
        assert not evaluate_expression(NotExpr(AliasRef("wasm", wasm)), wasm_facts)


class TestEvaluatorErrors:
    """Unknown node types are programming errors."""

    def test_unknown_node(self, empty_facts):
        with pytest.raises(TypeError):
            ExprEvaluator().evaluate("not an expression", empty_facts)
