"""
Leaf tests for DSL expressions.

Every leaf normalizes its identifier before asking the facts provider, so
the tree keeps the original spelling while `target-arch`, `Target_Arch`
and `TARGET_ARCH` all address the same fact.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dsl_nodes import Equals, FeaturePresent, FactFlag, Reference
from ...facts import normalize_key

if TYPE_CHECKING:
    from ...facts import FactsProvider


def eval_equals(expr: Equals, facts: "FactsProvider") -> bool:
    """key = "value": value is one of the fact's comma-separated values."""
    return expr.value in facts.lookup_fact(normalize_key(expr.key))


def eval_feature(expr: FeaturePresent, facts: "FactsProvider") -> bool:
    """feature = "name": the feature is enabled."""
    return facts.has_feature(normalize_key(expr.name))


def eval_fact_flag(expr: FactFlag | Reference, facts: "FactsProvider") -> bool:
    """
    Bare identifier bound to raw facts.

    True when any fact value is bound under the name or the name is an
    enabled feature. An unresolved Reference is tested the same way.
    """
    key = normalize_key(expr.name)
    return facts.has_fact(key) or facts.has_feature(key)
