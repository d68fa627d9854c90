"""
Batch pipeline: declarations in, signals out.

    parse each source -> register in order -> evaluate -> signals

Parse and resolution failures are collected per alias. A failed alias is
not registered and emits nothing; the rest of the batch carries on.

Usage:
    result = run_batch(
        [("wasm", 'target_arch = "wasm32"'), ("dummy", "not(wasm)")],
        StaticFacts({"target_arch": "wasm32"}),
    )
    result.signals          # ["wasm"]
    result.signal_lines()   # ["alias-signal=wasm"]
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from ..rules.dsl_nodes import Expr
from ..rules.dsl_parser import parse_expr
from ..rules.errors import ExprSyntaxError, CyclicOrForwardReferenceError
from ..rules.evaluation import ExprEvaluator
from ..rules.resolver import AliasFailure, AliasRegistry, AliasResolver
from ..utils.logger import get_logger
from .declaration import AliasDeclaration
from .emit import format_signal

if TYPE_CHECKING:
    from ..facts import FactsProvider


DeclarationLike = Union[AliasDeclaration, tuple[str, str]]


@dataclass
class BatchResult:
    """
    Outcome of one batch run.

    Attributes:
        values: (name, value) for every registered alias, in declaration order
        signals: Names that evaluated true, deduplicated in first-true order
        failures: Per-alias parse/resolution failures, in declaration order
        registry: The registry built for this run
    """
    values: list[tuple[str, bool]] = field(default_factory=list)
    signals: list[str] = field(default_factory=list)
    failures: list[AliasFailure] = field(default_factory=list)
    registry: AliasRegistry = field(default_factory=AliasRegistry)

    @property
    def ok(self) -> bool:
        """Check if every declaration parsed and resolved."""
        return not self.failures

    def value_of(self, name: str) -> bool | None:
        """Value of the latest registered alias named `name`, if any."""
        for alias_name, value in reversed(self.values):
            if alias_name == name:
                return value
        return None

    def signal_lines(self, prefix: str | None = None) -> list[str]:
        """Emission lines for the true aliases."""
        return [format_signal(name, prefix) for name in self.signals]

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "ok": self.ok,
            "values": [{"name": n, "value": v} for n, v in self.values],
            "signals": list(self.signals),
            "failures": [f.to_dict() for f in self.failures],
        }


def _as_pair(decl: DeclarationLike) -> tuple[str, str]:
    if isinstance(decl, AliasDeclaration):
        return decl.as_pair()
    if isinstance(decl, tuple) and len(decl) == 2:
        return (decl[0], decl[1])
    raise TypeError(
        f"Expected AliasDeclaration or (name, source) pair, got {type(decl).__name__}"
    )


def run_batch(
    declarations: Iterable[DeclarationLike],
    facts: "FactsProvider",
    forward_refs: str | None = None,
) -> BatchResult:
    """
    Parse, resolve and evaluate a batch of alias declarations.

    Args:
        declarations: Ordered (name, source) pairs or AliasDeclarations.
        facts: Facts snapshot to evaluate against.
        forward_refs: "fallback" or "error"; None reads the global config.

    Returns:
        BatchResult with values, signals and failures.
    """
    logger = get_logger()
    pairs = [_as_pair(d) for d in declarations]

    # Parse everything first so the resolver can see later declarations
    parsed: list[tuple[str, Expr | None]] = []
    failures: list[AliasFailure] = []
    for i, (name, source) in enumerate(pairs):
        try:
            parsed.append((name, parse_expr(source)))
        except ExprSyntaxError as e:
            parsed.append((name, None))
            failures.append(AliasFailure(name=name, index=i, error=e))

    resolver = AliasResolver(forward_refs=forward_refs)
    for i, (name, expr) in enumerate(parsed):
        if expr is None:
            resolver.mark_failed(name)
            continue
        try:
            resolver.register(
                name, expr, source=pairs[i][1], index=i, pending=parsed[i + 1:]
            )
        except CyclicOrForwardReferenceError as e:
            failures.append(AliasFailure(name=name, index=i, error=e))

    failures.sort(key=lambda f: f.index)
    for failure in failures:
        logger.failure(failure.name, failure.kind, str(failure.error))

    result = BatchResult(failures=failures, registry=resolver.registry)
    evaluator = ExprEvaluator()
    seen: set[str] = set()
    for alias in resolver.registry:
        value = evaluator.evaluate(alias.expression, facts)
        result.values.append((alias.name, value))
        logger.alias(alias.name, value, index=alias.index)
        if value and alias.name not in seen:
            seen.add(alias.name)
            result.signals.append(alias.name)

    logger.info(
        f"Evaluated {len(result.values)} aliases: "
        f"{len(result.signals)} true, {len(failures)} failed"
    )
    return result


__all__ = [
    "BatchResult",
    "DeclarationLike",
    "run_batch",
]
