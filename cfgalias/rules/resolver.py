"""
Alias Resolver: name binding for alias declarations.

Aliases are registered strictly in declaration order. While an alias is
registered every bare-identifier Reference in its tree is bound once:

1. The name matches an alias already in the registry (declared earlier
   and registered successfully): bind to that alias's expression object
   (AliasRef). A later re-declaration of the name does not affect it.
2. Otherwise: bind to a raw fact flag test (FactFlag), looked up against
   facts at evaluation time.

Errors (CyclicOrForwardReferenceError, reported for the alias being
registered only):
- "self": the alias names itself and no earlier alias of that name exists
- "cycle": a forward reference to a later alias whose definition, bound by
  the same rules, leads back to the alias being registered
- "forward": any reference to a later-declared name, strict mode only

In fallback mode a non-cyclic forward reference degrades to a raw fact
lookup and a warning is logged.

Usage:
    resolver = AliasResolver()
    resolver.register("wasm", parse_expr('target_arch = "wasm32"'))
    resolver.register("dummy", parse_expr("not(wasm)"))
    registry = resolver.registry
"""

from __future__ import annotations

from collections.abc import Container, Iterator, Sequence
from dataclasses import dataclass

from .dsl_nodes import (
    Expr, AllExpr, AnyExpr, NotExpr,
    Reference, AliasRef, FactFlag,
    get_referenced_names, expr_to_source,
)
from .errors import AliasError, CyclicOrForwardReferenceError
from ..config import ForwardRefPolicy, FORWARD_REF_POLICIES
from ..utils.logger import get_logger


# Pending declaration: (name, parsed expression or None when parsing failed)
PendingDecl = tuple[str, "Expr | None"]


@dataclass(frozen=True)
class Alias:
    """
    A registered alias.

    Attributes:
        name: Alias identifier
        expression: Resolved expression tree (no unresolved References)
        source: Original expression source text, if known
        index: Position in the declaration batch
    """
    name: str
    expression: Expr
    source: str = ""
    index: int = 0

    def __repr__(self) -> str:
        return f"Alias({self.name!r}, {self.expression!r})"


@dataclass(frozen=True)
class AliasFailure:
    """
    A declaration that could not be parsed or resolved.

    Attributes:
        name: Alias identifier
        index: Position in the declaration batch
        error: The parse or resolution error
    """
    name: str
    index: int
    error: AliasError

    @property
    def kind(self) -> str:
        """Error class name for reporting."""
        return type(self.error).__name__

    def to_dict(self) -> dict:
        """Convert to dict for logging/serialization."""
        return {
            "name": self.name,
            "index": self.index,
            "kind": self.kind,
            "message": str(self.error),
        }


class AliasRegistry:
    """
    Run-scoped ordered collection of registered aliases.

    Keeps every alias in declaration order (re-declarations included) and a
    name lookup that always returns the latest registration.
    """

    def __init__(self) -> None:
        self._aliases: list[Alias] = []
        self._by_name: dict[str, Alias] = {}

    def register(self, alias: Alias) -> None:
        """Append an alias; it shadows earlier aliases of the same name."""
        self._aliases.append(alias)
        self._by_name[alias.name] = alias

    def get(self, name: str) -> Alias | None:
        """Latest alias registered under `name`, if any."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        """Distinct alias names in first-declaration order."""
        return list(dict.fromkeys(a.name for a in self._aliases))

    @property
    def aliases(self) -> tuple[Alias, ...]:
        return tuple(self._aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Alias]:
        return iter(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasRegistry({[a.name for a in self._aliases]})"


class AliasResolver:
    """
    Registers aliases in order and binds their references.

    Attributes:
        forward_refs: "fallback" or "error" (see module docstring)
        registry: The registry being built
    """

    def __init__(
        self,
        forward_refs: str | None = None,
        registry: AliasRegistry | None = None,
    ):
        if forward_refs is None:
            from ..config import get_config
            forward_refs = get_config().resolve.forward_refs
        forward_refs = forward_refs.strip().lower()
        if forward_refs not in FORWARD_REF_POLICIES:
            raise ValueError(
                f"forward_refs must be one of {list(FORWARD_REF_POLICIES)}, got '{forward_refs}'"
            )
        self.forward_refs = forward_refs
        self.registry = registry if registry is not None else AliasRegistry()
        self._failed: set[str] = set()

    @property
    def strict(self) -> bool:
        """Check if forward references are rejected."""
        return self.forward_refs == ForwardRefPolicy.ERROR

    def mark_failed(self, name: str) -> None:
        """Record a declaration that never made it into the registry."""
        self._failed.add(name)

    def register(
        self,
        name: str,
        expr: Expr,
        *,
        source: str = "",
        index: int | None = None,
        pending: Sequence[PendingDecl] = (),
    ) -> Alias:
        """
        Bind references in `expr` and register it as alias `name`.

        Args:
            name: Alias name.
            expr: Parsed (unresolved) expression.
            source: Original source text, kept for reporting.
            index: Batch position; defaults to the registry size.
            pending: Declarations that follow this one in the batch, in
                order. Used to tell forward references from raw facts.

        Returns:
            The registered Alias.

        Raises:
            CyclicOrForwardReferenceError: On self, cyclic or (strict mode)
                forward references. The alias is not registered.
        """
        logger = get_logger()
        if index is None:
            index = len(self.registry)

        try:
            self._check_references(name, expr, pending)
        except CyclicOrForwardReferenceError:
            self.mark_failed(name)
            raise

        resolved = self._bind(expr, name, pending)
        alias = Alias(name=name, expression=resolved, source=source, index=index)
        self.registry.register(alias)
        logger.debug(f"Registered alias '{name}' [{index}]: {expr_to_source(expr)}")
        return alias

    # -------------------------------------------------------------------------
    # Reference checks
    # -------------------------------------------------------------------------

    def _check_references(
        self,
        name: str,
        expr: Expr,
        pending: Sequence[PendingDecl],
    ) -> None:
        pending_names = [p[0] for p in pending]
        for ref in get_referenced_names(expr):
            if ref in self.registry:
                continue
            if ref == name:
                raise CyclicOrForwardReferenceError(name, ref, "self")
            if ref not in pending_names:
                continue
            if self.strict:
                raise CyclicOrForwardReferenceError(name, ref, "forward")
            chain = _find_cycle(name, pending_names.index(ref), pending, self.registry)
            if chain is not None:
                raise CyclicOrForwardReferenceError(name, ref, "cycle", chain)

    def _bind(self, expr: Expr, name: str, pending: Sequence[PendingDecl]) -> Expr:
        """Build a new tree with every Reference bound."""
        if isinstance(expr, AllExpr):
            return AllExpr(tuple(self._bind(c, name, pending) for c in expr.children))
        if isinstance(expr, AnyExpr):
            return AnyExpr(tuple(self._bind(c, name, pending) for c in expr.children))
        if isinstance(expr, NotExpr):
            return NotExpr(self._bind(expr.child, name, pending))
        if isinstance(expr, Reference):
            target = self.registry.get(expr.name)
            if target is not None:
                return AliasRef(name=expr.name, target=target.expression)
            logger = get_logger()
            if any(p[0] == expr.name for p in pending):
                logger.warning(
                    f"Alias '{name}' references '{expr.name}' before it is declared; "
                    f"treating it as a raw fact"
                )
            elif expr.name in self._failed:
                logger.warning(
                    f"Alias '{name}' references failed alias '{expr.name}'; "
                    f"treating it as a raw fact"
                )
            return FactFlag(name=expr.name)
        return expr


def _find_cycle(
    origin: str,
    start: int,
    pending: Sequence[PendingDecl],
    registered: Container[str],
) -> list[str] | None:
    """
    Look for a dependency path from pending[start] back to `origin`.

    `origin` is being registered just before pending[0]. A pending
    declaration at position j binds a name to the nearest declaration
    before it (pending[:j], then origin, then `registered`). Names not yet
    declared at j are followed forward to their next declaration as well.

    Returns:
        Alias names along the cycle (origin first and last), or None.
    """
    visited: set[int] = set()

    def _visit(j: int, path: list[str]) -> list[str] | None:
        if j in visited:
            return None
        visited.add(j)
        decl_name, decl_expr = pending[j]
        if decl_expr is None:
            return None
        path = path + [decl_name]
        for ref in get_referenced_names(decl_expr):
            earlier = next(
                (t for t in range(j - 1, -1, -1) if pending[t][0] == ref), None
            )
            if earlier is not None:
                found = _visit(earlier, path)
            elif ref == origin:
                return path + [origin]
            elif ref == decl_name or ref in registered:
                continue
            else:
                later = next(
                    (t for t in range(j + 1, len(pending)) if pending[t][0] == ref), None
                )
                found = _visit(later, path) if later is not None else None
            if found is not None:
                return found
        return None

    return _visit(start, [origin])


def build_registry(
    declarations: Sequence[tuple[str, Expr]],
    forward_refs: str | None = None,
) -> tuple[AliasRegistry, list[AliasFailure]]:
    """
    Register a batch of parsed declarations in order.

    Args:
        declarations: Ordered (name, expression) pairs.
        forward_refs: "fallback" or "error"; None reads the global config.

    Returns:
        Tuple of (registry, failures). Failed aliases are left out of the
        registry; the rest are registered independently.
    """
    resolver = AliasResolver(forward_refs=forward_refs)
    failures: list[AliasFailure] = []
    for i, (name, expr) in enumerate(declarations):
        try:
            resolver.register(name, expr, index=i, pending=declarations[i + 1:])
        except CyclicOrForwardReferenceError as e:
            failures.append(AliasFailure(name=name, index=i, error=e))
    return resolver.registry, failures


__all__ = [
    "Alias",
    "AliasFailure",
    "AliasRegistry",
    "AliasResolver",
    "build_registry",
]
