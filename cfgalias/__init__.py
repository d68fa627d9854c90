"""
cfgalias - named boolean aliases over build configuration facts.

Declare a complex condition once, give it a short name, and emit a signal
line for every alias that holds:

    from cfgalias import run_batch, StaticFacts

    result = run_batch(
        [("wasm", 'target_arch = "wasm32"'), ("native", "not(wasm)")],
        StaticFacts({"target_arch": "x86_64"}),
    )
    result.signal_lines()  # ["alias-signal=native"]
"""

__version__ = "0.1.0"

from .rules import (
    AliasError,
    ExprSyntaxError,
    DeclarationError,
    CyclicOrForwardReferenceError,
    parse_expr,
    AliasResolver,
    build_registry,
    ExprEvaluator,
    evaluate_expression,
    explain,
)
from .facts import FactsProvider, EnvFacts, StaticFacts, load_facts
from .aliases import (
    AliasDeclaration,
    parse_declarations,
    load_declarations,
    BatchResult,
    run_batch,
    format_signal,
    emit_signals,
)

__all__ = [
    "__version__",
    "AliasError",
    "ExprSyntaxError",
    "DeclarationError",
    "CyclicOrForwardReferenceError",
    "parse_expr",
    "AliasResolver",
    "build_registry",
    "ExprEvaluator",
    "evaluate_expression",
    "explain",
    "FactsProvider",
    "EnvFacts",
    "StaticFacts",
    "load_facts",
    "AliasDeclaration",
    "parse_declarations",
    "load_declarations",
    "BatchResult",
    "run_batch",
    "format_signal",
    "emit_signals",
]
