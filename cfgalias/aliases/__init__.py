"""
Alias batches: declaration files, batch evaluation and signal emission.
"""

from .declaration import (
    AliasDeclaration,
    parse_declarations,
    declarations_from_data,
    load_declarations,
)
from .batch import BatchResult, run_batch
from .emit import format_signal, emit_signals

__all__ = [
    "AliasDeclaration",
    "parse_declarations",
    "declarations_from_data",
    "load_declarations",
    "BatchResult",
    "run_batch",
    "format_signal",
    "emit_signals",
]
