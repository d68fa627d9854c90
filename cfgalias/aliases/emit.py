"""
Signal emission.

Every alias that evaluates true becomes one line on stdout:

    alias-signal=<name>

The prefix comes from CFGALIAS_SIGNAL_PREFIX when not given explicitly.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


def _default_prefix() -> str:
    from ..config import get_config
    return get_config().emit.signal_prefix


def format_signal(name: str, prefix: str | None = None) -> str:
    """Format the emission line for one alias (no newline)."""
    if prefix is None:
        prefix = _default_prefix()
    return f"{prefix}{name}"


def emit_signals(
    names: Iterable[str],
    stream: TextIO | None = None,
    prefix: str | None = None,
) -> list[str]:
    """
    Write one signal line per alias name.

    Names are deduplicated, keeping first-occurrence order.

    Args:
        names: Aliases that evaluated true.
        stream: Output stream (default: sys.stdout).
        prefix: Line prefix (default: configured signal prefix).

    Returns:
        The lines written, without newlines.
    """
    if stream is None:
        stream = sys.stdout
    if prefix is None:
        prefix = _default_prefix()

    lines = [format_signal(name, prefix) for name in dict.fromkeys(names)]
    for line in lines:
        stream.write(line + "\n")
    stream.flush()
    return lines


__all__ = [
    "format_signal",
    "emit_signals",
]
