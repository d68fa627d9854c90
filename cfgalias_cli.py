#!/usr/bin/env python3
"""
cfgalias - Alias Signal CLI

Reads a batch of alias declarations, evaluates them against build
configuration facts and prints one signal line per true alias.

This is a PURE SHELL - it only:
- Loads declarations and facts
- Calls run_batch
- Prints results

stdout carries signal lines only. Failures, explain trees and logs go to
stderr.

Exit codes:
  0  every alias parsed and resolved
  1  one or more aliases failed
  2  declarations, facts or configuration could not be loaded
"""

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from cfgalias.config import get_config, ForwardRefPolicy
from cfgalias.utils.logger import setup_logger
from cfgalias.facts import EnvFacts, load_facts
from cfgalias.aliases import (
    parse_declarations,
    load_declarations,
    run_batch,
    emit_signals,
)
from cfgalias.rules import AliasError, explain


# Human-readable output goes to stderr
console = Console(stderr=True)


def parse_cli_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments for cfgalias_cli."""
    parser = argparse.ArgumentParser(
        description="cfgalias - named boolean aliases over build configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cfgalias_cli.py aliases.cfg                    # Facts from CARGO_CFG_*/CARGO_FEATURE_*
  python cfgalias_cli.py aliases.yml --facts facts.yml  # Facts from a YAML snapshot
  python cfgalias_cli.py - --strict < aliases.cfg       # Reject forward references
  python cfgalias_cli.py aliases.cfg --explain          # Show how each alias evaluated
        """
    )

    parser.add_argument(
        "declarations",
        help="Declaration file (.yml/.yaml or text syntax), or '-' for stdin"
    )
    parser.add_argument(
        "--facts",
        default=None,
        help="YAML facts file (default: read facts from the environment)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=False,
        help="Treat any reference to a later-declared alias as an error"
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        default=False,
        help="Emit signals for the aliases that succeeded even if others failed"
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        default=False,
        help="Print an evaluation tree per alias on stderr"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Logging level (default: LOG_LEVEL or WARNING)"
    )

    return parser.parse_args(argv)


def _read_declarations(source: str):
    if source == "-":
        return parse_declarations(sys.stdin.read())
    return load_declarations(source)


def _build_trace_tree(trace, tree: Tree) -> None:
    for child in trace.children:
        branch = tree.add(_trace_label(child))
        _build_trace_tree(child, branch)


def _trace_label(trace) -> str:
    label = escape(trace.label)
    if trace.skipped:
        return f"[dim]{label} (skipped)[/]"
    if trace.value:
        return f"[green]{label} = true[/]"
    return f"[red]{label} = false[/]"


def print_explain(result, facts) -> None:
    """Print one evaluation tree per registered alias."""
    for alias in result.registry:
        trace = explain(alias.expression, facts)
        tree = Tree(f"[bold]{alias.name}[/] {_trace_label(trace)}")
        _build_trace_tree(trace, tree)
        console.print(tree)


def print_failures(result) -> None:
    """Print per-alias failures as a table."""
    table = Table(title="Alias Failures", title_style="bold red")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Alias", style="cyan")
    table.add_column("Error", style="yellow")
    table.add_column("Message")
    for failure in result.failures:
        table.add_row(str(failure.index), failure.name, failure.kind, escape(str(failure.error)))
    console.print(table)


def main(argv=None) -> int:
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = parse_cli_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[bold red]Configuration error:[/] {escape(str(e))}")
        return 2

    setup_logger(log_dir=config.log.log_dir, log_level=args.log_level or config.log.level)

    try:
        declarations = _read_declarations(args.declarations)
        facts = load_facts(args.facts) if args.facts else EnvFacts.from_config()
    except (OSError, ValueError) as e:
        # DeclarationError is an AliasError, which is a ValueError
        label = "Declaration error" if isinstance(e, AliasError) else "Load error"
        console.print(f"[bold red]{label}:[/] {escape(str(e))}")
        return 2

    forward_refs = ForwardRefPolicy.ERROR if args.strict else None
    result = run_batch(declarations, facts, forward_refs=forward_refs)

    if args.explain:
        print_explain(result, facts)

    if not result.ok:
        print_failures(result)
        if not args.keep_going:
            console.print("[red]No signals emitted (use --keep-going to emit the rest)[/]")
            return 1

    emit_signals(result.signals, stream=sys.stdout, prefix=config.emit.signal_prefix)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
