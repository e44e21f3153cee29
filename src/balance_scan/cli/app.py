"""CLI application entry point and command routing for balance-scan.

This module is the **sole error boundary** for the entire application.
It catches :class:`~balance_scan.exceptions.BalanceScanError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Command results go to stdout; diagnostics go to stderr through the
  console proxy or the ``balance_scan`` logger.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from balance_scan.cli import exit_codes
from balance_scan.cli.console import configure_logging, console
from balance_scan.exceptions import BalanceScanError, InputError
from balance_scan.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``balance-scan dip <values...>``
    * ``balance-scan span <values...>``
    * ``balance-scan score <rubric.json> <results.xml>``
    * ``balance-scan bench [-n N] [--seed S]``
    * ``balance-scan --version``
    """
    from balance_scan.cli.bench import DEFAULT_BENCH_SIZE, DEFAULT_SEED

    parser = argparse.ArgumentParser(
        prog="balance-scan",
        description="Dip and balanced-span scanning over integer sequences.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    dip = commands.add_parser("dip", help="Find the last dip (a, b, a with b < a).")
    dip.add_argument("values", nargs="*", help="Integer sequence to scan.")

    span = commands.add_parser("span", help="Find the longest zero-sum span.")
    span.add_argument("values", nargs="*", help="Integer sequence to scan.")

    score = commands.add_parser(
        "score",
        help="Grade googletest XML results against a JSON rubric.",
    )
    score.add_argument("rubric", help="Path to the rubric JSON file.")
    score.add_argument("results", help="Path to the googletest XML report.")

    bench = commands.add_parser("bench", help="Time the algorithms on random input.")
    bench.add_argument(
        "-n",
        "--size",
        type=int,
        default=DEFAULT_BENCH_SIZE,
        help=f"Number of random values (default: {DEFAULT_BENCH_SIZE}).",
    )
    bench.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED}).",
    )
    return parser


def _parse_values(raw: Sequence[str]) -> list[int]:
    """Convert command-line tokens to integers.

    Tokens may also be comma separated (``8,2,8``).
    """
    values: list[int] = []
    for token in raw:
        for part in token.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                values.append(int(part))
            except ValueError as exc:
                raise InputError(
                    f"Not an integer: {part!r}",
                    hint="Pass whole numbers separated by spaces or commas.",
                ) from exc
    return values


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_dip(raw: Sequence[str]) -> int:
    """Print the index of the last dip, or ``not found``."""
    from balance_scan.core.dip import find_dip

    values = _parse_values(raw)
    index = find_dip(values)
    logger.debug("find_dip over %d value(s) returned %d", len(values), index)
    if index == len(values):
        print("not found")
    else:
        print(index)
    return exit_codes.SUCCESS


def _handle_span(raw: Sequence[str]) -> int:
    """Print the longest balanced span and its elements, or ``not found``."""
    from balance_scan.core.span_finder import longest_balanced_span

    values = _parse_values(raw)
    span = longest_balanced_span(values)
    if span is None:
        print("not found")
    else:
        elements = " ".join(str(value) for value in span.elements(values))
        print(f"{span}: {elements}")
    return exit_codes.SUCCESS


def _handle_score(rubric_path: str, results_path: str) -> int:
    """Load both inputs, score them, and print the report.

    Every input is loaded and the whole score evaluated before anything
    is printed.
    """
    from balance_scan.cli.report import print_score
    from balance_scan.core.rubric import evaluate_score
    from balance_scan.exceptions import ResultsLoadError, RubricLoadError
    from balance_scan.infra.results_loader import load_test_results
    from balance_scan.infra.rubric_loader import load_rubric

    try:
        rubric = load_rubric(rubric_path)
    except RubricLoadError as exc:
        raise RubricLoadError(
            f"error loading rubric JSON '{rubric_path}': {exc}",
            hint=exc.hint,
        ) from exc

    try:
        results = load_test_results(results_path)
    except ResultsLoadError as exc:
        raise ResultsLoadError(
            f"error loading googletest XML '{results_path}': {exc}",
            hint=exc.hint,
        ) from exc

    score = evaluate_score(rubric, results)
    print_score(score)
    return exit_codes.SUCCESS


def _handle_bench(size: int, seed: int) -> int:
    """Dispatch the ``bench`` timing command."""
    from balance_scan.cli.bench import run_bench

    return run_bench(size, seed)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the balance-scan CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    if args.command == "dip":
        return _handle_dip(args.values)
    if args.command == "span":
        return _handle_span(args.values)
    if args.command == "score":
        return _handle_score(args.rubric, args.results)
    return _handle_bench(args.size, args.seed)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BalanceScanError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
