"""``balance-scan bench`` — wall-clock timing of the scanning algorithms.

Builds one reproducible random input and times a single call of each
algorithm on it.  Intended for gathering rough scaling data by running
it repeatedly with different ``-n`` values.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Sequence
from typing import Any

from balance_scan.cli import exit_codes
from balance_scan.cli.report import RULE_WIDTH
from balance_scan.core.dip import find_dip
from balance_scan.core.span_finder import (
    longest_balanced_span,
    longest_balanced_span_quadratic,
)
from balance_scan.exceptions import BenchConfigError

logger = logging.getLogger(__name__)

DEFAULT_BENCH_SIZE: int = 2000
DEFAULT_SEED: int = 0
VALUE_RANGE: tuple[int, int] = (-100, 100)

ALGORITHMS: tuple[tuple[str, Callable[[Sequence[int]], Any]], ...] = (
    ("find dip", find_dip),
    ("longest balanced span", longest_balanced_span),
    ("longest balanced span (quadratic)", longest_balanced_span_quadratic),
)


def generate_input(
    n: int,
    seed: int = DEFAULT_SEED,
    low: int = VALUE_RANGE[0],
    high: int = VALUE_RANGE[1],
) -> list[int]:
    """Return *n* integers drawn uniformly from ``[low, high]``.

    The same *seed* always yields the same list.
    """
    if n <= 0:
        raise BenchConfigError(
            f"Input size must be positive, got {n}.",
            hint="Pass a positive value with -n.",
        )
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(n)]


def time_call(fn: Callable[[Sequence[int]], Any], values: Sequence[int]) -> float:
    """Return the seconds spent in one call ``fn(values)``."""
    start = time.perf_counter()
    fn(values)
    return time.perf_counter() - start


def collect_timings(values: Sequence[int]) -> list[tuple[str, float]]:
    """Time every entry of :data:`ALGORITHMS` on *values*."""
    timings: list[tuple[str, float]] = []
    for label, fn in ALGORITHMS:
        elapsed = time_call(fn, values)
        logger.debug("%s took %.6f s", label, elapsed)
        timings.append((label, elapsed))
    return timings


def run_bench(n: int = DEFAULT_BENCH_SIZE, seed: int = DEFAULT_SEED) -> int:
    """Generate the input, time each algorithm, and print the results.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.
    """
    values = generate_input(n, seed)
    bar = "-" * RULE_WIDTH

    print(bar)
    print(f"n = {n}")
    for label, elapsed in collect_timings(values):
        print(bar)
        print(label)
        print(f"elapsed time={elapsed:.6f} seconds")
    print(bar)
    return exit_codes.SUCCESS
