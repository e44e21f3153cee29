"""Longest balanced (zero-sum) span search.

A span is *balanced* when its elements sum to zero.  The search returns
the longest balanced span; among equally long candidates the one that
starts at the highest index wins.

Two implementations share that contract:

* :func:`longest_balanced_span` — single pass over prefix sums, O(n).
* :func:`longest_balanced_span_quadratic` — exhaustive enumeration with
  a running sum, O(n²).  It states the tie-break rule literally and is
  the oracle the linear version is checked against.
"""

from __future__ import annotations

from collections.abc import Sequence

from balance_scan.core.models import Span


def longest_balanced_span(values: Sequence[int]) -> Span | None:
    """Return the longest balanced span of *values*, or ``None``.

    ``values[i:j]`` sums to zero exactly when the prefix sums before
    ``i`` and before ``j`` are equal, so the longest balanced span
    ending at ``j`` starts at the *first* index whose prefix sum equals
    the prefix sum at ``j``.

    Ends are visited in increasing order and a candidate replaces the
    best on ``>=``.  Two spans of the same length are ordered the same
    way by start and by end, so the last candidate kept is also the
    latest-starting one.
    """
    first_seen: dict[int, int] = {0: 0}
    best: Span | None = None
    prefix = 0
    for end, value in enumerate(values, start=1):
        prefix += value
        begin = first_seen.setdefault(prefix, end)
        if begin == end:
            continue
        if best is None or end - begin >= best.size:
            best = Span(begin, end)
    return best


def longest_balanced_span_quadratic(values: Sequence[int]) -> Span | None:
    """Exhaustive version of :func:`longest_balanced_span`.

    Starts and ends are enumerated in increasing order.  Equal-length
    candidates replace the current best, which leaves the latest start
    in place.
    """
    best: Span | None = None
    n = len(values)
    for begin in range(n):
        total = 0
        for end in range(begin + 1, n + 1):
            total += values[end - 1]
            if total != 0:
                continue
            if best is None or end - begin >= best.size:
                best = Span(begin, end)
    return best
