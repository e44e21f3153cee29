"""Dip detection over integer sequences.

A *dip* is three consecutive elements ``(a, b, c)`` where the outer two
are equal and the middle one is strictly smaller, e.g. ``8, 5, 8``.

Every function in this module is **pure**.  The input sequence is never
mutated.
"""

from __future__ import annotations

from collections.abc import Sequence


def is_dip(a: int, b: int, c: int) -> bool:
    """Return ``True`` when ``(a, b, c)`` forms a dip."""
    return a == c and b < a


def find_dip(values: Sequence[int]) -> int:
    """Return the start index of the **last** dip in *values*.

    When *values* holds no dip, the past-the-end position
    ``len(values)`` is returned instead.  Fewer than three elements can
    never hold a dip.

    Every consecutive triple is examined from left to right; a match
    overwrites any earlier one, so overlapping dips (``5, 1, 5, 1, 5``)
    are each considered and the highest-index one wins.
    """
    found = len(values)
    for i in range(len(values) - 2):
        if is_dip(values[i], values[i + 1], values[i + 2]):
            found = i
    return found
