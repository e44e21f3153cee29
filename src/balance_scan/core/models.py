"""Domain models for balance-scan.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a few derived properties.  They carry
zero I/O, zero dependencies on external packages, and must remain pure
across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Span over an integer sequence
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Span:
    """A non-empty half-open range ``[begin, end)`` of sequence indices.

    A span is a pair of positions, not a copy: it does not hold on to
    the sequence it was computed from and is only meaningful while that
    sequence is unchanged.  Two spans are equal iff both positions are
    equal.

    Raises
    ------
    ValueError
        If ``begin`` is negative or ``end`` does not come after ``begin``.
    """

    begin: int
    """Index of the first element inside the span."""

    end: int
    """Index one past the last element inside the span."""

    def __post_init__(self) -> None:
        if self.begin < 0 or self.begin >= self.end:
            raise ValueError(
                f"invalid span [{self.begin}, {self.end}): "
                "begin must be non-negative and less than end"
            )

    @property
    def size(self) -> int:
        """Number of elements covered by the span."""
        return self.end - self.begin

    def __len__(self) -> int:
        return self.size

    def as_slice(self) -> slice:
        return slice(self.begin, self.end)

    def elements(self, values: Sequence[int]) -> Sequence[int]:
        """Return the elements of *values* covered by this span.

        *values* must be the sequence the span was computed from.
        """
        if self.end > len(values):
            raise ValueError(
                f"span [{self.begin}, {self.end}) does not fit a sequence "
                f"of length {len(values)}"
            )
        return values[self.as_slice()]

    def __str__(self) -> str:
        return f"[{self.begin}, {self.end})"


# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RubricItem:
    """One named test group and the points it is worth."""

    name: str
    """Test-group identifier, matched against suite names."""

    points: int
    """Positive number of points awarded when the group passes."""


@dataclass(frozen=True, slots=True)
class Rubric:
    """Immutable, ordered collection of :class:`RubricItem` entries.

    Order follows the rubric file, which is the order the report is
    printed in.
    """

    items: tuple[RubricItem, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0


# ---------------------------------------------------------------------------
# Test results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SuiteResult:
    """Counts reported for one ``<testsuite>`` element."""

    name: str
    tests: int = 0
    failures: int = 0
    disabled: int = 0
    errors: int = 0
    time: float = 0.0
    """Wall-clock seconds reported by the test runner."""

    @property
    def passed(self) -> bool:
        """``True`` when the suite has neither failures nor errors."""
        return self.failures == 0 and self.errors == 0


SuiteResults = Mapping[str, SuiteResult]
"""Suite results keyed by suite name."""


# ---------------------------------------------------------------------------
# Score
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ItemScore:
    """Outcome of a single rubric item."""

    item: RubricItem
    passed: bool

    @property
    def possible_points(self) -> int:
        return self.item.points

    @property
    def earned_points(self) -> int:
        return self.item.points if self.passed else 0


@dataclass(frozen=True, slots=True)
class RubricScore:
    """Scores for every rubric item, in rubric order."""

    items: tuple[ItemScore, ...]

    @property
    def total_earned(self) -> int:
        return sum(score.earned_points for score in self.items)

    @property
    def total_possible(self) -> int:
        return sum(score.possible_points for score in self.items)

    def __len__(self) -> int:
        return len(self.items)
