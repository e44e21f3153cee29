"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify construction
guards, immutability, equality semantics, and derived properties.
"""

from __future__ import annotations

import pytest

from balance_scan.core.models import (
    ItemScore,
    Rubric,
    RubricItem,
    RubricScore,
    Span,
    SuiteResult,
)


# ---------------------------------------------------------------------------
# Span
# ---------------------------------------------------------------------------

class TestSpan:
    def test_fields_accessible(self) -> None:
        span = Span(1, 3)
        assert span.begin == 1
        assert span.end == 3

    def test_size(self) -> None:
        assert Span(1, 3).size == 2
        assert len(Span(0, 500)) == 500

    def test_single_element(self) -> None:
        assert Span(0, 1).size == 1

    @pytest.mark.parametrize(("begin", "end"), [(3, 3), (4, 2), (-1, 2)])
    def test_invalid_pair_rejected(self, begin: int, end: int) -> None:
        with pytest.raises(ValueError, match="invalid span"):
            Span(begin, end)

    def test_equality(self) -> None:
        assert Span(4, 6) == Span(4, 6)

    def test_inequality(self) -> None:
        assert Span(4, 6) != Span(4, 7)
        assert Span(4, 6) != Span(3, 6)

    def test_hashable(self) -> None:
        assert len({Span(1, 2), Span(1, 2), Span(0, 2)}) == 2

    def test_frozen(self) -> None:
        span = Span(1, 3)
        with pytest.raises(AttributeError):
            span.end = 4  # type: ignore[misc]

    def test_as_slice(self) -> None:
        assert Span(1, 3).as_slice() == slice(1, 3)

    def test_elements(self) -> None:
        values = [8, 5, -5, 7]
        assert Span(1, 3).elements(values) == [5, -5]

    def test_elements_keeps_sequence_type(self) -> None:
        assert Span(0, 2).elements((1, -1, 4)) == (1, -1)

    def test_elements_rejects_shorter_sequence(self) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            Span(2, 5).elements([1, 2, 3])

    def test_str_is_half_open(self) -> None:
        assert str(Span(1, 3)) == "[1, 3)"


# ---------------------------------------------------------------------------
# Rubric
# ---------------------------------------------------------------------------

class TestRubric:
    def test_len_and_truthiness(self) -> None:
        rubric = Rubric(items=(RubricItem("a", 1), RubricItem("b", 2)))
        assert len(rubric) == 2
        assert rubric

    def test_empty_is_falsy(self) -> None:
        assert not Rubric(items=())

    def test_items_is_tuple(self) -> None:
        rubric = Rubric(items=(RubricItem("a", 1),))
        assert isinstance(rubric.items, tuple)

    def test_frozen(self) -> None:
        item = RubricItem("a", 1)
        with pytest.raises(AttributeError):
            item.points = 5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# SuiteResult
# ---------------------------------------------------------------------------

class TestSuiteResult:
    def test_defaults(self) -> None:
        suite = SuiteResult("s")
        assert (suite.tests, suite.failures, suite.disabled, suite.errors) == (0, 0, 0, 0)
        assert suite.time == 0.0

    def test_passed_when_clean(self) -> None:
        assert SuiteResult("s", tests=3, disabled=1).passed

    def test_failures_fail(self) -> None:
        assert not SuiteResult("s", tests=3, failures=1).passed

    def test_errors_fail(self) -> None:
        assert not SuiteResult("s", tests=3, errors=1).passed


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

class TestScores:
    def test_passed_item_earns_points(self) -> None:
        score = ItemScore(RubricItem("a", 7), passed=True)
        assert score.possible_points == 7
        assert score.earned_points == 7

    def test_failed_item_earns_nothing(self) -> None:
        score = ItemScore(RubricItem("a", 7), passed=False)
        assert score.possible_points == 7
        assert score.earned_points == 0

    def test_totals(self) -> None:
        score = RubricScore(
            items=(
                ItemScore(RubricItem("a", 4), passed=True),
                ItemScore(RubricItem("b", 6), passed=False),
                ItemScore(RubricItem("c", 5), passed=True),
            )
        )
        assert score.total_earned == 9
        assert score.total_possible == 15
        assert len(score) == 3
