"""Core / service layer — pure algorithms and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from balance_scan.core.dip import find_dip, is_dip
from balance_scan.core.models import (
    ItemScore,
    Rubric,
    RubricItem,
    RubricScore,
    Span,
    SuiteResult,
    SuiteResults,
)
from balance_scan.core.rubric import evaluate_score
from balance_scan.core.span_finder import (
    longest_balanced_span,
    longest_balanced_span_quadratic,
)

__all__: list[str] = [
    "ItemScore",
    "Rubric",
    "RubricItem",
    "RubricScore",
    "Span",
    "SuiteResult",
    "SuiteResults",
    "evaluate_score",
    "find_dip",
    "is_dip",
    "longest_balanced_span",
    "longest_balanced_span_quadratic",
]
