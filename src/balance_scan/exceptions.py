"""Custom exception hierarchy for balance-scan.

All exceptions that cross layer boundaries must inherit from
:class:`BalanceScanError`.  Raw parser and filesystem exceptions (e.g.
from :mod:`json` or :mod:`xml.etree.ElementTree`) must NEVER propagate
beyond the infrastructure layer — they must be caught and re-raised as
a typed subclass defined here.

:class:`~balance_scan.core.models.Span` construction is deliberately
not part of this hierarchy: an invalid span is a programmer error and
raises :class:`ValueError`.

Hierarchy
---------
BalanceScanError
├── RubricError
│   ├── RubricLoadError
│   ├── ResultsLoadError
│   └── MissingSuiteError
├── InputError
├── BenchConfigError
└── EnvironmentError
"""

from __future__ import annotations


class BalanceScanError(Exception):
    """Base exception for all balance-scan errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Rubric scoring --------------------------------------------------------

class RubricError(BalanceScanError):
    """Base class for everything that can go wrong while scoring."""


class RubricLoadError(RubricError):
    """Raised when the rubric JSON cannot be read or is malformed."""


class ResultsLoadError(RubricError):
    """Raised when the test-result XML cannot be read or is malformed."""


class MissingSuiteError(RubricError):
    """Raised when a rubric item has no matching suite in the results."""


# --- Command-line input ----------------------------------------------------

class InputError(BalanceScanError):
    """Raised when sequence values given on the command line are invalid."""


class BenchConfigError(BalanceScanError):
    """Raised when the timing harness is given an unusable configuration."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(BalanceScanError):
    """Raised when a required runtime dependency is not available."""
