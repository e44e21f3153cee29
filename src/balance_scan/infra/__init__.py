"""Infrastructure layer — filesystem and file-format integration.

This layer reads rubric JSON and googletest XML from disk.  Every raw
parser or filesystem exception must be caught here and re-raised as a
:class:`~balance_scan.exceptions.BalanceScanError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from balance_scan.infra.results_loader import load_test_results
from balance_scan.infra.rubric_loader import load_rubric

__all__: list[str] = [
    "load_rubric",
    "load_test_results",
]
