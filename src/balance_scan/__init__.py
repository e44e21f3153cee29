"""balance-scan — dip and balanced-span scanning over integer sequences.

Ships a small rubric scorer and timing harness on top of the two
scanning algorithms.
"""

from balance_scan.core.dip import find_dip
from balance_scan.core.models import Span
from balance_scan.core.span_finder import longest_balanced_span
from balance_scan.version import __version__

__all__: list[str] = [
    "Span",
    "__version__",
    "find_dip",
    "longest_balanced_span",
]
