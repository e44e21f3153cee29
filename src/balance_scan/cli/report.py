"""Rubric score report rendering for the CLI layer.

Two renderers share one layout:

* :func:`render_score_plain` — fixed-width text, the format graders
  diff against.  Used whenever stdout is not a terminal or Rich is
  missing.
* a Rich table — used for interactive terminals.

Only a fully evaluated :class:`~balance_scan.core.models.RubricScore`
reaches this module, so a report is never printed half-way.
"""

from __future__ import annotations

import sys
from typing import Any

from balance_scan.core.models import RubricScore

RULE_WIDTH: int = 79
_RULE: str = "=" * RULE_WIDTH


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------

def _points(earned: int, possible: int) -> str:
    return f"{earned:>4} / {possible:>4}"


def render_score_plain(score: RubricScore) -> str:
    """Render *score* as the fixed-width text report.

    Layout::

        =====...
        RUBRIC SCORE
        =====...
        find_dip_trivial_cases       4 /    4
        ...
        =====...
        TOTAL =    4 /    4
        =====...
    """
    name_width = max((len(entry.item.name) for entry in score.items), default=0)
    lines: list[str] = [_RULE, "RUBRIC SCORE", _RULE]
    for entry in score.items:
        lines.append(
            f"{entry.item.name:<{name_width + 4}}"
            f"{_points(entry.earned_points, entry.possible_points)}"
        )
    lines.append(_RULE)
    lines.append(f"TOTAL = {_points(score.total_earned, score.total_possible)}")
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Rich
# ---------------------------------------------------------------------------

def _build_rich_table(score: RubricScore) -> Any:
    from rich.table import Table

    table = Table(
        title="RUBRIC SCORE",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
        show_footer=True,
    )
    table.add_column("Test group", style="bold", footer="TOTAL")
    table.add_column("Earned", justify="right", footer=str(score.total_earned))
    table.add_column("Possible", justify="right", footer=str(score.total_possible))

    for entry in score.items:
        earned_style = "green" if entry.passed else "red"
        table.add_row(
            entry.item.name,
            f"[{earned_style}]{entry.earned_points}[/{earned_style}]",
            str(entry.possible_points),
        )
    return table


def print_score(score: RubricScore) -> None:
    """Write the report for *score* to stdout."""
    if sys.stdout.isatty():
        try:
            from rich.console import Console
        except ModuleNotFoundError:
            pass
        else:
            Console().print(_build_rich_table(score))
            return
    sys.stdout.write(render_score_plain(score))
    sys.stdout.write("\n")
