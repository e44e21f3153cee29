"""Pure rubric scoring.

Cross-references a :class:`~balance_scan.core.models.Rubric` against
parsed suite results.  No I/O: loading lives in
:mod:`balance_scan.infra`, rendering in :mod:`balance_scan.cli.report`.
"""

from __future__ import annotations

from balance_scan.core.models import ItemScore, Rubric, RubricScore, SuiteResults
from balance_scan.exceptions import MissingSuiteError


def evaluate_score(rubric: Rubric, results: SuiteResults) -> RubricScore:
    """Score every rubric item against *results*.

    Items are scored in rubric order, which is the order the author of
    the rubric file chose.  An item earns its full points when the
    matching suite has no failures and no errors, otherwise nothing.

    Raises
    ------
    MissingSuiteError
        If a rubric item names a suite absent from *results*.  Nothing
        is scored in that case.
    """
    scores: list[ItemScore] = []
    for item in rubric.items:
        suite = results.get(item.name)
        if suite is None:
            raise MissingSuiteError(
                f"testsuite '{item.name}' from rubric cannot be found "
                "in test result XML",
                hint="Check that the rubric names match the <testsuite name=...> values.",
            )
        scores.append(ItemScore(item=item, passed=suite.passed))
    return RubricScore(items=tuple(scores))
