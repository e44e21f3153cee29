"""Infrastructure: googletest XML result loading.

Only the per-suite summary attributes are read::

    <testsuites>
      <testsuite name="find_dip_trivial_cases" tests="1" failures="0"
                 disabled="0" errors="0" time="0.001">
        ...
      </testsuite>
    </testsuites>

Parsing uses :mod:`xml.etree.ElementTree`; its exceptions, and any
filesystem error, are re-raised as
:class:`~balance_scan.exceptions.ResultsLoadError`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from balance_scan.core.models import SuiteResult
from balance_scan.exceptions import ResultsLoadError

logger = logging.getLogger(__name__)

_COUNT_ATTRIBUTES: tuple[str, ...] = ("tests", "failures", "disabled", "errors")


def load_test_results(path: str | Path) -> dict[str, SuiteResult]:
    """Read the googletest XML report at *path*.

    Returns
    -------
    dict[str, SuiteResult]
        Suite results keyed by suite name.  A repeated name keeps the
        last suite seen.

    Raises
    ------
    ResultsLoadError
        When the file cannot be read or parsed, the document is not a
        ``<testsuites>`` report, a suite is malformed, or no suite is
        present.
    """
    path = Path(path)
    logger.debug("Reading test results at %s", path)
    try:
        tree = ET.parse(path)
    except OSError as exc:
        raise ResultsLoadError(f"error reading XML: {exc.strerror or exc}") from exc
    except ET.ParseError as exc:
        raise ResultsLoadError(f"error parsing XML: {exc}") from exc

    results = parse_test_results(tree.getroot())
    logger.debug("Loaded %d testsuite(s) from %s", len(results), path)
    return results


def parse_test_results(root: ET.Element) -> dict[str, SuiteResult]:
    """Convert a parsed ``<testsuites>`` element into suite results."""
    if root.tag != "testsuites":
        raise ResultsLoadError(
            f"error decoding XML: root element is <{root.tag}>, expected <testsuites>",
        )

    results: dict[str, SuiteResult] = {}
    for element in root.findall("testsuite"):
        suite = _parse_suite(element)
        results[suite.name] = suite

    if not results:
        raise ResultsLoadError(
            "error parsing XML: does not contain any <testsuite> nodes",
        )
    return results


def _parse_suite(element: ET.Element) -> SuiteResult:
    name = element.get("name", "").strip()
    if not name:
        raise ResultsLoadError("error parsing XML: a <testsuite> has no name=")

    counts = {
        attribute: _parse_count(element, name, attribute)
        for attribute in _COUNT_ATTRIBUTES
    }
    return SuiteResult(name=name, time=_parse_time(element, name), **counts)


def _parse_count(element: ET.Element, suite: str, attribute: str) -> int:
    raw = element.get(attribute)
    if raw is None:
        return 0
    try:
        value = int(raw)
    except ValueError as exc:
        raise ResultsLoadError(
            f"error decoding XML: testsuite '{suite}' has non-integer "
            f"{attribute}='{raw}'",
        ) from exc
    if value < 0:
        raise ResultsLoadError(
            f"error decoding XML: testsuite '{suite}' has negative {attribute}='{raw}'",
        )
    return value


def _parse_time(element: ET.Element, suite: str) -> float:
    raw = element.get("time")
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except ValueError as exc:
        raise ResultsLoadError(
            f"error decoding XML: testsuite '{suite}' has non-numeric time='{raw}'",
        ) from exc
