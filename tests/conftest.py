"""Shared pytest fixtures and configuration for the balance-scan test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File-based tests write their inputs under ``tmp_path`` only.
* Tests must not depend on OS state or on a terminal being attached.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def suite_xml(
    name: str,
    *,
    tests: int = 1,
    failures: int = 0,
    disabled: int = 0,
    errors: int = 0,
    time: str = "0.001",
) -> str:
    """Render a single googletest ``<testsuite>`` element."""
    return (
        f'<testsuite name="{name}" tests="{tests}" failures="{failures}" '
        f'disabled="{disabled}" errors="{errors}" time="{time}">'
        f'<testcase name="case" status="run" time="{time}" classname="{name}"/>'
        "</testsuite>"
    )


def results_xml(*suites: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<testsuites tests="1" failures="0" disabled="0" errors="0" name="AllTests">'
        + "".join(suites)
        + "</testsuites>"
    )


@pytest.fixture()
def write_rubric(tmp_path: Path) -> Callable[[object], Path]:
    """Return a writer that dumps *content* as JSON to ``rubric.json``."""

    def _write(content: object) -> Path:
        path = tmp_path / "rubric.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_results(tmp_path: Path) -> Callable[[str], Path]:
    """Return a writer that stores raw XML text in ``results.xml``."""

    def _write(content: str) -> Path:
        path = tmp_path / "results.xml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def gtest_xml() -> Callable[..., str]:
    """Return a builder for a ``<testsuites>`` document.

    Each positional argument is a suite name or a ``(name, overrides)``
    pair, where *overrides* are keyword arguments of :func:`suite_xml`.
    """

    def _build(*suites: str | tuple[str, dict[str, object]]) -> str:
        rendered: list[str] = []
        for suite in suites:
            if isinstance(suite, tuple):
                name, overrides = suite
                rendered.append(suite_xml(name, **overrides))  # type: ignore[arg-type]
            else:
                rendered.append(suite_xml(suite))
        return results_xml(*rendered)

    return _build
