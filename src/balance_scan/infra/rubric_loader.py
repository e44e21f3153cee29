"""Infrastructure: rubric JSON loading.

A rubric file is a single JSON object mapping test-group names to the
positive number of points each group is worth::

    {
        "find_dip_trivial_cases": 4,
        "find_dip_nontrivial_cases": 6
    }

Key order is preserved and becomes the order of the score report.
Every :mod:`json` or filesystem exception is re-raised as
:class:`~balance_scan.exceptions.RubricLoadError`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from balance_scan.core.models import Rubric, RubricItem
from balance_scan.exceptions import RubricLoadError

logger = logging.getLogger(__name__)


def load_rubric(path: str | Path) -> Rubric:
    """Read and validate the rubric stored at *path*.

    Raises
    ------
    RubricLoadError
        When the file cannot be read, is not valid JSON, is not a JSON
        object, holds a value that is not a positive integer, or holds
        no items at all.
    """
    path = Path(path)
    logger.debug("Reading rubric at %s", path)
    try:
        with path.open(encoding="utf-8") as handle:
            raw: Any = json.load(handle)
    except OSError as exc:
        raise RubricLoadError(f"error reading JSON: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise RubricLoadError(f"error parsing JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RubricLoadError(f"error decoding JSON: not valid UTF-8 ({exc.reason})") from exc

    rubric = parse_rubric(raw)
    logger.debug("Loaded %d rubric item(s) from %s", len(rubric), path)
    return rubric


def parse_rubric(raw: Any) -> Rubric:
    """Convert decoded JSON into a :class:`Rubric`."""
    if not isinstance(raw, dict):
        raise RubricLoadError(
            f"JSON must be an object mapping names to points, got {type(raw).__name__}",
        )

    items = tuple(
        RubricItem(name=str(name), points=_parse_points(str(name), value))
        for name, value in raw.items()
    )
    if not items:
        raise RubricLoadError("JSON does not contain any rubric items")
    return Rubric(items=items)


def _parse_points(name: str, value: Any) -> int:
    """Return *value* as a positive ``int`` or raise :class:`RubricLoadError`."""
    points: int | None = None
    # bool is an int subclass; true/false are not point values.
    if isinstance(value, int) and not isinstance(value, bool):
        points = value
    elif isinstance(value, str) and value.strip().isdecimal():
        points = int(value.strip())

    if points is None or points <= 0:
        raise RubricLoadError(
            f"key '{name}' does not map to a positive integer",
        )
    return points
