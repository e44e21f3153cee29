"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
result output remain functional even when Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from balance_scan.exceptions import EnvironmentError

_LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(verbose: bool = False) -> None:
	"""Route ``balance_scan`` log records to stderr.

	Uses :class:`rich.logging.RichHandler` when Rich is installed and a
	plain :class:`logging.StreamHandler` otherwise.  Calling this again
	replaces the handler installed by the previous call.
	"""
	level = logging.DEBUG if verbose else logging.WARNING
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))
	else:
		handler = RichHandler(
			console=get_rich_console(),
			show_path=False,
			show_time=False,
		)
		handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

	root = logging.getLogger("balance_scan")
	for existing in list(root.handlers):
		root.removeHandler(existing)
	root.addHandler(handler)
	root.setLevel(level)
