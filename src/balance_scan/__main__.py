"""Allow ``python -m balance_scan`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m balance_scan`` behaves identically to the
``balance-scan`` console script.
"""

from __future__ import annotations

from balance_scan.cli.app import cli

if __name__ == "__main__":
    cli()
