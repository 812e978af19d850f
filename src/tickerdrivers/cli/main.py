"""Command line entry point for tickerdrivers.

This module registers the command groups defined under
:mod:`tickerdrivers.cli.commands`.
"""
from __future__ import annotations

import sys

import typer

from .commands import drivers

app = typer.Typer(add_completion=False, help="Fetch normalized tickers from data drivers")

# Register subcommands
app.add_typer(drivers.app, name="drivers")


def main() -> int:
    """Entry point used by ``python -m tickerdrivers.cli``."""
    try:
        rv = app(standalone_mode=False)
    except typer.Exit as exc:
        return exc.exit_code
    # click returns the exit code instead of raising when not standalone
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
