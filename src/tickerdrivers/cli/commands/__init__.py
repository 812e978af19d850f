"""Subcommands for the tickerdrivers CLI."""

from __future__ import annotations

# Each module exposes its own ``app`` Typer instance.  They are imported in
# :mod:`tickerdrivers.cli.main` and registered with ``app.add_typer``.
