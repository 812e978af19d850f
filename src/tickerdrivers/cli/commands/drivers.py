"""Driver related CLI commands."""
from __future__ import annotations

import asyncio
import json
import logging
import sys

import typer

from ...drivers import DRIVERS, create_driver
from ...exceptions import DriverError
from ...logging_conf import setup_logging

app = typer.Typer(help="Ticker drivers")

log = logging.getLogger(__name__)


@app.command("list")
def list_() -> None:
    """Show registered drivers and the credentials they need."""

    for name in sorted(DRIVERS):
        req = DRIVERS[name].requires
        needs = [f for f in ("key", "secret") if getattr(req, f)]
        typer.echo(f"{name}\trequires: {', '.join(needs) or '-'}")


@app.command()
def fetch(
    name: str = typer.Argument(..., help="Driver name, see `drivers list`"),
    mock: bool = typer.Option(
        False, "--mock/--live", help="Use the fixed query window of mocked runs"
    ),
    key: str | None = typer.Option(None, "--key", help="API key (defaults to env/.env)"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (e.g., INFO, DEBUG)"
    ),
) -> None:
    """Fetch tickers once and print them as a JSON array."""

    # stdout carries the JSON result
    setup_logging(log_level, stream=sys.stderr)
    try:
        driver = create_driver(name, key=key)
        tickers = asyncio.run(driver.fetch_tickers(is_mocked=mock))
    except DriverError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1)
    log.info("fetched", extra={"driver": name, "count": len(tickers)})
    typer.echo(json.dumps([t.model_dump(by_alias=True) for t in tickers], indent=2))
