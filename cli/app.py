from __future__ import annotations

from typing import Optional

import typer

from errors import CollectorError, ConfigurationError
from logging_config import configure_logging
from cli.render import render_failure, render_reading, render_result
from services.collector import build_default_collector
from services.device_reader import NatureRemoClient
from services.transformer import LOCALE, load_zone
from settings import get_settings


app = typer.Typer(
    help="Run and inspect room condition collections locally.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.upper() if log_level else None)


@app.command("collect")
def collect_command() -> None:
    """Fetch the first device, store one room condition and report the outcome."""
    try:
        collector = build_default_collector()
    except ConfigurationError as exc:
        render_failure(str(exc))
        raise typer.Exit(code=1)

    try:
        result = collector.invoke()
    finally:
        collector.close()
        build_default_collector.cache_clear()
    render_result(result)
    raise typer.Exit(code=result.exit_code)


@app.command("device")
def device_command() -> None:
    """Print the first device's latest readings without storing anything."""
    settings = get_settings()
    try:
        zone = load_zone(LOCALE)
        with NatureRemoClient(settings.access_key, timeout=settings.request_timeout) as client:
            reading = client.read_first_device()
    except CollectorError as exc:
        render_failure(str(exc))
        raise typer.Exit(code=1)
    render_reading(reading, zone)
