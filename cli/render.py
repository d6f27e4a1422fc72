from __future__ import annotations

from typing import Any, Iterable
from zoneinfo import ZoneInfo

import typer

from app.schemas import InvocationResult
from models.records import DeviceReading
from services.transformer import format_timestamp


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_failure(message: str) -> None:
    typer.secho(f"Collection failed: {message}", fg=typer.colors.RED, err=True)


def render_result(result: InvocationResult) -> None:
    echo_heading("Invocation Result")
    echo_key_values(
        [
            ("exit_code", result.exit_code),
            ("record_id", result.record_id),
        ]
    )
    if result.error:
        render_failure(result.error)
    else:
        typer.secho("Room condition stored.", fg=typer.colors.GREEN)


def render_reading(reading: DeviceReading, zone: ZoneInfo) -> None:
    echo_heading(f"Device {reading.name}")
    echo_key_values(
        [
            ("humid", f"{reading.humid} ({format_timestamp(reading.humid_created_at, zone)})"),
            (
                "illuminance",
                f"{reading.illuminance} ({format_timestamp(reading.illuminance_created_at, zone)})",
            ),
            (
                "temperature",
                f"{reading.temperature} ({format_timestamp(reading.temperature_created_at, zone)})",
            ),
        ]
    )
