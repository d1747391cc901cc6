from __future__ import annotations

from typing import Any, Iterable

import typer

from models.sensors import SensorRecord
from services.aqi import aqi_summary


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_sensor(record: SensorRecord) -> None:
    summary = aqi_summary(record.stats)
    echo_heading(f"Sensor {record.id}")
    echo_key_values([("label", record.label)])
    typer.echo()
    echo_heading("PM2.5 AQI")
    echo_key_values(
        [
            ("current", f"{summary.current:.1f}"),
            ("10 min", f"{summary.ten_minute:.1f}"),
            ("30 min", f"{summary.thirty_minute:.1f}"),
            ("1 hour", f"{summary.one_hour:.1f}"),
            ("6 hour", f"{summary.six_hour:.1f}"),
            ("24 hour", f"{summary.one_day:.1f}"),
            ("1 week", f"{summary.one_week:.1f}"),
        ]
    )
