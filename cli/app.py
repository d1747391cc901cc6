from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

import typer

from cli.config import CLIConfig, load_config
from cli.render import render_sensor
from logging_config import configure_logging
from models.sensors import SENSOR_ID_MAX
from services.client import SensorClient
from services.commands import handle_command
from services.errors import BotError


@dataclass
class CLIState:
    config: CLIConfig
    client: SensorClient


app = typer.Typer(
    help="Query PurpleAir sensors and answer AQI bot commands from the terminal.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    url_template: Optional[str] = typer.Option(
        None,
        "--url-template",
        help="Sensor URL with a {sensor_id} placeholder (defaults to PURPLEAIR_URL_TEMPLATE).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the sensor provider (defaults to PURPLEAIR_TIMEOUT_SECONDS).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging()
    config = load_config(url_template=url_template, timeout=timeout)
    client = SensorClient(url_template=config.url_template, timeout=config.timeout)
    ctx.obj = CLIState(config=config, client=client)


@app.command("ask")
def ask_command(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Chat message, e.g. '!aqi 12345'."),
) -> None:
    """Answer a chat message exactly as the bot would."""
    state = _get_state(ctx)
    reply = asyncio.run(handle_command(message, state.client))
    typer.echo(reply if reply is not None else "(no reply)")


@app.command("sensor")
def sensor_command(
    ctx: typer.Context,
    sensor_id: int = typer.Argument(..., min=0, max=SENSOR_ID_MAX, help="PurpleAir sensor ID."),
) -> None:
    """Show the AQI for every reporting window of a sensor."""
    state = _get_state(ctx)
    typer.echo(f"Fetching sensor {sensor_id} (timeout={state.config.timeout}s) ...")
    try:
        response = asyncio.run(state.client.fetch_sensor(sensor_id))
    except BotError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    record = response.first()
    if record is None:
        typer.secho(f"No sensor data found for id {sensor_id}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    render_sensor(record)
