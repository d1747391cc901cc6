"""Command line entry points for the AQI bot; the Typer app lives in ``cli.app``."""
