"""Chat command handling: argument parsing, fetching and reply formatting."""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from models.sensors import SENSOR_ID_MAX, SensorRecord
from services.aqi import raw_to_aqi
from services.client import SensorClient
from services.errors import ArgumentError, BotError

logger = logging.getLogger(__name__)

PING_COMMAND = "!ping"
AQI_COMMAND = "!aqi"

_SENSOR_ID_PATTERN = re.compile(r"[0-9]+")


def parse_sensor_id(args: Sequence[str]) -> int:
    """Return the sensor ID from the arguments following ``!aqi``."""
    if not args:
        raise ArgumentError(f"{AQI_COMMAND} requires the sensor ID as an argument")
    raw = args[0]
    if not _SENSOR_ID_PATTERN.fullmatch(raw) or int(raw) > SENSOR_ID_MAX:
        raise ArgumentError(f"Failed to parse id: {raw!r} is not a valid sensor ID")
    return int(raw)


def format_reply(record: SensorRecord) -> str:
    stats = record.stats
    return (
        f"id: {record.id}, pm2.5 data: "
        f"current {raw_to_aqi(stats.v):.1f}; "
        f"10 min {raw_to_aqi(stats.v1):.1f}; "
        f"30 min {raw_to_aqi(stats.v2):.1f}; "
        f"6 hour {raw_to_aqi(stats.v4):.1f}; "
        f"24 hour {raw_to_aqi(stats.v5):.1f}"
    )


async def handle_command(content: str, client: SensorClient) -> Optional[str]:
    """Answer a chat message, or return ``None`` if it is not a command."""
    words = content.split()
    if not words:
        return None
    command, args = words[0], words[1:]
    logger.debug("Received message: %s", content, extra={"command": command})

    if command == PING_COMMAND:
        return "Pong!"
    if command != AQI_COMMAND:
        return None

    try:
        sensor_id = parse_sensor_id(args)
        response = await client.fetch_sensor(sensor_id)
    except BotError as exc:
        logger.info("Command failed: %s", exc, extra={"command": command})
        return str(exc)

    record = response.first()
    if record is None:
        logger.info("No sensor records returned", extra={"command": command, "sensor_id": sensor_id})
        return f"No sensor data found for id {sensor_id}"
    return format_reply(record)
