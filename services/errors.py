"""Errors raised while answering a chat command.

Every error here is recoverable: its ``str()`` is a short message that can be
sent back to the chat channel as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class BotError(Exception):
    """Base class for failures reported back to the user."""


class ArgumentError(BotError):
    """The command arguments could not be turned into a sensor query."""


class FetchError(BotError):
    """The sensor provider could not be reached or answered with an error."""

    def __init__(self, sensor_id: int, reason: str, status_code: Optional[int] = None) -> None:
        self.sensor_id = sensor_id
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch data for sensor {sensor_id}: {reason}")


class DecodeErrorKind(str, Enum):
    """Which part of the provider payload failed to decode."""

    malformed_document = "malformed_document"
    invalid_results = "invalid_results"
    invalid_record = "invalid_record"
    missing_field = "missing_field"
    invalid_field = "invalid_field"
    stats_not_string = "stats_not_string"
    stats_invalid_json = "stats_invalid_json"
    invalid_stats = "invalid_stats"


class DecodeError(BotError):
    """The provider payload did not match the expected sensor document."""

    def __init__(self, kind: DecodeErrorKind, location: str, detail: str) -> None:
        self.kind = kind
        self.location = location
        self.detail = detail
        where = f" at {location}" if location else ""
        super().__init__(f"Unexpected sensor data{where}: {detail}")
