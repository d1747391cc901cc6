"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """A chat message forwarded by the chat dispatcher."""

    content: str = Field(..., description="Raw message text, e.g. '!aqi 12345'.")


class CommandReply(BaseModel):
    """Reply to send back to the channel; ``null`` when the message is ignored."""

    reply: Optional[str] = None


class SensorReport(BaseModel):
    """AQI values for every reporting window of a sensor."""

    id: int = Field(..., ge=0)
    label: str
    current: float
    ten_minute: float
    thirty_minute: float
    one_hour: float
    six_hour: float
    one_day: float
    one_week: float
