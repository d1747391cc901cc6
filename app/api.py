"""HTTP route definitions for the service."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.schemas import CommandReply, CommandRequest, SensorReport
from models.sensors import SENSOR_ID_MAX
from services.aqi import aqi_summary
from services.client import SensorClient, build_default_client
from services.commands import handle_command
from services.errors import DecodeError, FetchError

router = APIRouter()


def get_sensor_client() -> SensorClient:
    return build_default_client()


@router.post(
    "/commands",
    response_model=CommandReply,
    summary="Answer a chat message the way the bot would.",
)
async def run_command(
    request: CommandRequest,
    client: SensorClient = Depends(get_sensor_client),
) -> CommandReply:
    reply = await handle_command(request.content, client)
    return CommandReply(reply=reply)


@router.get(
    "/sensors/{sensor_id}",
    response_model=SensorReport,
    summary="Fetch a sensor and convert its PM2.5 averages to AQI.",
)
async def get_sensor_report(
    sensor_id: int = Path(..., ge=0, le=SENSOR_ID_MAX),
    client: SensorClient = Depends(get_sensor_client),
) -> SensorReport:
    try:
        response = await client.fetch_sensor(sensor_id)
    except (FetchError, DecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc

    record = response.first()
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No sensor data found for id {sensor_id}",
        )
    return SensorReport(id=record.id, label=record.label, **asdict(aqi_summary(record.stats)))


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "POST chat messages to /commands."}
