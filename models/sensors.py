"""Sensor documents returned by the PurpleAir JSON endpoint."""

from __future__ import annotations

from typing import Annotated, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, Json

T = TypeVar("T")

# A field whose value is a JSON document serialized into a string. The string
# is parsed first and its contents are then validated as ``T``.
JsonString = Json[T]

# Raw PM2.5 reading in µg/m³. Integers are accepted; numeric strings,
# booleans, NaN and infinities are not.
Reading = Annotated[float, Field(strict=True, allow_inf_nan=False)]

SENSOR_ID_MAX = 2**64 - 1


class StatsBlock(BaseModel):
    """PM2.5 averages over the provider's reporting windows."""

    model_config = ConfigDict(frozen=True)

    v: Reading  # current
    v1: Reading  # 10 minutes
    v2: Reading  # 30 minutes
    v3: Reading  # 1 hour
    v4: Reading  # 6 hours
    v5: Reading  # 24 hours
    v6: Reading  # 1 week


class SensorRecord(BaseModel):
    """One device as reported by the provider."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[int, Field(alias="ID", ge=0, le=SENSOR_ID_MAX, strict=True)]
    label: Annotated[str, Field(alias="Label", strict=True)]
    stats: Annotated[JsonString[StatsBlock], Field(alias="Stats")]


class SensorResponse(BaseModel):
    """Top-level document; the provider may return any number of records."""

    model_config = ConfigDict(frozen=True)

    results: List[SensorRecord]

    def first(self) -> Optional[SensorRecord]:
        return self.results[0] if self.results else None
