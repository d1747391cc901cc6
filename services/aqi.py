"""PM2.5 concentration to AQI conversion using the EPA breakpoint table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

from models.sensors import StatsBlock


class Breakpoint(NamedTuple):
    concentration: float
    aqi: float


BREAKPOINTS: Tuple[Breakpoint, ...] = (
    Breakpoint(0.0, 0.0),
    Breakpoint(12.1, 51.0),
    Breakpoint(35.5, 101.0),
    Breakpoint(55.5, 151.0),
    Breakpoint(150.5, 201.0),
    Breakpoint(250.5, 301.0),
    Breakpoint(350.5, 401.0),
    Breakpoint(500.5, 500.0),
)


def _check_breakpoints(table: Sequence[Breakpoint]) -> None:
    if len(table) < 2 or table[0] != Breakpoint(0.0, 0.0):
        raise ValueError("Breakpoint table must start at (0.0, 0.0).")
    for low, high in zip(table, table[1:]):
        if high.concentration <= low.concentration:
            raise ValueError("Breakpoint concentrations must be strictly increasing.")


_check_breakpoints(BREAKPOINTS)

MAX_AQI = BREAKPOINTS[-1].aqi


def raw_to_aqi(raw: float) -> float:
    """Convert a raw PM2.5 concentration (µg/m³) into an AQI value.

    Readings at or above the last breakpoint saturate at ``MAX_AQI`` and
    negative readings map to 0. NaN raises ``ValueError``.
    """
    if math.isnan(raw):
        raise ValueError("Cannot convert NaN to AQI.")
    if raw >= BREAKPOINTS[-1].concentration:
        return MAX_AQI
    if raw <= 0.0:
        return 0.0

    high = 1
    while BREAKPOINTS[high].concentration < raw:
        high += 1
    upper = BREAKPOINTS[high]
    lower = BREAKPOINTS[high - 1]
    if raw == upper.concentration:
        return upper.aqi

    slope = (upper.aqi - lower.aqi) / (upper.concentration - lower.concentration)
    return slope * (raw - lower.concentration) + lower.aqi


@dataclass(frozen=True)
class AqiSummary:
    """AQI for every reporting window of a sensor."""

    current: float
    ten_minute: float
    thirty_minute: float
    one_hour: float
    six_hour: float
    one_day: float
    one_week: float


def aqi_summary(stats: StatsBlock) -> AqiSummary:
    return AqiSummary(
        current=raw_to_aqi(stats.v),
        ten_minute=raw_to_aqi(stats.v1),
        thirty_minute=raw_to_aqi(stats.v2),
        one_hour=raw_to_aqi(stats.v3),
        six_hour=raw_to_aqi(stats.v4),
        one_day=raw_to_aqi(stats.v5),
        one_week=raw_to_aqi(stats.v6),
    )
