from __future__ import annotations

import math

import pytest

from models.sensors import StatsBlock
from services.aqi import BREAKPOINTS, MAX_AQI, Breakpoint, _check_breakpoints, aqi_summary, raw_to_aqi


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0.0, 0.0),
        (12.1, 51.0),
        (35.5, 101.0),
        (55.5, 151.0),
        (150.5, 201.0),
        (250.5, 301.0),
        (350.5, 401.0),
    ],
)
def test_breakpoints_convert_exactly(raw: float, expected: float) -> None:
    assert raw_to_aqi(raw) == expected


@pytest.mark.parametrize("raw", [500.5, 500.6, 1000.0, math.inf])
def test_readings_saturate_at_max_aqi(raw: float) -> None:
    assert raw_to_aqi(raw) == 500.0
    assert MAX_AQI == 500.0


def test_mid_segment_interpolates_linearly() -> None:
    assert raw_to_aqi(23.8) == pytest.approx(76.0)


def test_first_segment_is_proportional() -> None:
    assert raw_to_aqi(6.05) == pytest.approx(25.5)


def test_last_segment_below_saturation() -> None:
    assert raw_to_aqi(425.5) == pytest.approx(450.5)
    assert raw_to_aqi(500.4) < 500.0


def test_conversion_is_monotonic_and_bounded_by_segment() -> None:
    previous = raw_to_aqi(0.0)
    raw = 0.0
    while raw < 500.5:
        value = raw_to_aqi(raw)
        assert value >= previous
        high = next(i for i in range(1, len(BREAKPOINTS)) if BREAKPOINTS[i].concentration >= raw)
        assert BREAKPOINTS[high - 1].aqi <= value <= BREAKPOINTS[high].aqi
        previous = value
        raw += 0.05


@pytest.mark.parametrize("raw", [-0.1, -100.0, -math.inf])
def test_negative_readings_map_to_zero(raw: float) -> None:
    assert raw_to_aqi(raw) == 0.0


def test_nan_reading_is_rejected() -> None:
    with pytest.raises(ValueError):
        raw_to_aqi(math.nan)


def test_breakpoint_table_is_immutable() -> None:
    assert isinstance(BREAKPOINTS, tuple)
    with pytest.raises(AttributeError):
        BREAKPOINTS[1].aqi = 0.0  # type: ignore[misc]


def test_breakpoint_check_rejects_unordered_table() -> None:
    table = (Breakpoint(0.0, 0.0), Breakpoint(12.1, 51.0), Breakpoint(12.1, 101.0))
    with pytest.raises(ValueError):
        _check_breakpoints(table)


def test_summary_converts_every_window() -> None:
    stats = StatsBlock(v=0.0, v1=12.1, v2=35.5, v3=55.5, v4=150.5, v5=250.5, v6=600.0)

    summary = aqi_summary(stats)

    assert summary.current == 0.0
    assert summary.ten_minute == 51.0
    assert summary.thirty_minute == 101.0
    assert summary.one_hour == 151.0
    assert summary.six_hour == 201.0
    assert summary.one_day == 301.0
    assert summary.one_week == 500.0
