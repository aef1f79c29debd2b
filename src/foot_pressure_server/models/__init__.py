"""Pressure domain models."""

from foot_pressure_server.models.pressure import (
    CSV_HEADER,
    HighEvent,
    HighSpan,
    Interval,
    Period,
    PressureSample,
    PressureStats,
    Region,
    RegionMax,
)

__all__ = [
    "CSV_HEADER",
    "HighEvent",
    "HighSpan",
    "Interval",
    "Period",
    "PressureSample",
    "PressureStats",
    "Region",
    "RegionMax",
]
