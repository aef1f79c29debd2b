"""Pressure sample and statistics models.

These are plain immutable value objects: a sample sequence and its stats
exist only for the duration of one history request.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any

from foot_pressure_server.core.numeric import format_timestamp

CSV_HEADER = ("timestamp", "heel", "leftAnkle", "rightAnkle")


class Region(str, Enum):
    """Monitored body regions. Values are the wire field names."""

    HEEL = "heel"
    LEFT_ANKLE = "leftAnkle"
    RIGHT_ANKLE = "rightAnkle"


class Interval(str, Enum):
    """Sampling interval."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"

    @property
    def duration(self) -> timedelta:
        """Spacing between consecutive samples."""
        match self:
            case Interval.ONE_MINUTE:
                return timedelta(minutes=1)
            case Interval.FIVE_MINUTES:
                return timedelta(minutes=5)
            case Interval.ONE_HOUR:
                return timedelta(hours=1)


class Period(str, Enum):
    """History window ending now."""

    THREE_DAYS = "3d"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"

    @property
    def duration(self) -> timedelta:
        """Total length of the window."""
        match self:
            case Period.THREE_DAYS:
                return timedelta(days=3)
            case Period.SEVEN_DAYS:
                return timedelta(days=7)
            case Period.THIRTY_DAYS:
                return timedelta(days=30)

    @property
    def default_interval(self) -> Interval:
        """Interval used when a query does not specify one."""
        match self:
            case Period.THREE_DAYS | Period.SEVEN_DAYS:
                return Interval.FIVE_MINUTES
            case Period.THIRTY_DAYS:
                return Interval.ONE_HOUR


@dataclass(frozen=True, slots=True)
class PressureSample:
    """One reading of all three regions at a point in time (kPa)."""

    timestamp: datetime
    heel: float
    left_ankle: float
    right_ankle: float

    def value(self, region: Region) -> float:
        """Get the reading for a region."""
        match region:
            case Region.HEEL:
                return self.heel
            case Region.LEFT_ANKLE:
                return self.left_ankle
            case Region.RIGHT_ANKLE:
                return self.right_ankle

    @property
    def mean_pressure(self) -> float:
        """Average of the three channels."""
        return (self.heel + self.left_ankle + self.right_ankle) / 3

    def csv_row(self) -> tuple[str, float, float, float]:
        """Project to a CSV row matching CSV_HEADER."""
        return (format_timestamp(self.timestamp), self.heel, self.left_ankle, self.right_ankle)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire field names."""
        return {
            "ts": format_timestamp(self.timestamp),
            Region.HEEL.value: self.heel,
            Region.LEFT_ANKLE.value: self.left_ankle,
            Region.RIGHT_ANKLE.value: self.right_ankle,
        }


@dataclass(frozen=True, slots=True)
class RegionMax:
    """Maximum reading of a region and when it first occurred."""

    value: float
    timestamp: datetime | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "ts": format_timestamp(self.timestamp) if self.timestamp else None,
        }


@dataclass(frozen=True, slots=True)
class HighEvent:
    """Maximal contiguous run of samples above a region's threshold.

    start and end are inclusive sample timestamps.
    """

    region: Region
    start: datetime
    end: datetime
    peak: float
    sample_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.region.value,
            "start": format_timestamp(self.start),
            "end": format_timestamp(self.end),
            "peak": self.peak,
            "samples": self.sample_count,
        }


@dataclass(frozen=True, slots=True)
class HighSpan:
    """Contiguous stretch where at least one region is above threshold."""

    start: datetime
    end: datetime

    def to_dict(self) -> dict[str, str]:
        return {"start": format_timestamp(self.start), "end": format_timestamp(self.end)}


@dataclass(frozen=True)
class PressureStats:
    """Aggregate statistics for one sample window."""

    period: Period
    sample_count: int
    avg: dict[Region, float]
    max: dict[Region, RegionMax]
    time_in_high_pct: dict[Region, float]
    high_events: list[HighEvent] = field(default_factory=list)

    def events_for(self, region: Region) -> list[HighEvent]:
        """Get the high events of a single region in chronological order."""
        return [e for e in self.high_events if e.region is region]

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire field names."""
        return {
            "period": self.period.value,
            "sampleCount": self.sample_count,
            "avg": {r.value: self.avg[r] for r in Region},
            "max": {r.value: self.max[r].to_dict() for r in Region},
            "timeInHighPct": {r.value: self.time_in_high_pct[r] for r in Region},
            "highEvents": [e.to_dict() for e in self.high_events],
        }
