"""Pressure statistics and high-pressure event detection.

All comparisons against thresholds are strict: a reading equal to the
threshold is not high.
"""

from collections.abc import Sequence
from datetime import datetime

import structlog

from foot_pressure_server.core.config import RegionThresholds
from foot_pressure_server.core.numeric import round_kpa
from foot_pressure_server.models.pressure import (
    HighEvent,
    HighSpan,
    Period,
    PressureSample,
    PressureStats,
    Region,
    RegionMax,
)

logger = structlog.get_logger()


def region_max(samples: Sequence[PressureSample], region: Region) -> RegionMax:
    """Find the maximum reading of a region.

    Ties resolve to the earliest sample. An empty sequence yields a zero
    value with no timestamp.
    """
    if not samples:
        return RegionMax(value=0.0, timestamp=None)

    best = samples[0]
    for sample in samples[1:]:
        if sample.value(region) > best.value(region):
            best = sample
    return RegionMax(value=best.value(region), timestamp=best.timestamp)


def detect_high_events(
    samples: Sequence[PressureSample], region: Region, threshold: float
) -> list[HighEvent]:
    """Find maximal runs of consecutive samples above a threshold.

    A run still open at the end of the sequence closes at the final sample.

    Args:
        samples: Samples in chronological order
        region: Region to scan
        threshold: Readings strictly above this are high

    Returns:
        Events in chronological order
    """
    events: list[HighEvent] = []
    run_start: datetime | None = None
    run_end: datetime | None = None
    peak = 0.0
    count = 0

    for sample in samples:
        value = sample.value(region)
        if value > threshold:
            if run_start is None:
                run_start = sample.timestamp
                peak = value
                count = 0
            peak = max(peak, value)
            count += 1
            run_end = sample.timestamp
        elif run_start is not None and run_end is not None:
            events.append(HighEvent(region, run_start, run_end, peak, count))
            run_start = None

    if run_start is not None and run_end is not None:
        events.append(HighEvent(region, run_start, run_end, peak, count))

    return events


def detect_high_spans(
    samples: Sequence[PressureSample], thresholds: RegionThresholds
) -> list[HighSpan]:
    """Find stretches where any region is above its threshold.

    Used to shade alert periods on a chart series, so it runs on whatever
    series the chart receives (smoothed or downsampled).
    """
    spans: list[HighSpan] = []
    span_start: datetime | None = None
    previous: datetime | None = None

    for sample in samples:
        any_high = any(sample.value(r) > thresholds.for_region(r) for r in Region)
        if any_high and span_start is None:
            span_start = sample.timestamp
        elif not any_high and span_start is not None and previous is not None:
            spans.append(HighSpan(start=span_start, end=previous))
            span_start = None
        previous = sample.timestamp

    if span_start is not None and previous is not None:
        spans.append(HighSpan(start=span_start, end=previous))

    return spans


def compute_stats(
    samples: Sequence[PressureSample],
    period: Period,
    thresholds: RegionThresholds,
) -> PressureStats:
    """Compute per-region statistics and high events for a window.

    Args:
        samples: Raw (unsmoothed, full resolution) samples
        period: Period the samples cover, echoed in the result
        thresholds: High-pressure threshold per region

    Returns:
        PressureStats with every region present. Events are grouped by
        region (heel, left ankle, right ankle), chronological within each.
    """
    total = len(samples)
    avg: dict[Region, float] = {}
    maxima: dict[Region, RegionMax] = {}
    time_in_high: dict[Region, float] = {}
    events: list[HighEvent] = []

    for region in Region:
        threshold = thresholds.for_region(region)
        values = [s.value(region) for s in samples]

        if total:
            avg[region] = round_kpa(sum(values) / total)
            high_count = sum(1 for v in values if v > threshold)
            time_in_high[region] = round_kpa(high_count / total * 100)
        else:
            avg[region] = 0.0
            time_in_high[region] = 0.0

        maxima[region] = region_max(samples, region)
        events.extend(detect_high_events(samples, region, threshold))

    logger.debug(
        "Computed pressure stats",
        period=period.value,
        sample_count=total,
        high_events=len(events),
    )

    return PressureStats(
        period=period,
        sample_count=total,
        avg=avg,
        max=maxima,
        time_in_high_pct=time_in_high,
        high_events=events,
    )
