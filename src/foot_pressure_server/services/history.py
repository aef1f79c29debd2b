"""History query orchestration.

Ties the generator, smoother, downsampler and statistics engine together.
Statistics and events always come from the raw series. Smoothing and
downsampling only shape the chart series returned in ``data``.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import structlog

from foot_pressure_server.core.config import AnalyticsConfig
from foot_pressure_server.core.exceptions import HistoryComputationError
from foot_pressure_server.models.pressure import (
    HighSpan,
    Interval,
    Period,
    PressureSample,
    PressureStats,
)
from foot_pressure_server.schemas.history import HistoryQuery
from foot_pressure_server.services.analytics import compute_stats, detect_high_spans
from foot_pressure_server.services.downsample import downsample_lttb
from foot_pressure_server.services.generator import SampleGenerator
from foot_pressure_server.services.smoothing import rolling_average
from foot_pressure_server.waveforms import DEFAULT_WAVEFORMS, WaveformSource

logger = structlog.get_logger()


@dataclass(frozen=True)
class HistoryMeta:
    """Parameters the response was built with."""

    period: Period
    interval: Interval
    smoothing: int = 0
    target_points: int | None = None
    raw_sample_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period.value,
            "interval": self.interval.value,
            "smoothing": self.smoothing,
            "targetPoints": self.target_points,
            "rawSampleCount": self.raw_sample_count,
        }


@dataclass(frozen=True)
class HistoryResult:
    """Complete history response: chart series, stats and metadata."""

    data: list[PressureSample]
    stats: PressureStats
    meta: HistoryMeta
    high_spans: list[HighSpan] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire field names."""
        return {
            "data": [s.to_dict() for s in self.data],
            "stats": self.stats.to_dict(),
            "meta": self.meta.to_dict(),
            "highSpans": [span.to_dict() for span in self.high_spans],
        }


class HistoryService:
    """Service answering pressure history queries.

    Stateless apart from its configuration, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        config: AnalyticsConfig,
        waveforms: WaveformSource = DEFAULT_WAVEFORMS,
    ) -> None:
        """Initialize history service.

        Args:
            config: Thresholds, default smoothing window and ankle source
            waveforms: Reference recordings for the generator
        """
        self.config = config
        self.generator = SampleGenerator(waveforms, ankle_source=config.ankle_source)
        self.logger = logger.bind(service="history")

    def get_raw_samples(
        self, query: HistoryQuery, now: datetime | None = None
    ) -> list[PressureSample]:
        """Generate the full-resolution series for a query.

        Raises:
            HistoryComputationError: If generation fails
        """
        try:
            return self.generator.generate(query.period, query.resolved_interval, now=now)
        except Exception as e:
            self.logger.exception(
                "Sample generation failed",
                patient_id=query.patient_id,
                period=query.period.value,
            )
            raise HistoryComputationError("Failed to generate pressure samples") from e

    def get_history(
        self,
        query: HistoryQuery,
        smoothing: int | None = None,
        target_points: int | None = None,
        now: datetime | None = None,
        auto_downsample: bool = True,
    ) -> HistoryResult:
        """Build the history response for a query.

        Args:
            query: Validated history query
            smoothing: Rolling-average window for the chart series
                (None uses the configured default, <= 1 disables)
            target_points: Downsample the chart series to this many points.
                When None, series longer than the configured limit are
                downsampled to the configured point count.
            now: End of the history window (defaults to current time)
            auto_downsample: Apply the configured limit when target_points
                is None (False keeps full resolution, e.g. for export)

        Returns:
            HistoryResult with chart series, raw-series stats and metadata

        Raises:
            HistoryComputationError: If any pipeline step fails. No partial
                result is returned.
        """
        interval = query.resolved_interval
        window = self.config.smoothing_window if smoothing is None else smoothing

        self.logger.info(
            "Building pressure history",
            patient_id=query.patient_id,
            period=query.period.value,
            interval=interval.value,
            smoothing=window,
            target_points=target_points,
        )

        raw = self.get_raw_samples(query, now=now)
        limit = self.config.auto_downsample_above
        if target_points is None and auto_downsample and limit and len(raw) > limit:
            target_points = self.config.auto_downsample_points

        try:
            stats = compute_stats(raw, query.period, self.config.thresholds)

            series = raw
            if window > 1:
                series = rolling_average(series, window)
            if target_points is not None:
                series = downsample_lttb(series, target_points)

            high_spans = detect_high_spans(series, self.config.thresholds)
        except Exception as e:
            self.logger.exception(
                "History computation failed",
                patient_id=query.patient_id,
                period=query.period.value,
                interval=interval.value,
            )
            raise HistoryComputationError("Failed to compute pressure history") from e

        self.logger.info(
            "Pressure history ready",
            patient_id=query.patient_id,
            raw_samples=len(raw),
            chart_points=len(series),
            high_events=len(stats.high_events),
        )

        return HistoryResult(
            data=series,
            stats=stats,
            meta=HistoryMeta(
                period=query.period,
                interval=interval,
                smoothing=window,
                target_points=target_points,
                raw_sample_count=len(raw),
            ),
            high_spans=high_spans,
        )
