"""Application services."""

from foot_pressure_server.services.analytics import (
    compute_stats,
    detect_high_events,
    detect_high_spans,
)
from foot_pressure_server.services.downsample import downsample_lttb
from foot_pressure_server.services.generator import SampleGenerator
from foot_pressure_server.services.history import HistoryResult, HistoryService
from foot_pressure_server.services.smoothing import rolling_average

__all__ = [
    "HistoryResult",
    "HistoryService",
    "SampleGenerator",
    "compute_stats",
    "detect_high_events",
    "detect_high_spans",
    "downsample_lttb",
    "rolling_average",
]
