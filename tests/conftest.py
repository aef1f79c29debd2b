"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from foot_pressure_server.core.config import AnalyticsConfig, AnkleSource, RegionThresholds
from foot_pressure_server.services.history import HistoryService

# Window end used wherever a test needs reproducible timestamps
FIXED_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)

HEEL_HIGH = 168.9
ANKLE_HIGH = 350.0


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed end of the history window."""
    return FIXED_NOW


@pytest.fixture
def thresholds() -> RegionThresholds:
    """Thresholds matching the reference heel recording and dashboard ankle default."""
    return RegionThresholds(heel=HEEL_HIGH, left_ankle=ANKLE_HIGH, right_ankle=ANKLE_HIGH)


@pytest.fixture
def analytics_config(thresholds: RegionThresholds) -> AnalyticsConfig:
    """Analytics configuration with smoothing off and synthetic ankles."""
    return AnalyticsConfig(
        thresholds=thresholds,
        smoothing_window=0,
        ankle_source=AnkleSource.SYNTHETIC,
    )


@pytest.fixture
def history_service(analytics_config: AnalyticsConfig) -> HistoryService:
    """History service over the default reference waveforms."""
    return HistoryService(analytics_config)
