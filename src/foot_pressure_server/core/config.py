"""Application configuration."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from foot_pressure_server.models.pressure import Region
from foot_pressure_server.waveforms import HEEL_PRESSURE_THRESHOLD

DEFAULT_HEEL_HIGH_KPA = HEEL_PRESSURE_THRESHOLD
DEFAULT_ANKLE_HIGH_KPA = 350.0

# Chart series longer than this are downsampled when a request names no point count
DEFAULT_AUTO_DOWNSAMPLE_ABOVE = 8000
DEFAULT_AUTO_DOWNSAMPLE_POINTS = 1500


class AnkleSource(str, Enum):
    """How ankle channels are filled while the heel is unloaded."""

    SYNTHETIC = "synthetic"  # Seeded jitter around a daily cycle
    REFERENCE = "reference"  # Recorded ankle waveform


@dataclass(frozen=True, slots=True)
class RegionThresholds:
    """High-pressure threshold (kPa) for each region."""

    heel: float
    left_ankle: float
    right_ankle: float

    def for_region(self, region: Region) -> float:
        """Get the threshold that applies to a region."""
        match region:
            case Region.HEEL:
                return self.heel
            case Region.LEFT_ANKLE:
                return self.left_ankle
            case Region.RIGHT_ANKLE:
                return self.right_ankle


@dataclass(frozen=True, slots=True)
class AnalyticsConfig:
    """Explicit configuration handed to the history pipeline.

    Built once from Settings (or directly in tests) and passed by reference;
    the pipeline never reads global settings.
    """

    thresholds: RegionThresholds
    smoothing_window: int = 0
    ankle_source: AnkleSource = AnkleSource.SYNTHETIC
    auto_downsample_above: int | None = DEFAULT_AUTO_DOWNSAMPLE_ABOVE
    auto_downsample_points: int = DEFAULT_AUTO_DOWNSAMPLE_POINTS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow extra env vars without error
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    api_prefix: str = Field(default="/api/v1", description="API prefix")

    # Alert thresholds
    heel_high_kpa: float = Field(
        default=DEFAULT_HEEL_HIGH_KPA,
        ge=100,
        le=600,
        description="Heel pressure above this value counts as high (kPa)",
    )
    ankle_high_kpa: float = Field(
        default=DEFAULT_ANKLE_HIGH_KPA,
        ge=100,
        le=600,
        description="Ankle pressure above this value counts as high (kPa), both ankles",
    )

    # Chart preferences
    smoothing_window: Literal[0, 5, 10] = Field(
        default=0,
        description="Default rolling-average window for chart series (0 = off)",
    )
    chart_max_points: int = Field(
        default=DEFAULT_AUTO_DOWNSAMPLE_ABOVE,
        ge=0,
        description="Chart series longer than this are downsampled by default (0 = never)",
    )
    chart_downsample_points: int = Field(
        default=DEFAULT_AUTO_DOWNSAMPLE_POINTS,
        ge=3,
        description="Point count used when a long chart series is downsampled by default",
    )

    # Simulation
    ankle_source: AnkleSource = Field(
        default=AnkleSource.SYNTHETIC,
        description="Ankle channel source while lying down: synthetic or reference",
    )
    default_patient_id: str = Field(
        default="demo",
        description="Patient id used when a request does not name one",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level",
    )

    def thresholds(self) -> RegionThresholds:
        """Get per-region thresholds (both ankles share one setting)."""
        return RegionThresholds(
            heel=self.heel_high_kpa,
            left_ankle=self.ankle_high_kpa,
            right_ankle=self.ankle_high_kpa,
        )

    def analytics_config(self) -> AnalyticsConfig:
        """Build the analytics configuration object for HistoryService."""
        return AnalyticsConfig(
            thresholds=self.thresholds(),
            smoothing_window=self.smoothing_window,
            ankle_source=self.ankle_source,
            auto_downsample_above=self.chart_max_points or None,
            auto_downsample_points=self.chart_downsample_points,
        )


# Global settings instance
settings = Settings()
