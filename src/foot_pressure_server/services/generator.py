"""Deterministic pressure sample generator.

Heel readings replay a recorded waveform; ankle readings follow the
standing/lying rule: both ankles read zero whenever the heel is loaded.
Values depend only on (period, interval, ankle source). The wall clock
only anchors timestamps.
"""

import math
from datetime import UTC, datetime

import structlog

from foot_pressure_server.core.config import AnkleSource
from foot_pressure_server.core.numeric import round_kpa
from foot_pressure_server.models.pressure import Interval, Period, PressureSample
from foot_pressure_server.waveforms import DEFAULT_WAVEFORMS, WaveformSource

logger = structlog.get_logger()

_UINT32 = 0xFFFFFFFF

# Synthetic ankle model: base + amplitude * daily factor +/- jitter / 2
LEFT_ANKLE_BASE = 200.0
LEFT_ANKLE_AMPLITUDE = 80.0
RIGHT_ANKLE_BASE = 190.0
RIGHT_ANKLE_AMPLITUDE = 75.0
ANKLE_JITTER = 25.0


def hash_seed(text: str) -> int:
    """Hash a string to a non-negative 32-bit seed.

    Classic ``h = h * 31 + code`` string hash over UTF-16 code units,
    wrapped to a signed 32-bit integer, then made non-negative.
    """
    encoded = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        code = encoded[i] | (encoded[i + 1] << 8)
        h = ((h << 5) - h + code) & _UINT32
    if h & 0x80000000:
        h -= 1 << 32
    return abs(h)


class Mulberry32:
    """Small seeded PRNG producing floats in [0, 1)."""

    def __init__(self, seed: int) -> None:
        self._state = seed & _UINT32

    def __call__(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _UINT32
        t = self._state
        t = ((t ^ (t >> 15)) * (t | 1)) & _UINT32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & _UINT32)) & _UINT32
        return ((t ^ (t >> 14)) & _UINT32) / 4294967296


def sample_count(period: Period, interval: Interval) -> int:
    """Number of samples covering a period at an interval."""
    return math.ceil(period.duration / interval.duration)


def daily_factor(hour: int) -> float:
    """Ankle load factor for an hour of day, peaking mid-afternoon."""
    return 0.8 + 0.4 * math.sin(((hour - 6) * math.pi) / 12)


class SampleGenerator:
    """Produce reproducible pressure samples for a history window.

    Args:
        waveforms: Heel and ankle reference recordings
        ankle_source: Strategy for ankle channels while the heel is unloaded
    """

    def __init__(
        self,
        waveforms: WaveformSource = DEFAULT_WAVEFORMS,
        ankle_source: AnkleSource = AnkleSource.SYNTHETIC,
    ) -> None:
        self.waveforms = waveforms
        self.ankle_source = ankle_source
        # Ankle recording without its rest periods, advanced only while lying
        self._loaded_ankle = waveforms.ankle.loaded()
        self.logger = logger.bind(service="generator")

    def generate(
        self,
        period: Period,
        interval: Interval,
        now: datetime | None = None,
    ) -> list[PressureSample]:
        """Generate samples covering ``[now - period, now)``.

        Args:
            period: Window length
            interval: Sample spacing
            now: End of the window (defaults to the current UTC time)

        Returns:
            Samples in strictly increasing timestamp order

        Raises:
            ValueError: If a reference waveform needed for generation is empty
        """
        end = now or datetime.now(UTC)
        start = end - period.duration
        step = interval.duration
        count = sample_count(period, interval)
        rng = Mulberry32(hash_seed(f"{period.value}-{interval.value}"))
        step_seconds = step.total_seconds()

        samples: list[PressureSample] = []
        lying_index = 0
        for i in range(count):
            heel = self.waveforms.heel.at(i)
            left_ankle = 0.0
            right_ankle = 0.0

            # Unloaded heel means the patient is lying down
            if heel == 0:
                if self.ankle_source is AnkleSource.REFERENCE:
                    left_ankle, right_ankle = self._reference_ankles(lying_index)
                else:
                    hour = int(i * step_seconds // 3600) % 24
                    left_ankle, right_ankle = self._synthetic_ankles(hour, rng)
                lying_index += 1

            samples.append(
                PressureSample(
                    timestamp=start + i * step,
                    heel=round_kpa(heel),
                    left_ankle=left_ankle,
                    right_ankle=right_ankle,
                )
            )

        self.logger.debug(
            "Generated samples",
            period=period.value,
            interval=interval.value,
            count=count,
            ankle_source=self.ankle_source.value,
        )
        return samples

    def _synthetic_ankles(self, hour: int, rng: Mulberry32) -> tuple[float, float]:
        factor = daily_factor(hour)
        left = LEFT_ANKLE_BASE + LEFT_ANKLE_AMPLITUDE * factor + ANKLE_JITTER * (rng() - 0.5)
        right = RIGHT_ANKLE_BASE + RIGHT_ANKLE_AMPLITUDE * factor + ANKLE_JITTER * (rng() - 0.5)
        return round_kpa(left), round_kpa(right)


    def _reference_ankles(self, lying_index: int) -> tuple[float, float]:
        # Right ankle replays the same recording half a cycle later
        ankle = self._loaded_ankle
        offset = len(ankle) // 2
        return round_kpa(ankle.at(lying_index)), round_kpa(ankle.at(lying_index + offset))
