"""Centered rolling-average smoothing for chart series."""

from collections.abc import Sequence

from foot_pressure_server.core.numeric import round_kpa
from foot_pressure_server.models.pressure import PressureSample


def rolling_average(samples: Sequence[PressureSample], window: int) -> list[PressureSample]:
    """Smooth each channel with a centered moving average.

    The window for index ``i`` is ``[i - window // 2, i + ceil(window / 2))``
    clamped to the sequence, so edges average over fewer samples.
    Timestamps are kept; only channel values change.

    Args:
        samples: Samples in chronological order
        window: Window size in samples (<= 1 disables smoothing)

    Returns:
        Smoothed samples, same length as the input
    """
    if window <= 1 or not samples:
        return list(samples)

    n = len(samples)
    back = window // 2
    ahead = window - back  # ceil(window / 2)

    smoothed: list[PressureSample] = []
    for i, sample in enumerate(samples):
        chunk = samples[max(0, i - back) : min(n, i + ahead)]
        size = len(chunk)
        smoothed.append(
            PressureSample(
                timestamp=sample.timestamp,
                heel=round_kpa(sum(s.heel for s in chunk) / size),
                left_ankle=round_kpa(sum(s.left_ankle for s in chunk) / size),
                right_ankle=round_kpa(sum(s.right_ankle for s in chunk) / size),
            )
        )
    return smoothed
