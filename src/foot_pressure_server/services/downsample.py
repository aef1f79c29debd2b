"""LTTB (Largest Triangle Three Buckets) downsampling for pressure series.

A 30-day window at one-minute resolution is over 40,000 samples; charts get
a fixed number of points that keep the visually significant peaks.
"""

from collections.abc import Sequence

from foot_pressure_server.models.pressure import PressureSample


def _point(sample: PressureSample) -> tuple[float, float]:
    """Chart coordinates: epoch milliseconds and mean pressure of all regions."""
    return sample.timestamp.timestamp() * 1000, sample.mean_pressure


def downsample_lttb(samples: Sequence[PressureSample], target_points: int) -> list[PressureSample]:
    """Downsample a series to ``target_points`` samples.

    The first and last samples are always kept. The samples in between are
    split into ``target_points - 2`` buckets; from each bucket the sample
    forming the largest triangle with the previously selected sample and
    the centroid of the next bucket is kept.

    Args:
        samples: Samples sorted by timestamp
        target_points: Number of output samples

    Returns:
        The input unchanged when it already fits or ``target_points < 3``,
        otherwise exactly ``target_points`` samples from the input
    """
    length = len(samples)
    if length <= target_points or target_points < 3:
        return list(samples)

    points = [_point(s) for s in samples]
    bucket_size = (length - 2) / (target_points - 2)

    sampled: list[PressureSample] = [samples[0]]
    a = 0  # Index of previously selected sample

    for i in range(target_points - 2):
        # Centroid of the next bucket (the last bucket's "next" is the final sample)
        next_start = int((i + 1) * bucket_size) + 1
        next_end = min(int((i + 2) * bucket_size) + 1, length)
        next_len = next_end - next_start
        avg_x = sum(points[j][0] for j in range(next_start, next_end)) / next_len
        avg_y = sum(points[j][1] for j in range(next_start, next_end)) / next_len

        bucket_start = int(i * bucket_size) + 1
        bucket_end = int((i + 1) * bucket_size) + 1

        a_x, a_y = points[a]
        max_area = -1.0
        max_idx = bucket_start

        for j in range(bucket_start, bucket_end):
            b_x, b_y = points[j]
            area = abs((a_x - avg_x) * (b_y - a_y) - (a_x - b_x) * (avg_y - a_y)) * 0.5
            if area > max_area:
                max_area = area
                max_idx = j

        sampled.append(samples[max_idx])
        a = max_idx

    sampled.append(samples[-1])
    return sampled
