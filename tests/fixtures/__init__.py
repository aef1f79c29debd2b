"""Test fixtures for foot-pressure-server."""

from tests.fixtures.pressure_seed import (
    SERIES_START,
    SERIES_STEP,
    make_random_series,
    make_series,
)

__all__ = [
    "SERIES_START",
    "SERIES_STEP",
    "make_random_series",
    "make_series",
]
