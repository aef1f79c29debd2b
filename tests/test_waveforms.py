"""Tests for reference waveform expansion and lookup."""

import pytest

from foot_pressure_server.waveforms import (
    ANKLE_WAVEFORM,
    HEEL_PRESSURE_THRESHOLD,
    HEEL_WAVEFORM,
    ReferenceWaveform,
    expand_runs,
)
from foot_pressure_server.waveforms.ankle import _ANKLE_RUNS
from foot_pressure_server.waveforms.heel import _HEEL_RUNS


class TestExpandRuns:
    """Tests for expand_runs."""

    def test_expands_each_run(self) -> None:
        """Test every (value, count) pair becomes count copies of value."""
        assert expand_runs([(0, 2), (4, 1), (7, 3)]) == (0.0, 0.0, 4.0, 7.0, 7.0, 7.0)

    def test_values_rounded_to_one_decimal(self) -> None:
        """Test recorded values are finalized with kPa rounding."""
        assert expand_runs([(4.26, 1)]) == (4.3,)

    def test_empty_runs(self) -> None:
        """Test no runs gives an empty waveform."""
        assert expand_runs([]) == ()

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_non_positive_counts(self, count: int) -> None:
        """Test runs must have a positive length."""
        with pytest.raises(ValueError, match="Run length must be positive"):
            expand_runs([(10, count)])


class TestReferenceWaveform:
    """Tests for ReferenceWaveform."""

    def test_heel_waveform_length_matches_runs(self) -> None:
        """Test the heel recording expands to the sum of its run lengths."""
        assert len(HEEL_WAVEFORM) == sum(count for _, count in _HEEL_RUNS)
        assert HEEL_WAVEFORM.threshold == HEEL_PRESSURE_THRESHOLD

    def test_ankle_waveform_length_matches_runs(self) -> None:
        """Test the ankle recording expands to the sum of its run lengths."""
        assert len(ANKLE_WAVEFORM) == sum(count for _, count in _ANKLE_RUNS)

    def test_heel_waveform_shape(self) -> None:
        """Test the heel recording starts and ends unloaded with a loaded middle."""
        assert HEEL_WAVEFORM.at(0) == 0.0
        assert HEEL_WAVEFORM.at(700) == 0.0
        assert HEEL_WAVEFORM.at(701) == 4.0
        assert HEEL_WAVEFORM.at(len(HEEL_WAVEFORM) - 1) == 0.0
        assert max(HEEL_WAVEFORM.values) == 199.0

    def test_lookup_wraps_around(self) -> None:
        """Test indexes past the end cycle back to the start."""
        n = len(HEEL_WAVEFORM)
        assert HEEL_WAVEFORM.at(n) == HEEL_WAVEFORM.at(0)
        assert HEEL_WAVEFORM.at(n + 701) == HEEL_WAVEFORM.at(701)

    def test_values_are_immutable(self) -> None:
        """Test the expanded values are stored as a tuple."""
        assert isinstance(HEEL_WAVEFORM.values, tuple)

    def test_loaded_drops_rest_periods(self) -> None:
        """Test loaded() keeps only positive values, in recording order."""
        waveform = ReferenceWaveform.from_runs("ankle", [(0, 3), (320, 2), (0, 1), (345, 1)], 643.0)

        loaded = waveform.loaded()

        assert loaded.values == (320.0, 320.0, 345.0)
        assert loaded.threshold == 643.0
        assert all(v > 0 for v in ANKLE_WAVEFORM.loaded().values)

    def test_empty_waveform_lookup_raises(self) -> None:
        """Test sampling an empty recording fails loudly."""
        empty = ReferenceWaveform.from_runs("heel", [], threshold=100.0)

        with pytest.raises(ValueError, match="empty"):
            empty.at(0)
