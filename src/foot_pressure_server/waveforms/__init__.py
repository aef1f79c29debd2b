"""Reference pressure waveforms, expanded once at import."""

from dataclasses import dataclass

from foot_pressure_server.waveforms.ankle import ANKLE_PRESSURE_THRESHOLD, ANKLE_WAVEFORM
from foot_pressure_server.waveforms.base import ReferenceWaveform, expand_runs
from foot_pressure_server.waveforms.heel import HEEL_PRESSURE_THRESHOLD, HEEL_WAVEFORM


@dataclass(frozen=True, slots=True)
class WaveformSource:
    """Heel and ankle recordings the sample generator draws from."""

    heel: ReferenceWaveform
    ankle: ReferenceWaveform


DEFAULT_WAVEFORMS = WaveformSource(heel=HEEL_WAVEFORM, ankle=ANKLE_WAVEFORM)

__all__ = [
    "ANKLE_PRESSURE_THRESHOLD",
    "ANKLE_WAVEFORM",
    "DEFAULT_WAVEFORMS",
    "HEEL_PRESSURE_THRESHOLD",
    "HEEL_WAVEFORM",
    "ReferenceWaveform",
    "WaveformSource",
    "expand_runs",
]
