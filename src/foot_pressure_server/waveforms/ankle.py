"""Left ankle pressure recording, run-length encoded as (kPa, sample count).

Ankle pressure is zero while the heel is loaded (standing) and positive
while the patient lies down.
"""

from foot_pressure_server.waveforms.base import ReferenceWaveform

ANKLE_PRESSURE_THRESHOLD = 643.0

_ANKLE_RUNS: tuple[tuple[float, int], ...] = (
    (0, 800),
    (320, 60), (345, 60), (352, 60), (365, 60), (340, 60),
    (0, 300),
    (330, 60), (347, 60), (362, 60), (355, 60), (338, 60),
    (0, 300),
    (342, 60), (357, 60), (348, 60), (339, 60), (335, 60), (370, 60),
)  # fmt: skip

ANKLE_WAVEFORM = ReferenceWaveform.from_runs("ankle", _ANKLE_RUNS, ANKLE_PRESSURE_THRESHOLD)
