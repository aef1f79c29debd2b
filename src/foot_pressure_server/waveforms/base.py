"""Reference waveform container and run-length expansion."""

from collections.abc import Iterable
from dataclasses import dataclass

from foot_pressure_server.core.numeric import round_kpa


def expand_runs(runs: Iterable[tuple[float, int]]) -> tuple[float, ...]:
    """Expand (value, count) runs into a flat tuple of values.

    Args:
        runs: Pairs of value and how many consecutive samples carry it

    Returns:
        Immutable sequence of values, one per sample

    Raises:
        ValueError: If a run has a non-positive count
    """
    values: list[float] = []
    for value, count in runs:
        if count <= 0:
            raise ValueError(f"Run length must be positive, got {count} for value {value}")
        values.extend([round_kpa(float(value))] * count)
    return tuple(values)


@dataclass(frozen=True, slots=True)
class ReferenceWaveform:
    """Recorded pressure sequence sampled with wraparound.

    Attributes:
        name: Channel the waveform was recorded from
        values: Pressure values (kPa) in recording order
        threshold: High-pressure threshold configured for the recording
    """

    name: str
    values: tuple[float, ...]
    threshold: float

    @classmethod
    def from_runs(
        cls, name: str, runs: Iterable[tuple[float, int]], threshold: float
    ) -> "ReferenceWaveform":
        """Build a waveform from run-length encoded data."""
        return cls(name=name, values=expand_runs(runs), threshold=threshold)

    def __len__(self) -> int:
        return len(self.values)

    def loaded(self) -> "ReferenceWaveform":
        """Get the waveform with its unloaded (zero) stretches removed."""
        return ReferenceWaveform(
            name=self.name,
            values=tuple(v for v in self.values if v > 0),
            threshold=self.threshold,
        )

    def at(self, index: int) -> float:
        """Get the value at an index, cycling past the end.

        Raises:
            ValueError: If the waveform is empty
        """
        if not self.values:
            raise ValueError(f"Reference waveform '{self.name}' is empty")
        return self.values[index % len(self.values)]
