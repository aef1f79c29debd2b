"""History pipeline errors.

Two failure classes reach callers:

    InvalidHistoryQueryError: the request named an unknown period/interval
        or a malformed patient id. Raised before any generation happens.
    HistoryComputationError: anything unexpected inside the pipeline
        (e.g. an empty reference waveform). Deterministic for a given input,
        so it is never retried.
"""


class HistoryError(Exception):
    """Base class for history pipeline errors."""


class InvalidHistoryQueryError(HistoryError, ValueError):
    """Query parameters failed validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class HistoryComputationError(HistoryError):
    """Unexpected failure while building a history response."""
