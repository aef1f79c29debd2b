"""Pydantic schemas for history queries."""

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from foot_pressure_server.core.exceptions import InvalidHistoryQueryError
from foot_pressure_server.models.pressure import Interval, Period

# Regex for valid patient_id format (alphanumeric, underscores, hyphens)
PATIENT_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class HistoryQuery(BaseModel):
    """Validated history request.

    ``interval`` is optional on input; use ``resolved_interval`` to get the
    period default when it was omitted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    patient_id: str = Field(alias="patientId", description="Patient identifier")
    period: Period = Field(description="History window: 3d, 7d or 30d")
    interval: Interval | None = Field(default=None, description="Sample spacing: 1m, 5m or 1h")

    @field_validator("patient_id")
    @classmethod
    def validate_patient_id(cls, value: str) -> str:
        """Validate patient_id format to prevent injection attacks."""
        if not value or len(value) > 100:
            raise ValueError("must be 1-100 characters")
        if not PATIENT_ID_PATTERN.match(value):
            raise ValueError("must be alphanumeric with _ or - only")
        return value

    @property
    def resolved_interval(self) -> Interval:
        """Requested interval, or the period's default."""
        return self.interval or self.period.default_interval


def parse_history_query(
    period: str | Period,
    interval: str | Interval | None,
    patient_id: str,
) -> HistoryQuery:
    """Build a HistoryQuery from raw parameters.

    Args:
        period: Period value (3d, 7d, 30d)
        interval: Interval value (1m, 5m, 1h); None or empty for the period default
        patient_id: Patient identifier

    Returns:
        Validated query

    Raises:
        InvalidHistoryQueryError: If any parameter is invalid. Unknown enum
            values are rejected, never coerced to a default.
    """
    try:
        return HistoryQuery.model_validate(
            {"patientId": patient_id, "period": period, "interval": interval or None}
        )
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        raise InvalidHistoryQueryError(
            f"Invalid {field or 'query'}: {first['msg']}", field=field
        ) from e
