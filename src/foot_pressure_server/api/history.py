"""Pressure history API endpoints."""

from typing import Annotated, Any

from litestar import Router, get
from litestar.exceptions import ValidationException
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK

from foot_pressure_server.core.config import settings
from foot_pressure_server.core.exceptions import InvalidHistoryQueryError
from foot_pressure_server.schemas.history import HistoryQuery, parse_history_query
from foot_pressure_server.services.history import HistoryService


def provide_history_service() -> HistoryService:
    """Build a HistoryService from application settings."""
    return HistoryService(settings.analytics_config())


def build_query(period: str, interval: str | None, patient_id: str | None) -> HistoryQuery:
    """Validate raw query parameters.

    Raises:
        ValidationException: If period, interval or patient id is invalid
    """
    try:
        return parse_history_query(
            period=period,
            interval=interval,
            patient_id=patient_id or settings.default_patient_id,
        )
    except InvalidHistoryQueryError as e:
        raise ValidationException(str(e)) from e


@get("/history", status_code=HTTP_200_OK, sync_to_thread=True)
def get_history(
    history_service: HistoryService,
    period: Annotated[str, Parameter(query="period", default="3d")] = "3d",
    interval: Annotated[str | None, Parameter(query="interval")] = None,
    patient_id: Annotated[str | None, Parameter(query="patientId")] = None,
    smoothing: Annotated[int | None, Parameter(query="smoothing", ge=0, le=60)] = None,
    points: Annotated[int | None, Parameter(query="points", ge=3, le=20000)] = None,
) -> dict[str, Any]:
    """Get pressure history with statistics and high-pressure events.

    Stats and events are always computed on the full-resolution series;
    ``smoothing`` and ``points`` only shape the returned ``data`` series.
    Without ``points``, series longer than ``CHART_MAX_POINTS`` are
    downsampled to ``CHART_DOWNSAMPLE_POINTS``.

    Example:
        GET /api/v1/history?period=7d&interval=5m&patientId=demo&smoothing=5&points=1500

    Returns:
        {
            "data": [{"ts": "...Z", "heel": 0.0, "leftAnkle": 250.3, "rightAnkle": 241.8}],
            "stats": {"period": "7d", "sampleCount": 2016, "avg": {...}, "max": {...},
                      "timeInHighPct": {...}, "highEvents": [...]},
            "meta": {"period": "7d", "interval": "5m", ...},
            "highSpans": [{"start": "...Z", "end": "...Z"}]
        }
    """
    query = build_query(period, interval, patient_id)
    result = history_service.get_history(query, smoothing=smoothing, target_points=points)
    return result.to_dict()


history_router = Router(
    path="/",
    route_handlers=[get_history],
    tags=["History"],
)
