"""CSV Export API endpoints."""

import csv
import io
from typing import Annotated

from litestar import Router, get
from litestar.params import Parameter
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK

from foot_pressure_server.api.history import build_query
from foot_pressure_server.models.pressure import CSV_HEADER
from foot_pressure_server.services.history import HistoryService


@get("/history/export.csv", status_code=HTTP_200_OK, sync_to_thread=True)
def export_history_csv(
    history_service: HistoryService,
    period: Annotated[str, Parameter(query="period", default="3d")] = "3d",
    interval: Annotated[str | None, Parameter(query="interval")] = None,
    patient_id: Annotated[str | None, Parameter(query="patientId")] = None,
    smoothing: Annotated[int, Parameter(query="smoothing", default=0, ge=0, le=60)] = 0,
) -> Response[bytes]:
    """Export the pressure series for a period as CSV.

    Rows are the full-resolution series, smoothed when ``smoothing`` > 1.
    Never downsampled.

    Returns:
        CSV file with timestamp, heel, leftAnkle, rightAnkle columns

    Example:
        GET /api/v1/history/export.csv?period=7d&smoothing=5
    """
    query = build_query(period, interval, patient_id)
    result = history_service.get_history(query, smoothing=smoothing, auto_downsample=False)

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for sample in result.data:
        writer.writerow(sample.csv_row())

    suffix = f"-smoothed-{smoothing}" if smoothing > 1 else ""
    filename = f"pressure-history-{query.period.value}{suffix}.csv"

    return Response(
        content=output.getvalue().encode("utf-8"),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


export_router = Router(
    path="/",
    route_handlers=[export_history_csv],
    tags=["Export"],
)
