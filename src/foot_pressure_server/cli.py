"""CLI entry point for foot-pressure-server."""

import csv
import json
import sys
from pathlib import Path

import typer
import uvicorn

from foot_pressure_server import __version__
from foot_pressure_server.core.config import settings
from foot_pressure_server.core.exceptions import HistoryError
from foot_pressure_server.core.logging import configure_logging
from foot_pressure_server.models.pressure import CSV_HEADER
from foot_pressure_server.schemas.history import parse_history_query
from foot_pressure_server.services.history import HistoryResult, HistoryService

app = typer.Typer(
    name="foot-pressure-server",
    help="Foot pressure history and analytics server",
    no_args_is_help=True,
)


def _run_history(
    period: str, interval: str | None, patient_id: str | None, smoothing: int
) -> HistoryResult:
    configure_logging(settings.log_level)
    try:
        query = parse_history_query(
            period=period,
            interval=interval,
            patient_id=patient_id or settings.default_patient_id,
        )
        service = HistoryService(settings.analytics_config())
        return service.get_history(query, smoothing=smoothing, auto_downsample=False)
    except HistoryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (overrides config)"),
    port: int = typer.Option(None, help="Port to bind to (overrides config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server.

    Example:
        foot-pressure-server serve
        foot-pressure-server serve --host 0.0.0.0 --port 8080 --reload
    """
    uvicorn.run(
        "foot_pressure_server.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command()
def history(
    period: str = typer.Option("3d", help="History window: 3d, 7d or 30d"),
    interval: str = typer.Option(None, help="Sample spacing: 1m, 5m or 1h"),
    patient_id: str = typer.Option(None, "--patient-id", help="Patient identifier"),
) -> None:
    """Print statistics and high-pressure events as JSON.

    Example:
        foot-pressure-server history --period 7d --interval 1m
    """
    result = _run_history(period, interval, patient_id, smoothing=0)
    summary = {"stats": result.stats.to_dict(), "meta": result.meta.to_dict()}
    typer.echo(json.dumps(summary, indent=2))


@app.command()
def export(
    period: str = typer.Option("3d", help="History window: 3d, 7d or 30d"),
    interval: str = typer.Option(None, help="Sample spacing: 1m, 5m or 1h"),
    patient_id: str = typer.Option(None, "--patient-id", help="Patient identifier"),
    smoothing: int = typer.Option(0, min=0, help="Rolling-average window (0 = raw)"),
    output: Path = typer.Option(None, "--output", "-o", help="CSV file (default: stdout)"),
) -> None:
    """Export the pressure series as CSV.

    Example:
        foot-pressure-server export --period 30d --smoothing 5 -o history.csv
    """
    result = _run_history(period, interval, patient_id, smoothing=smoothing)

    if output is None:
        writer = csv.writer(sys.stdout, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(sample.csv_row() for sample in result.data)
        return

    with output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(sample.csv_row() for sample in result.data)
    typer.echo(f"Wrote {len(result.data)} rows to {output}", err=True)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"foot-pressure-server v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
