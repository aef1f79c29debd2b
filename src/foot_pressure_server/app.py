"""Litestar application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from litestar import Litestar, Request, Response
from litestar.openapi import OpenAPIConfig
from litestar.status_codes import HTTP_500_INTERNAL_SERVER_ERROR

from foot_pressure_server import __version__
from foot_pressure_server.api import api_routers
from foot_pressure_server.core.config import settings
from foot_pressure_server.core.exceptions import HistoryComputationError
from foot_pressure_server.core.logging import configure_logging
from foot_pressure_server.routes import root_redirect
from foot_pressure_server.waveforms import DEFAULT_WAVEFORMS

configure_logging(settings.log_level)

logger = structlog.get_logger()

# Clients only ever see this; details stay in the server log
HISTORY_ERROR_BODY = {"error": "Failed to fetch history data"}


def history_error_handler(
    request: Request[Any, Any, Any], exc: HistoryComputationError
) -> Response[Any]:
    """Translate pipeline failures into a generic 500 response."""
    logger.error("History request failed", path=request.url.path, error=str(exc))
    return Response(content=HISTORY_ERROR_BODY, status_code=HTTP_500_INTERNAL_SERVER_ERROR)


@asynccontextmanager
async def lifespan(app: Litestar) -> AsyncIterator[None]:
    """Application lifespan manager.

    Logs startup configuration; reference waveforms are already expanded
    at import time.
    """
    logger.info(
        "Starting foot-pressure-server",
        version=__version__,
        heel_high_kpa=settings.heel_high_kpa,
        ankle_high_kpa=settings.ankle_high_kpa,
        ankle_source=settings.ankle_source.value,
        heel_waveform_samples=len(DEFAULT_WAVEFORMS.heel),
        ankle_waveform_samples=len(DEFAULT_WAVEFORMS.ankle),
    )

    yield

    logger.info("Shutdown complete")


def create_app() -> Litestar:
    """Create Litestar application.

    Returns:
        Configured Litestar app instance
    """
    return Litestar(
        route_handlers=[root_redirect, *api_routers],
        lifespan=[lifespan],
        exception_handlers={HistoryComputationError: history_error_handler},
        openapi_config=OpenAPIConfig(
            title="foot-pressure-server API",
            version=__version__,
            description="Foot pressure history, statistics and high-pressure events",
        ),
        debug=settings.log_level == "DEBUG",
    )


# Application instance
app = create_app()
