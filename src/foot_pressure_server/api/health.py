"""Health check endpoint."""

from typing import Any

from litestar import Router, get
from litestar.status_codes import HTTP_200_OK

from foot_pressure_server import __version__
from foot_pressure_server.waveforms import DEFAULT_WAVEFORMS


@get("/health", status_code=HTTP_200_OK, sync_to_thread=False)
def health_check() -> dict[str, Any]:
    """Health check endpoint.

    Returns:
        Status, version and the size of the loaded reference waveforms
    """
    return {
        "status": "ok",
        "version": __version__,
        "waveforms": {
            "heel": len(DEFAULT_WAVEFORMS.heel),
            "ankle": len(DEFAULT_WAVEFORMS.ankle),
        },
    }


health_router = Router(path="/", route_handlers=[health_check])
