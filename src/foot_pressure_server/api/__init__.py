"""API routes."""

from litestar import Router
from litestar.di import Provide

from foot_pressure_server.api.export import export_router
from foot_pressure_server.api.health import health_router
from foot_pressure_server.api.history import history_router, provide_history_service
from foot_pressure_server.core.config import settings

# Versioned API routers (history endpoints)
# These get the /api/v1 prefix
_v1_routers = [
    history_router,
    export_router,  # CSV data export
]

api_v1_router = Router(
    path=settings.api_prefix,
    route_handlers=_v1_routers,
    dependencies={"history_service": Provide(provide_history_service, sync_to_thread=False)},
)

# Export: health (root), v1 (prefixed)
# - health_router: /health - no version prefix
# - api_v1_router: /api/v1/* - history endpoints
api_routers = [health_router, api_v1_router]

__all__ = ["api_routers"]
