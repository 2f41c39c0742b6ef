"""Health check endpoint."""

from fastapi import APIRouter, Depends

from cigi_web.config import Settings, get_settings
from cigi_web.infrastructure.dependencies import get_route_table
from cigi_web.infrastructure.routing.route_table import YamlRouteTable

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_settings),
    routes: YamlRouteTable = Depends(get_route_table),
) -> dict:
    """Liveness plus the backend this page layer navigates to."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "backend": settings.backend_base_url,
        "routes": len(routes.names),
    }
