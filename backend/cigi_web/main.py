"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cigi_web.config import get_settings
from cigi_web.infrastructure.dependencies import get_route_table
from cigi_web.infrastructure.logging.log_config import setup_logging
from cigi_web.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging and load the route table."""
    settings = get_settings()
    setup_logging()

    routes = get_route_table()
    logger.info(
        "Page layer ready: %d routes, backend at %s",
        len(routes.names),
        settings.backend_base_url,
    )

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cigi_web.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
