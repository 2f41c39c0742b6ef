"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

import httpx
from fastapi import Depends

from cigi_web.config import Settings, get_settings
from cigi_web.application.services import FlashToastBridge, Notifier
from cigi_web.infrastructure.http.inertia_navigator import InertiaHttpNavigator
from cigi_web.infrastructure.routing.route_table import YamlRouteTable
from cigi_web.infrastructure.toast.logging_toast_host import LoggingToastHost


@lru_cache
def get_route_table() -> YamlRouteTable:
    """Process-wide named-route table, loaded once from the routes file."""
    return YamlRouteTable.from_file(get_settings().routes_file)


@lru_cache
def get_toast_host() -> LoggingToastHost:
    """Process-wide toast host; its history is what ``GET /toasts`` returns."""
    return LoggingToastHost()


def get_notifier(
    host: LoggingToastHost = Depends(get_toast_host),
    settings: Settings = Depends(get_settings),
) -> Notifier:
    return Notifier(host, default_duration_ms=settings.toast_duration_ms)


def get_flash_bridge(notifier: Notifier = Depends(get_notifier)) -> FlashToastBridge:
    return FlashToastBridge(notifier)


async def get_navigator(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[InertiaHttpNavigator, None]:
    """Provides a navigator bound to one pooled client for the request's lifetime."""
    async with httpx.AsyncClient(timeout=settings.request_timeout, follow_redirects=True) as client:
        yield InertiaHttpNavigator(
            settings.backend_base_url,
            version=settings.inertia_version,
            http_client=client,
        )
