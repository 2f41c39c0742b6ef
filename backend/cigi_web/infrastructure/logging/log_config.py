"""Logging setup for the page layer.

Every category in ``_CATEGORY_MAP`` gets its level from one Settings field, so
outbound HTTP chatter can be muted while page visits and toasts stay visible.

Usage:
    from cigi_web.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import sys

from cigi_web.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names it controls. UiEventLogger channels log under
# their component name, module loggers under their dotted path.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_navigation": (
        "InertiaHttpNavigator",
        "FormPage",
        "cigi_web.infrastructure.http",
        "cigi_web.infrastructure.routing",
        "cigi_web.application.forms",
        "cigi_web.application.pages",
    ),
    "log_level_toast": (
        "LoggingToastHost",
        "cigi_web.infrastructure.toast",
        "cigi_web.application.services.notifier",
    ),
}


def category_levels(settings: Settings) -> dict[str, int]:
    """Resolved level per logger name; later categories win on overlap."""
    levels: dict[str, int] = {}
    for field, names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field, "INFO"))
        for name in names:
            levels[name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root and per-category levels from settings.

    A stderr handler is installed only when the root logger has none, which is
    the case under pytest or when the module is run outside uvicorn.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s http=%s uvicorn=%s navigation=%s toast=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_navigation,
        settings.log_level_toast,
    )


def _parse_level(raw: str) -> int:
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
