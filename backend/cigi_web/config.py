import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_BACKEND_DIR = Path(__file__).resolve().parents[1]
_PACKAGE_DIR = Path(__file__).resolve().parent
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)
_UI_KEYS = frozenset({
    "toast_duration_ms",
    "media_skeleton_count",
    "carousel_interval_ms",
    "media_search_debounce_ms",
    "contact_submit_delay_ms",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "CIGI Web Page Layer"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:8000"]

    # Backend reached through the page protocol
    backend_base_url: str = "http://localhost:8000"
    inertia_version: str = ""
    request_timeout: float = 30.0
    routes_file: str = str(_PACKAGE_DIR / "data" / "routes.yaml")

    # UI tunables
    toast_duration_ms: int = 4000
    table_per_page_options: list[int] = [10, 25, 50, 100]
    media_skeleton_count: int = 8
    carousel_interval_ms: int = 5000
    media_search_debounce_ms: int = 500
    contact_submit_delay_ms: int = 1000
    nav_business_unit_limit: int = 6
    nav_community_club_limit: int = 8

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_navigation: str = "INFO"       # page visits to the backend
    log_level_toast: str = "INFO"            # toast host output

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json into UI settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key in _UI_KEYS:
                    if key in overrides and isinstance(overrides[key], int):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
