"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from cigi_web.config import Settings
from cigi_web.infrastructure.logging.log_config import category_levels


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_default_routes_file_ships_with_the_package():
    routes_file = Path(Settings().routes_file)
    assert routes_file.name == "routes.yaml"
    assert routes_file.exists()


def test_ui_defaults():
    settings = Settings()
    assert settings.toast_duration_ms == 4000
    assert settings.nav_business_unit_limit == 6
    assert settings.nav_community_club_limit == 8


def test_category_levels_follow_settings():
    levels = category_levels(Settings(log_level_http="ERROR", log_level_toast="debug", log_level_navigation="bogus"))

    assert levels["httpx"] == logging.ERROR
    assert levels["LoggingToastHost"] == logging.DEBUG
    assert levels["InertiaHttpNavigator"] == logging.INFO
