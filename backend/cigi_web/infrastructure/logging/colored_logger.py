"""Colored UI event logger: ANSI-colored console logging for page-layer events.

Provides a UiEventLogger with color-coded output per channel, making it easy
to follow visits, submissions and toasts in the terminal.

Color scheme:
    🔵 Blue: Navigation (page visits)
    🟣 Magenta: Form submission
    🟢 Green: Success toast
    🟡 Yellow: Warning toast
    🟠 Cyan: Info / loading toast
    🔴 Red: Error toast / failures
    ⚪ Gray: Timing / details
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Channel Definitions ──────────────────────────────────────────────

class UiChannel:
    """Predefined channels with colors and icons."""

    NAVIGATE = ("NAVIGATE", _Colors.BLUE, "🧭")
    SUBMIT = ("SUBMIT", _Colors.MAGENTA, "📨")
    TOAST_SUCCESS = ("TOAST", _Colors.GREEN, "✅")
    TOAST_ERROR = ("TOAST", _Colors.RED, "❗")
    TOAST_WARNING = ("TOAST", _Colors.YELLOW, "⚠️")
    TOAST_INFO = ("TOAST", _Colors.CYAN, "💬")
    TOAST_LOADING = ("TOAST", _Colors.CYAN, "⏳")
    ERROR = ("ERROR", _Colors.RED, "❌")

    @classmethod
    def for_toast(cls, toast_type: str) -> tuple[str, str, str]:
        return {
            "success": cls.TOAST_SUCCESS,
            "error": cls.TOAST_ERROR,
            "warning": cls.TOAST_WARNING,
            "info": cls.TOAST_INFO,
            "loading": cls.TOAST_LOADING,
        }.get(toast_type, cls.TOAST_INFO)


# ── UiEventLogger ────────────────────────────────────────────────────

class UiEventLogger:
    """Color-coded logger for page-layer events.

    Usage:
        log = UiEventLogger("InertiaHttpNavigator")
        with log.timed_step(UiChannel.NAVIGATE, "GET /admin/news", page=2):
            page = await navigator.get(url, params)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def event(self, channel: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a single event line in the channel color."""
        label, color, icon = channel
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, channel: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = channel
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, channel: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed step in red."""
        label, _, icon = channel
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.DIM}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    @contextmanager
    def timed_step(self, channel: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time."""
        self.event(channel, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(channel, f"{message} failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(channel, f"{message} ({elapsed:.2f}s)")
