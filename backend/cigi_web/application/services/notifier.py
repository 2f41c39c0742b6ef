"""Process-wide toast dispatch and flash-message bridging."""

import logging
from collections.abc import Mapping
from typing import Any

from cigi_web.application.interfaces import ToastHost
from cigi_web.domain.entities import Toast, ToastType

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Terjadi kesalahan yang tidak diketahui"


class Notifier:
    """Dispatches toasts of four severities through a toast host."""

    def __init__(self, host: ToastHost, default_duration_ms: int = 4000):
        self._host = host
        self._default_duration = default_duration_ms

    def notify(
        self,
        type: ToastType | str,
        title: str,
        message: str | None = None,
        duration: int | None = None,
    ) -> str:
        toast = Toast(
            type=ToastType(type),
            title=title,
            message=message,
            duration=duration if duration is not None else self._default_duration,
        )
        self._host.show(toast)
        return toast.id

    def success(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.notify(ToastType.SUCCESS, title, message, duration)

    def error(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.notify(ToastType.ERROR, title, message, duration)

    def warning(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.notify(ToastType.WARNING, title, message, duration)

    def info(self, title: str, message: str | None = None, duration: int | None = None) -> str:
        return self.notify(ToastType.INFO, title, message, duration)

    def loading(self, title: str, message: str | None = None) -> str:
        """Show a toast that stays until dismissed; returns its id."""
        toast = Toast(type=ToastType.LOADING, title=title, message=message, duration=None)
        self._host.show(toast)
        return toast.id

    def dismiss(self, toast_id: str | None = None) -> None:
        self._host.dismiss(toast_id)


class FlashToastBridge:
    """Turns one-shot flash props of a re-rendered page into toasts."""

    _KEYS = (ToastType.SUCCESS, ToastType.ERROR, ToastType.WARNING, ToastType.INFO)

    def __init__(self, notifier: Notifier):
        self._notifier = notifier

    def handle(self, props: Mapping[str, Any]) -> list[str]:
        """Emit a toast per present flash key; returns the toast ids."""
        flash = props.get("flash")
        source: Mapping[str, Any] = flash if isinstance(flash, Mapping) else props

        ids: list[str] = []
        for kind in self._KEYS:
            value = source.get(kind.value)
            if not value:
                continue
            if kind is ToastType.ERROR:
                ids.append(self._notifier.error(self._error_text(value)))
            else:
                ids.append(self._notifier.notify(kind, str(value)))
        return ids

    @staticmethod
    def _error_text(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, Mapping) and isinstance(value.get("message"), str):
            return value["message"]
        logger.debug("Unrecognised flash error payload: %r", value)
        return UNKNOWN_ERROR_MESSAGE
