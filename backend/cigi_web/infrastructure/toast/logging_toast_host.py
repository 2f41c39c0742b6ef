"""Toast host that renders notifications as colored log lines."""

import logging
from collections import deque

from cigi_web.application.interfaces.toast_host import ToastHost
from cigi_web.domain.entities import Toast
from cigi_web.infrastructure.logging.colored_logger import UiChannel, UiEventLogger

logger = logging.getLogger(__name__)
plog = UiEventLogger("LoggingToastHost")


class LoggingToastHost(ToastHost):
    """Keeps the most recent ``history_size`` toasts for inspection.

    ``active`` holds toasts not yet dismissed; dismissing never touches history.
    """

    def __init__(self, history_size: int = 50):
        self._history: deque[Toast] = deque(maxlen=history_size)
        self._active: dict[str, Toast] = {}

    def show(self, toast: Toast) -> None:
        self._history.append(toast)
        self._active[toast.id] = toast
        channel = UiChannel.for_toast(toast.type.value)
        if toast.message:
            plog.event(channel, toast.title, detail=toast.message, duration=toast.duration)
        else:
            plog.event(channel, toast.title, duration=toast.duration)

    def dismiss(self, toast_id: str | None = None) -> None:
        if toast_id is None:
            self._active.clear()
            return
        if self._active.pop(toast_id, None) is None:
            logger.debug("Dismiss for unknown toast %s", toast_id)

    @property
    def history(self) -> list[Toast]:
        return list(self._history)

    @property
    def active(self) -> list[Toast]:
        return list(self._active.values())

    def clear(self) -> None:
        self._history.clear()
        self._active.clear()
