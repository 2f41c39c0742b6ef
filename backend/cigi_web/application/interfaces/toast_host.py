"""Abstract toast host: the third-party surface that displays notifications."""

from abc import ABC, abstractmethod

from cigi_web.domain.entities import Toast


class ToastHost(ABC):
    @abstractmethod
    def show(self, toast: Toast) -> None:
        """Display a toast. Fire-and-forget."""
        ...

    @abstractmethod
    def dismiss(self, toast_id: str | None = None) -> None:
        """Dismiss one toast, or all of them when ``toast_id`` is None."""
        ...
