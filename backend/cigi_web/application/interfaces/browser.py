"""Best-effort browser capabilities: native share and clipboard."""

from abc import ABC, abstractmethod


class ShareCapability(ABC):
    @property
    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    async def share(self, title: str, text: str, url: str) -> None:
        """Open the native share sheet. Raises on failure or cancellation."""
        ...


class ClipboardCapability(ABC):
    @property
    @abstractmethod
    def is_available(self) -> bool:
        ...

    @abstractmethod
    async def write_text(self, text: str) -> None:
        """Copy ``text`` to the clipboard. Raises on failure."""
        ...
