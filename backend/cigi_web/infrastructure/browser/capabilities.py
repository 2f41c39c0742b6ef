"""Server-side stand-ins for browser capabilities."""

from cigi_web.application.interfaces.browser import ClipboardCapability, ShareCapability
from cigi_web.domain.exceptions import CapabilityUnavailableError


class UnavailableShare(ShareCapability):
    """No native share sheet outside a browser."""

    @property
    def is_available(self) -> bool:
        return False

    async def share(self, title: str, text: str, url: str) -> None:
        raise CapabilityUnavailableError("share")


class InMemoryClipboard(ClipboardCapability):
    def __init__(self, available: bool = True):
        self._available = available
        self.contents: str | None = None

    @property
    def is_available(self) -> bool:
        return self._available

    async def write_text(self, text: str) -> None:
        if not self._available:
            raise CapabilityUnavailableError("clipboard")
        self.contents = text
