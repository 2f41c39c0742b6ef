"""Page visits: the unit exchanged with the server-driven backend."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NavigationOptions:
    """Client-side hints carried with a visit.

    ``preserve_state`` keeps local component state across the re-render,
    ``preserve_scroll`` keeps the scroll position, ``replace`` swaps the
    history entry instead of pushing a new one.
    """

    preserve_state: bool = False
    preserve_scroll: bool = False
    replace: bool = False


PRESERVE = NavigationOptions(preserve_state=True, preserve_scroll=True)


@dataclass(frozen=True)
class FileUpload:
    """A file blob travelling as one multipart entry."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass
class Page:
    """A page object returned by the backend after a visit."""

    component: str
    props: dict[str, Any] = field(default_factory=dict)
    url: str = ""
    version: str | None = None
    options: NavigationOptions = NavigationOptions()

    @property
    def errors(self) -> dict[str, str]:
        errors = self.props.get("errors") or {}
        return {str(k): str(v) for k, v in errors.items()}

    @property
    def flash(self) -> dict[str, Any]:
        return dict(self.props.get("flash") or {})
