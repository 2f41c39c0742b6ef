"""Minimal click-event model for nested interactive elements."""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class ClickEvent:
    """A click bubbling from an inner control to its container.

    Inner actions call ``stop_propagation()`` so the container's own click
    handler (select / open / row click) does not fire as well.
    """

    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass(frozen=True)
class DownloadRequest:
    """What the browser needs to trigger a file download."""

    href: str
    filename: str


async def invoke(handler: Callable[..., Any], *args: Any) -> Any:
    """Call ``handler``; await the result when it is awaitable."""
    result = handler(*args)
    if inspect.isawaitable(result):
        return await result
    return result
