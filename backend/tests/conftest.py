"""Shared fakes and fixtures for the page-layer tests."""

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from cigi_web.config import get_settings
from cigi_web.application.interfaces import Confirmer, Navigator
from cigi_web.application.services import FlashToastBridge, Notifier
from cigi_web.domain.entities import FileUpload, NavigationOptions, Page
from cigi_web.infrastructure.routing.route_table import YamlRouteTable
from cigi_web.infrastructure.toast.logging_toast_host import LoggingToastHost


@dataclass
class Visit:
    method: str
    url: str
    data: dict[str, Any] | None
    files: dict[str, FileUpload] | None
    options: NavigationOptions


@dataclass
class FakeNavigator(Navigator):
    """Records every visit and answers with queued pages (or a default one)."""

    visits: list[Visit] = field(default_factory=list)
    responses: list[Page | Exception] = field(default_factory=list)

    async def visit(
        self,
        method: str,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, FileUpload] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        self.visits.append(
            Visit(method, url, dict(data) if data is not None else None, dict(files) if files else None, options)
        )
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response
        return Page(component="Ok", url=url, options=options)

    def respond_with_errors(self, **errors: str) -> None:
        self.responses.append(Page(component="Form", props={"errors": errors}))

    @property
    def last(self) -> Visit:
        return self.visits[-1]


class FakeConfirmer(Confirmer):
    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages: list[str] = []

    async def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


class ManualClock:
    """Injectable ``sleep`` that only advances when the test says so."""

    def __init__(self):
        self.sleeps: list[float] = []
        self._waiters: list[asyncio.Future] = []

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        future = asyncio.get_running_loop().create_future()
        self._waiters.append(future)
        await future

    async def tick(self, times: int = 1) -> None:
        """Release pending sleeps ``times`` times, letting callbacks run between."""
        for _ in range(times):
            await asyncio.sleep(0)
            waiters, self._waiters = self._waiters, []
            for future in waiters:
                if not future.done():
                    future.set_result(None)
            await asyncio.sleep(0)
            await asyncio.sleep(0)


async def no_sleep(seconds: float) -> None:
    return None


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def routes() -> YamlRouteTable:
    return YamlRouteTable.from_file(get_settings().routes_file)


@pytest.fixture
def confirmer() -> FakeConfirmer:
    return FakeConfirmer()


@pytest.fixture
def toast_host() -> LoggingToastHost:
    return LoggingToastHost()


@pytest.fixture
def notifier(toast_host: LoggingToastHost) -> Notifier:
    return Notifier(toast_host)


@pytest.fixture
def flash(notifier: Notifier) -> FlashToastBridge:
    return FlashToastBridge(notifier)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def instant_sleep():
    return no_sleep
