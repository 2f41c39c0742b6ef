"""Cancelable asyncio timers: a repeating interval and a trailing debounce.

Both take an injectable ``sleep`` so callers (and tests) control time.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class IntervalTimer:
    """Calls ``callback`` every ``interval`` seconds until cancelled."""

    def __init__(self, interval: float, callback: Callable[[], object], sleep: Sleep = asyncio.sleep):
        self.interval = interval
        self._callback = callback
        self._sleep = sleep
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop (idempotent)."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop())

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def stop(self) -> None:
        """Cancel and wait for the loop to unwind."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _loop(self) -> None:
        while True:
            await self._sleep(self.interval)
            try:
                self._callback()
            except Exception:
                logger.exception("Interval timer callback failed")


class Debouncer:
    """Runs ``callback`` once, ``delay`` seconds after the last ``trigger()``."""

    def __init__(
        self,
        delay: float,
        callback: Callable[[], Awaitable[object]],
        sleep: Sleep = asyncio.sleep,
        on_error: Callable[[Exception], object] | None = None,
    ):
        self.delay = delay
        self._callback = callback
        self._on_error = on_error
        self._sleep = sleep
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def trigger(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire())

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for a pending call to complete (no-op when nothing is pending)."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    async def _fire(self) -> None:
        await self._sleep(self.delay)
        try:
            await self._callback()
        except Exception as e:
            logger.exception("Debounced callback failed")
            if self._on_error is not None:
                self._on_error(e)
