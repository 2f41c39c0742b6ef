"""Unit tests for the interval timer and debouncer."""

import pytest

from cigi_web.application.components.timer import Debouncer, IntervalTimer


@pytest.mark.asyncio
async def test_debouncer_fires_once_after_last_trigger(clock):
    calls = []

    async def callback():
        calls.append(len(calls))

    debouncer = Debouncer(0.5, callback, clock.sleep)
    debouncer.trigger()
    debouncer.trigger()
    debouncer.trigger()
    assert debouncer.pending

    await clock.tick()
    await debouncer.wait()

    assert calls == [0]
    assert clock.sleeps[-1] == 0.5
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_debouncer_cancel_prevents_call(clock):
    calls = []

    async def callback():
        calls.append(1)

    debouncer = Debouncer(0.5, callback, clock.sleep)
    debouncer.trigger()
    debouncer.cancel()
    await clock.tick()
    await debouncer.wait()

    assert calls == []


@pytest.mark.asyncio
async def test_interval_timer_survives_failing_callback(clock):
    calls = []

    def callback():
        calls.append(1)
        raise RuntimeError("boom")

    timer = IntervalTimer(1.0, callback, clock.sleep)
    timer.start()
    timer.start()
    await clock.tick(2)

    assert calls == [1, 1]
    assert timer.running
    await timer.stop()
    assert not timer.running


@pytest.mark.asyncio
async def test_debouncer_reports_failing_callback(clock, caplog):
    errors = []

    async def callback():
        raise RuntimeError("backend down")

    debouncer = Debouncer(0.5, callback, clock.sleep, on_error=errors.append)
    debouncer.trigger()
    await clock.tick()
    await debouncer.wait()

    assert [str(e) for e in errors] == ["backend down"]
    assert "Debounced callback failed" in caplog.text
    assert not debouncer.pending
