from __future__ import annotations

import asyncio

import pytest

from searchpanel.utils.debounce import Debouncer
from searchpanel.utils.signals import Signal


def test_signal_subscribe_and_unsubscribe():
    signal = Signal()
    calls = []
    unsubscribe = signal.subscribe(lambda: calls.append("a"))
    signal.subscribe(lambda: calls.append("b"))

    signal.emit()
    unsubscribe()
    unsubscribe()
    signal.emit()

    assert calls == ["a", "b", "b"]
    assert len(signal) == 1


def test_signal_listener_may_unsubscribe_during_emit():
    signal = Signal()
    calls = []

    def once():
        calls.append("once")
        remove()

    remove = signal.subscribe(once)
    signal.subscribe(lambda: calls.append("other"))

    signal.emit()
    signal.emit()

    assert calls == ["once", "other", "other"]


@pytest.mark.asyncio
async def test_debouncer_coalesces_rapid_submissions():
    debouncer = Debouncer(0.03)
    fired = []

    for value in range(3):
        debouncer.submit(lambda value=value: fired.append(value))
        await asyncio.sleep(0.01)
    assert debouncer.pending is True

    await asyncio.sleep(0.06)
    assert fired == [2]
    assert debouncer.pending is False


@pytest.mark.asyncio
async def test_debouncer_cancel_drops_pending_callback():
    debouncer = Debouncer(0.02)
    fired = []
    debouncer.submit(lambda: fired.append(1))
    debouncer.cancel()

    await asyncio.sleep(0.05)
    assert fired == []
