"""Tick sources."""

from __future__ import annotations

import threading
import time

import pytest

from npuzzle.engine.gameplay import IntervalTicker, ManualTicker


def test_manual_ticker_fires_only_while_active() -> None:
    calls: list[int] = []
    ticker = ManualTicker()
    assert ticker.fire() is False

    ticker.start(lambda: calls.append(1))
    assert ticker.active
    assert ticker.fire() is True
    assert ticker.fire() is True

    ticker.cancel()
    assert not ticker.active
    assert ticker.fire() is False
    assert calls == [1, 1]
    assert ticker.fired == 2


def test_manual_ticker_cannot_restart() -> None:
    ticker = ManualTicker()
    ticker.start(lambda: None)
    ticker.cancel()
    with pytest.raises(RuntimeError):
        ticker.start(lambda: None)


def test_interval_ticker_repeats_until_cancelled() -> None:
    count = 0
    third = threading.Event()

    def on_tick() -> None:
        nonlocal count
        count += 1
        if count >= 3:
            third.set()

    ticker = IntervalTicker(0.01)
    ticker.start(on_tick)
    try:
        assert third.wait(2.0), "ticker never fired three times"
    finally:
        ticker.cancel()

    assert not ticker.active
    stopped_at = count
    time.sleep(0.05)
    assert count == stopped_at


def test_interval_ticker_cannot_restart() -> None:
    ticker = IntervalTicker(10)
    ticker.start(lambda: None)
    try:
        with pytest.raises(RuntimeError):
            ticker.start(lambda: None)
    finally:
        ticker.cancel()


@pytest.mark.parametrize("interval", [0, -1])
def test_interval_ticker_rejects_non_positive_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        IntervalTicker(interval)
