"""Cancellable tick sources that drive a session's clock.

A session starts exactly one tick source when it begins and cancels it
when it leaves the active state.  ``IntervalTicker`` fires on its own
timer thread; ``ManualTicker`` only fires when told to, which suits a
collaborator that owns the clock (and tests).
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

TickCallback = Callable[[], None]


class TickSource(Protocol):
    @property
    def active(self) -> bool: ...

    def start(self, callback: TickCallback) -> None: ...

    def cancel(self) -> None: ...


TickerFactory = Callable[[], TickSource]


class IntervalTicker:
    """Calls *callback* every *interval* seconds until cancelled."""

    def __init__(self, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}.")
        self.interval = interval
        self._callback: TickCallback | None = None
        self._timer: threading.Timer | None = None
        self._active = False
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._active

    def start(self, callback: TickCallback) -> None:
        with self._lock:
            if self._active or self._callback is not None:
                raise RuntimeError("IntervalTicker can only be started once.")
            self._callback = callback
            self._active = True
            self._schedule()

    def cancel(self) -> None:
        with self._lock:
            self._active = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    # -- helpers --------------------------------------------------------------

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._fire)
        self._timer.daemon = True
        self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            # A fire that raced with cancel() is dropped.
            if not self._active:
                return
            callback = self._callback
            self._schedule()
        callback()


class ManualTicker:
    """Tick source fired explicitly via ``fire()``."""

    def __init__(self) -> None:
        self._callback: TickCallback | None = None
        self._active = False
        self.fired = 0

    @property
    def active(self) -> bool:
        return self._active

    def start(self, callback: TickCallback) -> None:
        if self._callback is not None:
            raise RuntimeError("ManualTicker can only be started once.")
        self._callback = callback
        self._active = True

    def cancel(self) -> None:
        self._active = False

    def fire(self) -> bool:
        """Deliver one tick.  Returns False if the ticker is not running."""
        if not self._active:
            return False
        self.fired += 1
        self._callback()
        return True
