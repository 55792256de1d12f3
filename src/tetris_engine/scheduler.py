"""Pluggable periodic schedulers used by the drop loop.

A scheduler exposes ``schedule(callback, period_ms)`` and returns a handle
with a ``cancel()`` method.  Once cancelled a timer never fires again.

``FrameScheduler`` keeps a virtual clock that the host advances explicitly,
for example by the frame delta of a pygame loop or by hand in tests.
``AsyncioScheduler`` runs repeating timers on an asyncio event loop.
"""

from __future__ import annotations

import asyncio
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol


Callback = Callable[[], None]


class CancelHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def schedule(self, callback: Callback, period_ms: float) -> CancelHandle:
        ...


@dataclass
class _FrameTimer:
    callback: Callback
    period: float
    due: float
    seq: int
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class FrameScheduler:
    """Scheduler driven by an externally advanced clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: List[_FrameTimer] = []
        self._seq = itertools.count()

    @property
    def active_timers(self) -> int:
        """Number of timers that have not been cancelled."""

        return sum(1 for timer in self._timers if not timer.cancelled)

    def schedule(self, callback: Callback, period_ms: float) -> _FrameTimer:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._timers = [t for t in self._timers if not t.cancelled]
        timer = _FrameTimer(callback, period_ms, self.now + period_ms, next(self._seq))
        self._timers.append(timer)
        return timer

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and fire every timer that comes due.

        Timers fire in due-time order, each as many times as its period fits
        into the elapsed time.  A timer cancelled by an earlier callback does
        not fire.  Returns the number of callbacks invoked.
        """

        target = self.now + ms
        fired = 0
        while True:
            due = [t for t in self._timers if not t.cancelled and t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due, t.seq))
            self.now = timer.due
            timer.due += timer.period
            timer.callback()
            fired += 1
        self.now = target
        self._timers = [t for t in self._timers if not t.cancelled]
        return fired


class _AsyncioTimer:
    __slots__ = ("_loop", "_callback", "_period", "_handle", "_cancelled")

    def __init__(
        self, loop: asyncio.AbstractEventLoop, callback: Callback, period_s: float
    ) -> None:
        self._loop = loop
        self._callback = callback
        self._period = period_s
        self._cancelled = False
        self._handle: Optional[asyncio.TimerHandle] = loop.call_later(period_s, self._fire)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Re-arm first so a callback that cancels this timer also cancels
        # the next occurrence.
        self._handle = self._loop.call_later(self._period, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioScheduler:
    """Repeating timers on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callback, period_ms: float) -> _AsyncioTimer:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimer(loop, callback, period_ms / 1000.0)


__all__ = [
    "AsyncioScheduler",
    "CancelHandle",
    "FrameScheduler",
    "Scheduler",
]
