"""Level-paced automatic drop loop."""

from __future__ import annotations

import logging
import threading
from typing import Callable, ContextManager, Optional

from .config import GameConfig
from .scheduler import CancelHandle, Scheduler
from .utils import drop_interval_ms


LOGGER = logging.getLogger(__name__)


class GameLoop:
    """Cancellable recurring timer that calls ``on_tick`` once per period.

    Every call to :meth:`start` replaces the previous timer: the old handle
    is cancelled and invalidated before the new one is created, so a tick
    that was already queued for a superseded timer is dropped rather than
    forwarded.  The token check runs under ``lock``, which must be
    re-entrant; share it with whatever else calls :meth:`start` so a tick
    fired from another thread cannot slip in between a restart and its new
    timer.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_tick: Callable[[], None],
        config: Optional[GameConfig] = None,
        lock: Optional[ContextManager] = None,
    ) -> None:
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._config = config or GameConfig()
        self._handle: Optional[CancelHandle] = None
        self._token: Optional[object] = None
        self._period: Optional[int] = None
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def period(self) -> Optional[int]:
        """Period of the armed timer in milliseconds, ``None`` when stopped."""

        return self._period if self.running else None

    def period_for(self, level: int) -> int:
        cfg = self._config
        return drop_interval_ms(level, cfg.initial_speed, cfg.speed_decrease, cfg.min_speed)

    def start(self, level: int) -> None:
        """(Re)arm the loop with the period for ``level``."""

        with self._lock:
            self._arm(level)

    def _arm(self, level: int) -> None:
        self.stop()
        token = object()
        self._token = token
        self._period = self.period_for(level)

        def _tick() -> None:
            with self._lock:
                if self._token is token:
                    self._on_tick()

        self._handle = self._scheduler.schedule(_tick, self._period)
        LOGGER.debug("Drop loop armed at %d ms (level %d)", self._period, level)

    def stop(self) -> None:
        """Cancel the armed timer, if any."""

        with self._lock:
            self._token = None
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
