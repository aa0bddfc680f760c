"""One-shot tick source that drives the countdown."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

log = logging.getLogger(__name__)

TICK_SECONDS = 1.0


class ClockError(RuntimeError):
    """The tick timer could not be started. The loop cannot go on without it."""


class TickClock:
    """Calls ``on_tick`` once, ``interval`` seconds after each :meth:`arm`.

    The callback runs on the timer's own thread, so it should only hand the
    tick over (e.g. put it on a queue). Arming while a tick is still pending
    does nothing: there is never more than one tick in flight.
    """

    def __init__(self, on_tick: Callable[[], None], interval: float = TICK_SECONDS) -> None:
        self._on_tick = on_tick
        self._interval = interval
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def arm(self) -> bool:
        """Schedule the next tick. Returns False if one was already pending."""
        with self._lock:
            if self._timer is not None:
                return False
            timer = threading.Timer(self._interval, self._fire)
            timer.daemon = True
            try:
                timer.start()
            except RuntimeError as exc:
                raise ClockError(f"could not start tick timer: {exc}") from exc
            self._timer = timer
            return True

    def _fire(self) -> None:
        with self._lock:
            self._timer = None
        self._on_tick()

    def close(self) -> None:
        """Drop any pending tick. Only used on shutdown."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
