"""Commit timestamps that never go backwards within one process."""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

_TICK = timedelta(microseconds=1)


class MonotonicClock:
    """Wall-clock UTC timestamps, bumped by a microsecond when the system clock
    stalls or steps back, so recency ordering follows commit order."""

    def __init__(self, source: Optional[Callable[[], datetime]] = None) -> None:
        self._source = source or (lambda: datetime.now(timezone.utc))
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source()
            if self._last is not None and current <= self._last:
                current = self._last + _TICK
            self._last = current
            return current


default_clock = MonotonicClock()

__all__ = ["MonotonicClock", "default_clock"]
