"""Per-client admission control for the transfer endpoint."""

from __future__ import annotations

import threading
import time
from collections import defaultdict, deque
from typing import Deque, Dict


class SimpleRateLimiter:
    """Sliding-window in-memory rate limiter keyed by client identity.

    Clients with no request inside the window are evicted, at most once per
    window, so the key map only holds recently active clients.

    Single-process only; a multi-replica deployment must enforce limits at the edge.
    """

    def __init__(self, max_requests: int = 1, window_seconds: float = 1.0) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.requests: Dict[str, Deque[float]] = defaultdict(deque)
        self._lock = threading.Lock()
        self._last_prune = time.monotonic()

    def is_allowed(self, client_id: str) -> bool:
        """Record a request for ``client_id`` and report whether it is admitted."""
        now = time.monotonic()
        with self._lock:
            if now - self._last_prune >= self.window_seconds:
                self._prune(now)

            client_requests = self.requests[client_id]

            while client_requests and client_requests[0] <= now - self.window_seconds:
                client_requests.popleft()

            if len(client_requests) >= self.max_requests:
                return False

            client_requests.append(now)
            return True

    def _prune(self, now: float) -> None:
        cutoff = now - self.window_seconds
        stale = [key for key, stamps in self.requests.items() if not stamps or stamps[-1] <= cutoff]
        for key in stale:
            del self.requests[key]
        self._last_prune = now

    def reset(self) -> None:
        with self._lock:
            self.requests.clear()
            self._last_prune = time.monotonic()


__all__ = ["SimpleRateLimiter"]
