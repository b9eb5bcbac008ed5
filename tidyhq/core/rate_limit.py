"""Per-address attempt limiting for the authentication endpoints."""

import threading
import time
from collections import defaultdict, deque
from typing import Callable, Deque, Dict

from fastapi import Request

from tidyhq.core.errors import RateLimited

RATE_LIMIT_MESSAGE = "Too many authentication attempts, please try again later."


class RateLimiter:
    """Rolling-window counter: at most `max_attempts` hits per key within `window_seconds`."""

    def __init__(self, max_attempts: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Number of keys currently tracked."""
        with self._lock:
            return len(self._hits)

    def hit(self, key: str) -> bool:
        """Record an attempt for `key`; return False when it exceeds the limit."""
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(now)
            hits = self._hits[key]
            while hits and now - hits[0] >= self.window_seconds:
                hits.popleft()
            if len(hits) >= self.max_attempts:
                return False
            hits.append(now)
            return True

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()

    def _sweep(self, now: float) -> None:
        # Drop keys whose newest hit has left the window; caller holds the lock
        stale = [key for key, hits in self._hits.items() if not hits or now - hits[-1] >= self.window_seconds]
        for key in stale:
            del self._hits[key]
        self._last_sweep = now


def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def limit_attempts(scope: str):
    """Build a dependency enforcing the limiter registered under `scope` on app.state."""

    def dependency(request: Request) -> None:
        limiter: RateLimiter = request.app.state.rate_limiters[scope]
        if not limiter.hit(client_address(request)):
            raise RateLimited(RATE_LIMIT_MESSAGE)

    return dependency
