import time
from threading import Lock
from typing import Any, Mapping, Optional


class RateLimiter:
    """Delays the next request after the service asked us to back off.

    Only ``Retry-After`` is honoured; the failed request itself is never
    re-sent.
    """

    def __init__(self, max_wait: float = 60.0) -> None:
        self._lock = Lock()
        self._next_ts = 0.0
        self.max_wait = max_wait
        self.last_wait: float = 0.0
        self.last_retry_after: Optional[float] = None

    def acquire(self) -> None:
        while True:
            with self._lock:
                wait = self._next_ts - time.time()
            if wait <= 0:
                return
            time.sleep(min(wait, 2.0))

    def update(self, headers: Mapping[str, Any]) -> None:
        retry_after = headers.get("Retry-After") or headers.get("retry-after")
        if not retry_after:
            return
        try:
            delay = min(float(retry_after), self.max_wait)
        except (TypeError, ValueError):
            return
        with self._lock:
            now = time.time()
            self.last_retry_after = delay
            self._next_ts = max(self._next_ts, now + delay)
            self.last_wait = max(0.0, self._next_ts - now)


__all__ = ["RateLimiter"]
