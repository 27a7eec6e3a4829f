"""Session cache for the account tier lookup."""

import hashlib
import logging
from threading import Lock
from typing import Callable, Optional

logger = logging.getLogger("todoist.store")


def _token_digest(token: str) -> str:
    if not token:
        return ""
    return hashlib.sha256(token.encode()).hexdigest()[:16]


class TierCache:
    """Remembers ``is_premium`` for the current token.

    The lookup costs a sync-API round trip, so it runs once per session and
    again only after ``invalidate()`` or when the token changes.
    """

    def __init__(self, lookup: Callable[[], bool], token_provider: Callable[[], Optional[str]]) -> None:
        self._lookup = lookup
        self._token_provider = token_provider
        self._lock = Lock()
        self._value: Optional[bool] = None
        self._token_hash = ""

    def is_premium(self) -> bool:
        current = _token_digest(self._token_provider() or "")
        with self._lock:
            if self._value is not None and self._token_hash == current:
                return self._value
        value = self._lookup()
        logger.debug("account tier resolved: premium=%s", value)
        with self._lock:
            self._value = value
            self._token_hash = current
        return value

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._token_hash = ""


__all__ = ["TierCache"]
