"""Transient status messages with a stale-timer guard."""

from typing import Any, Callable, Optional

Scheduler = Callable[[float, Callable[[], None]], Any]

ERROR_TTL = 3.0


class StatusLine:
    """Status bar text with auto-reverting messages.

    A message shown with ``ttl > 0`` reverts to the persistent text after
    ``ttl`` seconds. Reverts are not cancelled; instead each ``show`` bumps
    ``generation`` and a revert scheduled by an older message does nothing.
    """

    def __init__(self, schedule: Scheduler, on_change: Optional[Callable[[], None]] = None) -> None:
        self._schedule = schedule
        self._on_change = on_change or (lambda: None)
        self.persistent: str = ""
        self.text: str = ""
        self.style: str = "status.filter"
        self.generation: int = 0

    def set_persistent(self, text: str) -> None:
        self.persistent = text
        self.generation += 1
        self.text = text
        self.style = "status.filter"
        self._on_change()

    def show(self, message: str, ttl: float = 0.0, style: str = "status.info") -> None:
        self.generation += 1
        generation = self.generation
        self.text = message
        self.style = style
        self._on_change()
        if ttl > 0:
            self._schedule(ttl, lambda: self._revert(generation))

    def error(self, exc: BaseException) -> None:
        self.show(f"ERROR - {exc}", ttl=ERROR_TTL, style="status.error")

    def _revert(self, generation: int) -> None:
        if generation != self.generation:
            return
        self.text = self.persistent
        self.style = "status.filter"
        self._on_change()


__all__ = ["StatusLine", "Scheduler", "ERROR_TTL"]
