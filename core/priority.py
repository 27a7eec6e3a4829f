from enum import Enum
from typing import Union


class Priority(Enum):
    """Task priority as stored by the service (1=lowest .. 4=highest).

    The UI shows it inverted: stored 4 is "P1".
    """

    LOWEST = (1, "")
    LOW = (2, "priority.low")
    HIGH = (3, "priority.high")
    URGENT = (4, "priority.urgent")

    @property
    def stored(self) -> int:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def label(self) -> str:
        return f"P{5 - self.stored}"

    @classmethod
    def from_stored(cls, value: Union[int, str, None]) -> "Priority":
        try:
            stored = int(value or 1)
        except (TypeError, ValueError):
            return cls.LOWEST
        for priority in cls:
            if priority.stored == stored:
                return priority
        return cls.LOWEST

    @classmethod
    def from_display(cls, level: int) -> "Priority":
        """Map a displayed level (P1..P4) back to the stored priority."""
        if level not in (1, 2, 3, 4):
            raise ValueError(f"Invalid priority level: {level!r}")
        return cls.from_stored(5 - level)


__all__ = ["Priority"]
