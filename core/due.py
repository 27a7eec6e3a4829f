"""Due-date evaluation for task rows.

Parsing is best-effort: a malformed ``date``/``datetime`` string evaluates to
ZERO_INSTANT instead of raising, so a broken record still renders (and, for a
date-time, reads as overdue).
"""

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Optional

from .task import Due

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
DATE_FORMAT = "%Y-%m-%d"
ZERO_INSTANT = datetime(1, 1, 1, tzinfo=timezone.utc)

logger = logging.getLogger("todoist.due")


def _local_zone(tz: Optional[tzinfo]) -> tzinfo:
    if tz is not None:
        return tz
    return datetime.now().astimezone().tzinfo or timezone.utc


def _now(now: Optional[datetime], tz: Optional[tzinfo]) -> datetime:
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=_local_zone(tz))
    return current


def due_instant(due: Due) -> datetime:
    """Return the due moment as an aware UTC datetime, or ZERO_INSTANT."""
    try:
        if due.datetime:
            return datetime.strptime(due.datetime, DATETIME_FORMAT).replace(tzinfo=timezone.utc)
        if due.date:
            return datetime.strptime(due.date, DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        logger.debug("unparsable due record: %r", due)
    return ZERO_INSTANT


def _due_day(due: Due, tz: Optional[tzinfo]) -> date:
    instant = due_instant(due)
    if due.datetime and instant != ZERO_INSTANT:
        return instant.astimezone(_local_zone(tz)).date()
    return instant.date()


def _day_label(moment: datetime) -> str:
    # strftime drops the zero padding of years below 1000 on glibc
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}({moment.strftime('%a')})"


def due_display(due: Due, tz: Optional[tzinfo] = None) -> str:
    if due.datetime:
        instant = due_instant(due)
        if instant != ZERO_INSTANT:
            instant = instant.astimezone(_local_zone(tz))
        return f"{_day_label(instant)} {instant:%H:%M}"
    if due.date:
        return _day_label(due_instant(due))
    return ""


def is_overdue(due: Due, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> bool:
    current = _now(now, tz)
    if due.datetime:
        return due_instant(due) < current
    if due.date:
        return _due_day(due, tz) < current.astimezone(_local_zone(tz)).date()
    return False


def is_due_today(due: Due, now: Optional[datetime] = None, tz: Optional[tzinfo] = None) -> bool:
    if not due.is_set:
        return False
    current = _now(now, tz)
    return _due_day(due, tz) == current.astimezone(_local_zone(tz)).date()


__all__ = [
    "DATETIME_FORMAT",
    "DATE_FORMAT",
    "ZERO_INSTANT",
    "due_instant",
    "due_display",
    "is_overdue",
    "is_due_today",
]
