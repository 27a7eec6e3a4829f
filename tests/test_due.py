from datetime import datetime, timedelta, timezone

import pytest

from core import Due, due_display, due_instant, is_due_today, is_overdue
from core.due import ZERO_INSTANT

UTC = timezone.utc
TOKYO = timezone(timedelta(hours=9))
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)


def test_display_datetime_in_requested_zone():
    due = Due(datetime="2026-10-18T09:30:00Z")
    assert due_display(due, tz=UTC) == "2026-10-18(Sun) 09:30"
    assert due_display(due, tz=TOKYO) == "2026-10-18(Sun) 18:30"


def test_display_date_only_and_unset():
    assert due_display(Due(date="2026-10-18"), tz=UTC) == "2026-10-18(Sun)"
    assert due_display(Due(), tz=UTC) == ""


def test_datetime_wins_over_date():
    due = Due(date="2026-10-20", datetime="2026-10-18T09:30:00Z")
    assert due_instant(due) == datetime(2026, 10, 18, 9, 30, tzinfo=UTC)


@pytest.mark.parametrize(
    "due,expected",
    [
        (Due(datetime="2026-10-18T11:59:00Z"), True),
        (Due(datetime="2026-10-18T12:01:00Z"), False),
        (Due(date="2026-10-17"), True),
        (Due(date="2026-10-18"), False),
        (Due(date="2026-10-19"), False),
        (Due(), False),
    ],
)
def test_is_overdue(due, expected):
    assert is_overdue(due, now=NOW, tz=UTC) is expected


@pytest.mark.parametrize(
    "due,expected",
    [
        (Due(datetime="2026-10-18T20:00:00Z"), True),
        (Due(datetime="2026-10-18T11:00:00Z"), True),
        (Due(date="2026-10-18"), True),
        (Due(date="2026-10-19"), False),
        (Due(), False),
    ],
)
def test_is_due_today(due, expected):
    assert is_due_today(due, now=NOW, tz=UTC) is expected


def test_day_comparison_uses_local_zone():
    # 23:30Z is already the next day in Tokyo.
    due = Due(datetime="2026-10-18T23:30:00Z")
    now = datetime(2026, 10, 18, 20, 0, tzinfo=TOKYO)
    assert not is_due_today(due, now=now, tz=TOKYO)
    assert is_due_today(due, now=now, tz=UTC)
    assert not is_overdue(due, now=now, tz=TOKYO)


def test_naive_now_is_read_in_given_zone():
    due = Due(datetime="2026-10-18T10:00:00Z")
    assert is_overdue(due, now=datetime(2026, 10, 18, 20, 0), tz=TOKYO) is True


def test_malformed_values_are_best_effort():
    broken_dt = Due(datetime="tomorrow-ish")
    assert due_instant(broken_dt) == ZERO_INSTANT
    assert is_overdue(broken_dt, now=NOW, tz=UTC)
    assert not is_due_today(broken_dt, now=NOW, tz=UTC)

    assert due_display(broken_dt, tz=TOKYO) == "0001-01-01(Mon) 00:00"

    broken_date = Due(date="18/10/2026")
    assert due_display(broken_date, tz=UTC) == "0001-01-01(Mon)"
    assert due_instant(broken_date) == ZERO_INSTANT
    assert is_overdue(broken_date, now=NOW, tz=UTC)
