# -*- coding: utf-8 -*-
"""Local-time helpers shared by storage, models and the dashboard.

Record dates are stored as naive local-time ISO strings (``YYYY-MM-DDTHH:MM:SS``)
so that day windows computed from server "now" line up with stored values and
compare correctly as plain strings inside SQLite.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional, Tuple


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def local_now() -> datetime:
    return datetime.now()


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_datetime(value: Any) -> Optional[datetime]:
    """Best-effort conversion of a datetime/date/ISO string to local naive time."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    s = str(value).strip()
    if not s:
        return None
    # Handle trailing Z.
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return to_local_naive(datetime.fromisoformat(s))
    except ValueError:
        pass
    try:
        return datetime.combine(date.fromisoformat(s[:10]), time.min)
    except ValueError:
        return None


def to_storage(value: datetime) -> str:
    return to_local_naive(value).isoformat(timespec="seconds")


def normalize_timestamp(value: Any) -> str:
    """Validate and normalize an incoming record date; raises ValueError when unparseable."""
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return to_storage(parsed)


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(to_local_naive(value).date(), time.min)


def day_window(day: Any) -> Tuple[str, str]:
    """Return the ``[start, end)`` storage bounds of the local calendar day containing ``day``."""
    parsed = parse_datetime(day)
    if parsed is None:
        raise ValueError(f"Invalid date: {day!r}")
    start = start_of_day(parsed)
    return to_storage(start), to_storage(start + timedelta(days=1))


def months_before(value: datetime, months: int) -> datetime:
    """Same wall-clock time ``months`` calendar months earlier, day clamped to the month length."""
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    # Clamped rather than rolled over: one month before Mar 31 is Feb 28, never Mar 3.
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
