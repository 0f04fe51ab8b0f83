"""Calendar date parsing and window utilities."""

from __future__ import annotations

import calendar
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, Mapping, Sequence

from streak_grid.models import DailyRecord


_WEEKDAY_NAMES: dict[str, int] = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


def parse_date(text: str) -> date:
    """Parse a calendar date.

    Supported formats:
      - "YYYY-MM-DD"
      - "YYYY-MM-DD HH:MM:SS" / "YYYY-MM-DDTHH:MM:SS" (time part is dropped)

    Raises:
        ValueError: If cannot parse.
    """

    s = text.strip()
    try:
        return date.fromisoformat(s[:10])
    except ValueError as exc:
        raise ValueError(f"Cannot parse date: {text!r}. Expected format: 2025-12-18") from exc


def parse_week_start(text: str) -> int:
    """Convert a weekday name ("sunday", "Mon") or number ("0".."6") to a week start.

    Numbers follow the calendar module: 0 = Monday ... 6 = Sunday.
    """

    s = text.strip().lower()
    if s.isdigit():
        value = int(s)
        if 0 <= value <= 6:
            return value
        raise ValueError(f"Week start must be in 0..6, got {text!r}")
    for name, value in _WEEKDAY_NAMES.items():
        if len(s) >= 3 and name.startswith(s):
            return value
    raise ValueError(f"Unknown week start: {text!r}. Use a weekday name such as 'sunday' or 'monday'")


def weekday_short_name(day: date) -> str:
    """Short English weekday name ("Sun", "Mon", ...), independent of process locale."""

    return ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")[day.weekday()]


def month_label(records: Sequence[DailyRecord]) -> str:
    """Label for the period covered by records, e.g. "MAR 2025".

    The month holding the most records wins; ties go to the earliest month.
    """

    if not records:
        return ""
    counts = Counter((r.date.year, r.date.month) for r in records)
    year, month = min(counts, key=lambda ym: (-counts[ym], ym))
    return f"{calendar.month_abbr[month].upper()} {year}"


def month_window(year: int, month: int) -> tuple[date, date]:
    """Date range shown for a month grid: the week before through the week after.

    Returns:
        (start, end), both inclusive: first day of the month minus 7 days, and
        first day of the next month plus 6 days.
    """

    first = date(year, month, 1)
    if month == 12:
        next_first = date(year + 1, 1, 1)
    else:
        next_first = date(year, month + 1, 1)
    return first - timedelta(days=7), next_first + timedelta(days=6)


def iter_days(start: date, end: date) -> Iterable[date]:
    """Yield every day in [start, end]."""

    cur = start
    while cur <= end:
        yield cur
        cur = cur + timedelta(days=1)


def fill_missing_days(values_by_date: Mapping[date, float], start: date, end: date) -> list[DailyRecord]:
    """Build one record per day in [start, end], using 0 for days without a value."""

    return [DailyRecord(date=d, value=float(values_by_date.get(d, 0.0))) for d in iter_days(start, end)]


def clip_to_window(records: Sequence[DailyRecord], start: date, end: date) -> list[DailyRecord]:
    """Restrict records to [start, end], zero-filling any day the records do not cover."""

    values = {r.date: r.value for r in records if start <= r.date <= end}
    return fill_missing_days(values, start, end)
