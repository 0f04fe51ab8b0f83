"""Place daily records into a 7-column week grid."""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Sequence

from streak_grid.models import DAYS_IN_WEEK, DEFAULT_WEEK_START, DailyRecord, GridCell


def weekday_column(day: date, week_start: int = DEFAULT_WEEK_START) -> int:
    """Column of a day in a week that starts on week_start.

    Args:
        day: Calendar day.
        week_start: First weekday of the week, calendar module numbering
            (0 = Monday ... 6 = Sunday).

    Returns:
        Column index in [0, 6].
    """

    return (day.weekday() - week_start) % DAYS_IN_WEEK


def _check_records(records: Sequence[DailyRecord]) -> None:
    prev: DailyRecord | None = None
    for i, rec in enumerate(records):
        if not math.isfinite(rec.value):
            raise ValueError(f"Record {i} ({rec.date.isoformat()}) has non-finite value {rec.value!r}")
        if rec.value < 0:
            raise ValueError(f"Record {i} ({rec.date.isoformat()}) has negative value {rec.value!r}")
        if prev is not None and rec.date != prev.date + timedelta(days=1):
            raise ValueError(
                f"Record {i} ({rec.date.isoformat()}) does not follow {prev.date.isoformat()}; "
                "records must be consecutive days in ascending order (fill gaps with value 0)"
            )
        prev = rec


def bucket(records: Sequence[DailyRecord], week_start: int = DEFAULT_WEEK_START) -> list[GridCell]:
    """Assign every record a (row, column) grid position.

    Args:
        records: Consecutive daily records, ascending by date.
        week_start: First weekday of the week (0 = Monday ... 6 = Sunday).

    Returns:
        One GridCell per record, in input order. Empty input gives an empty list.

    Raises:
        ValueError: If week_start is out of range, a value is negative, or the
            dates are not consecutive.
    """

    if not 0 <= week_start < DAYS_IN_WEEK:
        raise ValueError(f"week_start must be in 0..6, got {week_start!r}")
    _check_records(records)

    return [
        GridCell(
            record=rec,
            row=i // DAYS_IN_WEEK,
            column=weekday_column(rec.date, week_start),
            sequence_index=i,
        )
        for i, rec in enumerate(records)
    ]
