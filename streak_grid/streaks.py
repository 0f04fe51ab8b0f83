"""Streak statistics over daily records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Sequence

from streak_grid.models import DailyRecord


@dataclass(frozen=True, slots=True)
class StreakRun:
    """A maximal run of consecutive active days."""

    start: date
    end: date

    @property
    def length(self) -> int:
        return (self.end - self.start).days + 1


def _active_dates(records: Iterable[DailyRecord]) -> set[date]:
    return {r.date for r in records if r.is_active}


def streak_runs(records: Iterable[DailyRecord]) -> list[StreakRun]:
    """Find every run of consecutive active days, oldest first.

    Records may be unsorted or have gaps; a missing day breaks a run.
    """

    days = sorted(_active_dates(records))
    if not days:
        return []

    runs: list[StreakRun] = []
    start = prev = days[0]
    for d in days[1:]:
        if d != prev + timedelta(days=1):
            runs.append(StreakRun(start=start, end=prev))
            start = d
        prev = d
    runs.append(StreakRun(start=start, end=prev))
    return runs


def longest_streak(records: Iterable[DailyRecord]) -> int:
    """Length of the longest run of consecutive active days (0 if none)."""

    return max((run.length for run in streak_runs(records)), default=0)


def current_streak(records: Sequence[DailyRecord], today: date) -> int:
    """Consecutive active days ending yesterday.

    Today is not counted, so an unlogged today does not break the streak.
    """

    active = _active_dates(records)
    streak = 0
    cur = today - timedelta(days=1)
    while cur in active:
        streak += 1
        cur = cur - timedelta(days=1)
    return streak
