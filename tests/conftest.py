from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Sequence

import pytest

from streak_grid.models import DailyRecord

# 2025-06-01 is a Sunday.
SUNDAY = date(2025, 6, 1)


def make_records(values: Sequence[float], start: date = SUNDAY) -> list[DailyRecord]:
    return [DailyRecord(date=start + timedelta(days=i), value=float(v)) for i, v in enumerate(values)]


@pytest.fixture
def records_of() -> Callable[..., list[DailyRecord]]:
    """Factory: consecutive daily records from a list of values."""

    return make_records


@pytest.fixture
def example_records() -> list[DailyRecord]:
    """Ten days starting on a Sunday with two streak breaks."""

    return make_records([1, 1, 0, 1, 1, 1, 0, 0, 1, 1])
