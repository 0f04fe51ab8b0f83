"""Tests for calendar bucketing."""

import calendar
import math
from datetime import date, timedelta

import pytest

from streak_grid.bucket import bucket, weekday_column
from streak_grid.models import DailyRecord

from conftest import SUNDAY, make_records


def test_example_rows_and_columns(example_records):
    cells = bucket(example_records, calendar.SUNDAY)

    assert [c.row for c in cells] == [0] * 7 + [1] * 3
    assert [c.column for c in cells] == [0, 1, 2, 3, 4, 5, 6, 0, 1, 2]
    assert [c.sequence_index for c in cells] == list(range(10))
    assert cells[0].record is example_records[0]


@pytest.mark.parametrize("n", [1, 6, 7, 8, 13, 14, 15, 31, 45])
def test_row_is_index_div_seven(n):
    cells = bucket(make_records([1] * n))

    for i, c in enumerate(cells):
        assert c.row == i // 7
        assert 0 <= c.column <= 6


def test_columns_cycle_in_lockstep():
    cells = bucket(make_records([0] * 20, start=date(2025, 6, 4)), calendar.SUNDAY)

    assert cells[0].column == 3  # Wednesday, no left padding
    for prev, cur in zip(cells, cells[1:]):
        assert cur.column == (prev.column + 1) % 7


def test_monday_week_start():
    cells = bucket(make_records([1, 1, 1]), calendar.MONDAY)

    # Sunday is the last column when weeks start on Monday.
    assert [c.column for c in cells] == [6, 0, 1]
    assert [c.row for c in cells] == [0, 0, 0]


def test_weekday_column():
    assert weekday_column(SUNDAY, calendar.SUNDAY) == 0
    assert weekday_column(SUNDAY, calendar.MONDAY) == 6
    assert weekday_column(SUNDAY + timedelta(days=1), calendar.SATURDAY) == 2


def test_deterministic(example_records):
    first = bucket(example_records)
    second = bucket(list(example_records))

    assert first == second


def test_empty_input_gives_no_cells():
    assert bucket([]) == []


def test_negative_value_rejected():
    records = make_records([1, -1, 1])

    with pytest.raises(ValueError, match="negative"):
        bucket(records)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_value_rejected(value):
    with pytest.raises(ValueError, match="non-finite"):
        bucket([DailyRecord(date(2025, 6, 1), value)])


def test_gap_rejected():
    records = [
        DailyRecord(date=SUNDAY, value=1.0),
        DailyRecord(date=SUNDAY + timedelta(days=2), value=1.0),
    ]

    with pytest.raises(ValueError, match="consecutive"):
        bucket(records)


def test_descending_rejected():
    records = list(reversed(make_records([1, 1])))

    with pytest.raises(ValueError):
        bucket(records)


@pytest.mark.parametrize("week_start", [-1, 7])
def test_week_start_out_of_range(week_start):
    with pytest.raises(ValueError, match="week_start"):
        bucket(make_records([1]), week_start)
