"""CSV input/output for daily habit records."""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence

from streak_grid.dateutils import fill_missing_days, parse_date
from streak_grid.models import DailyRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CsvSummary:
    """Quick summary of CSV parsing."""

    rows_total: int
    rows_parsed: int
    rows_skipped: int
    duplicate_dates: int
    filled_days: int
    fieldnames: Sequence[str]


def _parse_value(value: str) -> float:
    v = float(value.strip())
    if not math.isfinite(v):
        raise ValueError(f"non-finite value {v!r}")
    if v < 0:
        raise ValueError(f"negative value {v!r}")
    return v


def load_daily_records(csv_path: str | Path, habit: str | None = None) -> tuple[list[DailyRecord], CsvSummary]:
    """Load one habit's records as a gap-free daily sequence.

    Duplicate dates are summed. Every day between the first and last date that
    has no row gets value 0, so the result satisfies the grid's input contract.

    Args:
        csv_path: CSV with columns date,value and an optional habit column.
        habit: Habit to select. Required when the CSV holds several habits.

    Returns:
        (records, summary)

    Raises:
        KeyError: If date or value columns are missing.
    """

    p = Path(csv_path)
    rows_total = 0
    rows_parsed = 0
    duplicates = 0
    values: dict[date, float] = {}
    fieldnames: Sequence[str] = ()

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or ()
        if fieldnames and ("date" not in fieldnames or "value" not in fieldnames):
            raise KeyError(f"CSV must have 'date' and 'value' columns. Columns: {list(fieldnames)}")
        for row in reader:
            if habit is not None and (row.get("habit") or "").strip() != habit:
                continue
            rows_total += 1
            try:
                d = parse_date(row["date"] or "")
                v = _parse_value(row["value"] or "")
            except (ValueError, TypeError):
                continue
            rows_parsed += 1
            if d in values:
                duplicates += 1
                values[d] += v
            else:
                values[d] = v

    records: list[DailyRecord] = []
    if values:
        records = fill_missing_days(values, min(values), max(values))

    summary = CsvSummary(
        rows_total=rows_total,
        rows_parsed=rows_parsed,
        rows_skipped=rows_total - rows_parsed,
        duplicate_dates=duplicates,
        filled_days=len(records) - len(values),
        fieldnames=fieldnames,
    )
    if summary.rows_skipped > 0:
        logger.warning("Skipped %s CSV rows that could not be parsed", summary.rows_skipped)
    if summary.duplicate_dates > 0:
        logger.warning("Summed %s rows with a duplicate date", summary.duplicate_dates)
    if summary.filled_days > 0:
        logger.warning("Filled %s missing days with value 0", summary.filled_days)
    return records, summary


def list_habits(csv_path: str | Path) -> list[str]:
    """Distinct non-empty habit names in a records CSV, sorted."""

    p = Path(csv_path)
    names: set[str] = set()
    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            name = (row.get("habit") or "").strip()
            if name:
                names.add(name)
    return sorted(names)


def write_daily_records_csv(records: Sequence[DailyRecord], out_path: str | Path, habit: str | None = None) -> None:
    """Write records as date,value (plus habit if given)."""

    fieldnames = ["date", "value"] if habit is None else ["date", "habit", "value"]
    p = Path(out_path)
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in records:
            row: dict[str, object] = {"date": r.date.isoformat(), "value": f"{r.value:g}"}
            if habit is not None:
                row["habit"] = habit
            w.writerow(row)
