"""Data models for daily records and streak-grid geometry."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Final


DAYS_IN_WEEK: Final[int] = 7
DEFAULT_REFERENCE_SIZE: Final[float] = 500.0
DEFAULT_WEEK_START: Final[int] = calendar.SUNDAY

# Reference-space layout constants (never multiplied by the scale factor).
GRID_MARGIN: Final[float] = 30.0
TITLE_BAND_RATIO: Final[float] = 0.08
LABEL_BAND_RATIO: Final[float] = 0.15
GRID_TOP_RATIO: Final[float] = 0.25
STUB_LENGTH: Final[float] = 30.0


@dataclass(frozen=True, slots=True)
class DailyRecord:
    """Activity value for one calendar day.

    Attributes:
        date: Calendar day.
        value: Non-negative amount logged that day. Anything above zero counts
            as an active day.
    """

    date: date
    value: float

    @property
    def is_active(self) -> bool:
        return self.value > 0


@dataclass(frozen=True, slots=True)
class GridCell:
    """A record placed in the week grid.

    Note:
        row is always sequence_index // 7; column is the weekday index relative
        to the configured week start.
    """

    record: DailyRecord
    row: int
    column: int
    sequence_index: int


@dataclass(frozen=True, slots=True)
class ScaleContext:
    """Scale factor for one container size plus the sizes derived from it."""

    reference_width: float
    reference_height: float
    actual_width: float
    actual_height: float
    scale_factor: float
    dot_radius: float
    row_band_height: float
    title_font_size: float
    month_font_size: float
    day_label_font_size: float
    value_font_size: float
    stroke_width: float


@dataclass(frozen=True, slots=True)
class ProjectedCell:
    """A grid cell with its reference-space dot centre."""

    cell: GridCell
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ConnectorSegment:
    """A horizontal streak line.

    to_cell is None for a leading stub (streak entering from the previous row).
    """

    from_cell: GridCell
    to_cell: GridCell | None
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_leading_stub(self) -> bool:
        return self.to_cell is None


@dataclass(frozen=True, slots=True)
class GridParams:
    """Host-level configuration for building a streak grid."""

    week_start: int = DEFAULT_WEEK_START
    reference_width: float = DEFAULT_REFERENCE_SIZE
    reference_height: float = DEFAULT_REFERENCE_SIZE
