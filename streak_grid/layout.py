"""Project grid cells into the reference coordinate space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from streak_grid.dateutils import weekday_short_name
from streak_grid.models import (
    DAYS_IN_WEEK,
    GRID_MARGIN,
    GRID_TOP_RATIO,
    LABEL_BAND_RATIO,
    TITLE_BAND_RATIO,
    GridCell,
    ProjectedCell,
    ScaleContext,
)


@dataclass(frozen=True, slots=True)
class LinearScale:
    """Linear map from [domain_min, domain_max] to [range_min, range_max]."""

    domain_min: float
    domain_max: float
    range_min: float
    range_max: float

    def __call__(self, value: float) -> float:
        span = self.domain_max - self.domain_min
        if span == 0:
            return self.range_min
        t = (value - self.domain_min) / span
        return self.range_min + t * (self.range_max - self.range_min)

    @property
    def step(self) -> float:
        """Range distance covered by one domain unit."""

        return self(self.domain_min + 1) - self(self.domain_min)


@dataclass(frozen=True, slots=True)
class GridScales:
    """Scales and fixed band positions for one render pass."""

    x_scale: LinearScale
    y_scale: LinearScale
    grid_top: float
    title_y: float
    labels_y: float


@dataclass(frozen=True, slots=True)
class DayLabel:
    """Weekday heading above a grid column."""

    column: int
    text: str
    x: float
    y: float


def row_count(cell_count: int) -> int:
    return math.ceil(cell_count / DAYS_IN_WEEK)


def build_scales(cell_count: int, scale: ScaleContext) -> GridScales:
    """Build the column->x and row->y scales.

    The x range keeps fixed GRID_MARGIN reference units on each side. The y range
    starts below the title and weekday-label bands and stops row_band_height
    above the bottom edge.
    """

    if cell_count <= 0:
        raise ValueError(f"Cannot lay out {cell_count} cells")

    w = scale.reference_width
    h = scale.reference_height
    grid_top = h * GRID_TOP_RATIO
    x_scale = LinearScale(0.0, float(DAYS_IN_WEEK), GRID_MARGIN, w - GRID_MARGIN)
    y_scale = LinearScale(0.0, float(row_count(cell_count)), grid_top, h - scale.row_band_height)
    return GridScales(
        x_scale=x_scale,
        y_scale=y_scale,
        grid_top=grid_top,
        title_y=h * TITLE_BAND_RATIO,
        labels_y=h * LABEL_BAND_RATIO,
    )


def project(cells: Sequence[GridCell], scale: ScaleContext) -> list[ProjectedCell]:
    """Map cells to reference-space dot centres."""

    scales = build_scales(len(cells), scale)
    return project_with(cells, scales)


def project_with(cells: Sequence[GridCell], scales: GridScales) -> list[ProjectedCell]:
    """Like project(), reusing scales already built for this pass."""

    return [ProjectedCell(cell=c, x=scales.x_scale(c.column), y=scales.y_scale(c.row)) for c in cells]


def project_day_labels(cells: Sequence[GridCell], scales: GridScales) -> list[DayLabel]:
    """One weekday label per occupied column, named after its first cell."""

    first_by_column: dict[int, GridCell] = {}
    for c in cells:
        first_by_column.setdefault(c.column, c)
        if len(first_by_column) == DAYS_IN_WEEK:
            break
    return [
        DayLabel(
            column=col,
            text=weekday_short_name(c.record.date),
            x=scales.x_scale(col),
            y=scales.labels_y,
        )
        for col, c in sorted(first_by_column.items())
    ]
