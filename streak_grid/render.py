"""Assemble drawing primitives for a streak grid.

The scene is a plain list of text, circle and line primitives in reference
coordinates. Any drawing backend can consume it; see streak_grid.svg for one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from streak_grid.bucket import bucket
from streak_grid.connectors import build_connectors
from streak_grid.dateutils import month_label
from streak_grid.layout import build_scales, project_day_labels, project_with
from streak_grid.models import (
    DEFAULT_REFERENCE_SIZE,
    DEFAULT_WEEK_START,
    GRID_MARGIN,
    ConnectorSegment,
    DailyRecord,
    GridCell,
    GridParams,
    ScaleContext,
)
from streak_grid.scale import resolve_scale

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextPrimitive:
    """Text anchored at (x, y).

    role is one of "title", "month", "day_label", "dot_value".
    """

    text: str
    x: float
    y: float
    font_size: float
    anchor: str
    role: str


@dataclass(frozen=True, slots=True)
class CirclePrimitive:
    """A day dot. Fill is chosen by the backend from cell.record.value."""

    cx: float
    cy: float
    r: float
    cell: GridCell


@dataclass(frozen=True, slots=True)
class LinePrimitive:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float
    segment: ConnectorSegment


Primitive = TextPrimitive | CirclePrimitive | LinePrimitive


@dataclass(frozen=True, slots=True)
class StreakGridScene:
    """Everything needed to draw one streak grid."""

    scale: ScaleContext
    title: TextPrimitive
    month: TextPrimitive
    day_labels: tuple[TextPrimitive, ...]
    dots: tuple[CirclePrimitive, ...]
    dot_values: tuple[TextPrimitive, ...]
    lines: tuple[LinePrimitive, ...]

    @property
    def reference_width(self) -> float:
        return self.scale.reference_width

    @property
    def reference_height(self) -> float:
        return self.scale.reference_height

    @property
    def segments(self) -> list[ConnectorSegment]:
        return [ln.segment for ln in self.lines]

    def primitives(self) -> Iterator[Primitive]:
        """Yield primitives in draw order: bands, lines, dots, dot values."""

        yield self.title
        yield self.month
        yield from self.day_labels
        yield from self.lines
        yield from self.dots
        yield from self.dot_values


def build_scene(
    records: Sequence[DailyRecord],
    label: str,
    actual_width: float,
    actual_height: float,
    *,
    week_start: int = DEFAULT_WEEK_START,
    reference_width: float = DEFAULT_REFERENCE_SIZE,
    reference_height: float = DEFAULT_REFERENCE_SIZE,
) -> StreakGridScene | None:
    """Run the full layout pipeline for one redraw.

    Args:
        records: Consecutive daily records, ascending by date.
        label: Habit name shown as the title.
        actual_width: Current container width.
        actual_height: Current container height.
        week_start: First weekday of the week (0 = Monday ... 6 = Sunday).
        reference_width: Width of the logical layout space.
        reference_height: Height of the logical layout space.

    Returns:
        The scene, or None when there are no records (nothing to draw).

    Raises:
        ValueError: If the records violate the input contract.
    """

    if not records:
        logger.debug("No records for %r, skipping layout", label)
        return None

    cells = bucket(records, week_start)
    scale = resolve_scale(actual_width, actual_height, reference_width, reference_height)
    scales = build_scales(len(cells), scale)
    projected = project_with(cells, scales)
    segments = build_connectors(projected, scales, scale)
    logger.debug(
        "Laid out %r: cells=%s rows=%s scale=%.4f segments=%s",
        label,
        len(cells),
        cells[-1].row + 1,
        scale.scale_factor,
        len(segments),
    )

    title = TextPrimitive(
        text=label,
        x=reference_width / 2,
        y=scales.title_y,
        font_size=scale.title_font_size,
        anchor="middle",
        role="title",
    )
    month = TextPrimitive(
        text=month_label(records),
        x=GRID_MARGIN,
        y=scales.title_y,
        font_size=scale.month_font_size,
        anchor="start",
        role="month",
    )
    day_labels = tuple(
        TextPrimitive(
            text=dl.text,
            x=dl.x,
            y=dl.y,
            font_size=scale.day_label_font_size,
            anchor="middle",
            role="day_label",
        )
        for dl in project_day_labels(cells, scales)
    )
    dots = tuple(CirclePrimitive(cx=p.x, cy=p.y, r=scale.dot_radius, cell=p.cell) for p in projected)
    dot_values = tuple(
        TextPrimitive(
            text=str(p.cell.record.date.day),
            x=p.x,
            y=p.y,
            font_size=scale.value_font_size,
            anchor="middle",
            role="dot_value",
        )
        for p in projected
    )
    lines = tuple(
        LinePrimitive(x1=s.x1, y1=s.y1, x2=s.x2, y2=s.y2, stroke_width=scale.stroke_width, segment=s)
        for s in segments
    )
    return StreakGridScene(
        scale=scale,
        title=title,
        month=month,
        day_labels=day_labels,
        dots=dots,
        dot_values=dot_values,
        lines=lines,
    )


def build_scene_with(
    records: Sequence[DailyRecord],
    label: str,
    actual_width: float,
    actual_height: float,
    params: GridParams,
) -> StreakGridScene | None:
    """build_scene() with host configuration taken from GridParams."""

    return build_scene(
        records,
        label,
        actual_width,
        actual_height,
        week_start=params.week_start,
        reference_width=params.reference_width,
        reference_height=params.reference_height,
    )
