"""Streak connector lines between consecutive active days."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from streak_grid.layout import GridScales
from streak_grid.models import DAYS_IN_WEEK, STUB_LENGTH, ConnectorSegment, ProjectedCell, ScaleContext


def _forward_segment(
    cur: ProjectedCell,
    nxt: ProjectedCell,
    scales: GridScales,
    scale: ScaleContext,
) -> ConnectorSegment:
    col = cur.cell.column
    x_next = scales.x_scale(col + 1)
    if col == DAYS_IN_WEEK - 1:
        # No column 7: stop half a dot spacing past the row instead.
        x2 = x_next - math.floor(scales.x_scale.step / 2)
    else:
        x2 = x_next - scale.dot_radius
    return ConnectorSegment(
        from_cell=cur.cell,
        to_cell=nxt.cell,
        x1=cur.x + scale.dot_radius,
        y1=cur.y,
        x2=x2,
        y2=cur.y,
    )


def _leading_stub(cur: ProjectedCell, scale: ScaleContext) -> ConnectorSegment:
    return ConnectorSegment(
        from_cell=cur.cell,
        to_cell=None,
        x1=cur.x - STUB_LENGTH * scale.scale_factor,
        y1=cur.y,
        x2=cur.x - scale.dot_radius,
        y2=cur.y,
    )


def build_connectors(
    projected: Sequence[ProjectedCell],
    scales: GridScales,
    scale: ScaleContext,
) -> list[ConnectorSegment]:
    """Build the connector segments for a projected grid.

    Rules:
        - Every active cell except the last one gets a horizontal forward
          segment from its dot's right edge towards the next column.
        - In the last column the forward segment is a half-spacing stub.
        - Every active cell in column 0 also gets a leading stub ending at its
          dot's left edge, whether or not the previous day was active.
        - Inactive cells never source a segment.

    Returns:
        Segments in cell order; a cell's leading stub precedes its forward segment.
    """

    segments: list[ConnectorSegment] = []
    last = len(projected) - 1
    for i, cur in enumerate(projected):
        if not cur.cell.record.is_active:
            continue
        if cur.cell.column == 0:
            segments.append(_leading_stub(cur, scale))
        if i < last:
            segments.append(_forward_segment(cur, projected[i + 1], scales, scale))
    return segments


def forward_segments(segments: Iterable[ConnectorSegment]) -> list[ConnectorSegment]:
    return [s for s in segments if not s.is_leading_stub]


def leading_stubs(segments: Iterable[ConnectorSegment]) -> list[ConnectorSegment]:
    return [s for s in segments if s.is_leading_stub]
