"""Responsive scale factor for the streak grid."""

from __future__ import annotations

import logging
import math
from typing import Final

from streak_grid.models import DEFAULT_REFERENCE_SIZE, ScaleContext

logger = logging.getLogger(__name__)

MIN_SCALE_FACTOR: Final[float] = 0.1


def _scale_factor(actual_width: float, actual_height: float, reference_min: float) -> float:
    if not (math.isfinite(actual_width) and math.isfinite(actual_height)):
        logger.debug("Non-finite container size %sx%s, using minimum scale", actual_width, actual_height)
        return MIN_SCALE_FACTOR
    actual_min = min(actual_width, actual_height)
    if actual_min <= 0:
        logger.debug("Degenerate container size %sx%s, using minimum scale", actual_width, actual_height)
        return MIN_SCALE_FACTOR
    return actual_min / reference_min


def resolve_scale(
    actual_width: float,
    actual_height: float,
    reference_width: float = DEFAULT_REFERENCE_SIZE,
    reference_height: float = DEFAULT_REFERENCE_SIZE,
) -> ScaleContext:
    """Compute the uniform scale factor and derived sizes for a container.

    Args:
        actual_width: Container width in device-independent units.
        actual_height: Container height in device-independent units.
        reference_width: Width of the logical layout space.
        reference_height: Height of the logical layout space.

    Returns:
        ScaleContext. A zero, negative or non-finite container side gives
        MIN_SCALE_FACTOR; every derived size respects its legibility floor.

    Raises:
        ValueError: If a reference size is not a positive finite number.
    """

    for name, value in (("reference_width", reference_width), ("reference_height", reference_height)):
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be a positive number, got {value!r}")

    s = _scale_factor(actual_width, actual_height, min(reference_width, reference_height))
    return ScaleContext(
        reference_width=reference_width,
        reference_height=reference_height,
        actual_width=actual_width,
        actual_height=actual_height,
        scale_factor=s,
        dot_radius=max(8.0, 16.0 * s),
        row_band_height=80.0 * s,
        title_font_size=max(12.0, 20.0 * s),
        month_font_size=max(10.0, 16.0 * s),
        day_label_font_size=max(8.0, 14.0 * s),
        value_font_size=max(6.0, 12.0 * s),
        stroke_width=max(1.0, 3.0 * s),
    )
