"""SVG output for a streak grid scene."""

from __future__ import annotations

from pathlib import Path
from typing import Callable
from xml.sax.saxutils import escape, quoteattr

from streak_grid.models import GridCell
from streak_grid.render import CirclePrimitive, LinePrimitive, StreakGridScene, TextPrimitive

ACTIVE_FILL = "#69b3a2"
INACTIVE_FILL = "#d9d9d9"
TEXT_FILL = "#333333"


def default_fill(cell: GridCell) -> str:
    return ACTIVE_FILL if cell.record.is_active else INACTIVE_FILL


def _num(value: float) -> str:
    # Fixed precision keeps output byte-identical across runs.
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _text(t: TextPrimitive) -> str:
    fill = "#ffffff" if t.role == "dot_value" else TEXT_FILL
    weight = "normal" if t.role == "dot_value" else "bold"
    dy = ' dy=".35em"' if t.role == "dot_value" else ""
    return (
        f'<text class={quoteattr(t.role)} x="{_num(t.x)}" y="{_num(t.y)}"{dy} '
        f'text-anchor="{t.anchor}" font-size="{_num(t.font_size)}" '
        f'font-weight="{weight}" fill="{fill}">{escape(t.text)}</text>'
    )


def _line(ln: LinePrimitive, stroke: str) -> str:
    return (
        f'<line x1="{_num(ln.x1)}" y1="{_num(ln.y1)}" x2="{_num(ln.x2)}" y2="{_num(ln.y2)}" '
        f'stroke="{stroke}" stroke-width="{_num(ln.stroke_width)}" stroke-linecap="round"/>'
    )


def _circle(c: CirclePrimitive, fill: str) -> str:
    return f'<circle cx="{_num(c.cx)}" cy="{_num(c.cy)}" r="{_num(c.r)}" fill={quoteattr(fill)}/>'


def scene_to_svg(
    scene: StreakGridScene,
    *,
    width: float | None = None,
    height: float | None = None,
    fill: Callable[[GridCell], str] | None = None,
    stroke: str = ACTIVE_FILL,
) -> str:
    """Render a scene to a standalone SVG document.

    Args:
        scene: Scene from build_scene().
        width: Output width; defaults to the container width the scene was built for.
        height: Output height; defaults to the container height.
        fill: Dot colour per cell. Defaults to default_fill().
        stroke: Connector colour.

    Returns:
        SVG markup. The viewBox is the reference space, so the browser does
        the mapping to actual pixels.
    """

    fill_for = fill or default_fill
    w = width if width is not None else max(1.0, scene.scale.actual_width)
    h = height if height is not None else max(1.0, scene.scale.actual_height)

    parts = [
        '<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{_num(w)}" height="{_num(h)}" '
        f'viewBox="0 0 {_num(scene.reference_width)} {_num(scene.reference_height)}" '
        'preserveAspectRatio="xMidYMid meet" font-family="sans-serif">'
    ]
    for prim in scene.primitives():
        if isinstance(prim, TextPrimitive):
            parts.append(_text(prim))
        elif isinstance(prim, LinePrimitive):
            parts.append(_line(prim, stroke))
        else:
            parts.append(_circle(prim, fill_for(prim.cell)))
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def write_svg(scene: StreakGridScene, out_path: str | Path, **kwargs) -> None:
    """Write scene_to_svg() output to a file (UTF-8)."""

    p = Path(out_path)
    p.write_text(scene_to_svg(scene, **kwargs), encoding="utf-8")
