"""Command-line interface for streak_grid.

Run:
    python -m streak_grid render --csv records.csv --habit Reading --out grid.svg
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from streak_grid.connectors import forward_segments, leading_stubs
from streak_grid.csv_io import list_habits, load_daily_records
from streak_grid.dateutils import clip_to_window, month_window, parse_date, parse_week_start
from streak_grid.models import DEFAULT_REFERENCE_SIZE, DailyRecord, GridParams
from streak_grid.render import build_scene_with
from streak_grid.streaks import current_streak, longest_streak, streak_runs
from streak_grid.svg import write_svg


def _select_records(args: argparse.Namespace) -> list[DailyRecord]:
    records, summary = load_daily_records(args.csv, habit=args.habit)
    print(
        f"rows={summary.rows_total}, parsed={summary.rows_parsed}, skipped={summary.rows_skipped}, "
        f"days={len(records)}",
        file=sys.stderr,
    )
    if args.month is not None and records:
        month_first = parse_date(f"{args.month}-01")
        start, end = month_window(month_first.year, month_first.month)
        records = clip_to_window(records, start, end)
    return records


def _params(args: argparse.Namespace) -> GridParams:
    return GridParams(
        week_start=parse_week_start(args.week_start),
        reference_width=args.reference_size,
        reference_height=args.reference_size,
    )


def _cmd_render(args: argparse.Namespace) -> int:
    params = _params(args)
    records = _select_records(args)
    label = args.title or args.habit or "Habit"
    scene = build_scene_with(records, label, args.width, args.height, params)
    if scene is None:
        print("No records to render.", file=sys.stderr)
        return 1

    write_svg(scene, args.out)
    print(
        f"scale={scene.scale.scale_factor:.3f}, dots={len(scene.dots)}, lines={len(scene.lines)}",
        file=sys.stderr,
    )
    print(f"Written: {args.out}")
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    params = _params(args)
    records = _select_records(args)
    label = args.habit or "Habit"
    scene = build_scene_with(records, label, args.width, args.height, params)
    if scene is None:
        print("No records to inspect.", file=sys.stderr)
        return 1

    today = parse_date(args.today) if args.today else date.today()
    segments = scene.segments
    runs = streak_runs(records)

    print("### Range")
    print(f"start={records[0].date.isoformat()}, end={records[-1].date.isoformat()}, days={len(records)}")
    print()

    print("### Grid")
    print(
        f"rows={scene.dots[-1].cell.row + 1}, active={sum(1 for r in records if r.is_active)}, "
        f"forward_segments={len(forward_segments(segments))}, leading_stubs={len(leading_stubs(segments))}"
    )
    print()

    print("### Streaks")
    print(f"current={current_streak(records, today)}, longest={longest_streak(records)}, runs={len(runs)}")
    print()

    if args.json:
        payload = {
            "habit": label,
            "days": len(records),
            "scale_factor": scene.scale.scale_factor,
            "cells": [
                {
                    "date": d.cell.record.date.isoformat(),
                    "value": d.cell.record.value,
                    "row": d.cell.row,
                    "column": d.cell.column,
                    "x": round(d.cx, 3),
                    "y": round(d.cy, 3),
                }
                for d in scene.dots
            ],
            "segments": [
                {
                    "from": s.from_cell.record.date.isoformat(),
                    "to": s.to_cell.record.date.isoformat() if s.to_cell is not None else None,
                    "x1": round(s.x1, 3),
                    "y1": round(s.y1, 3),
                    "x2": round(s.x2, 3),
                    "y2": round(s.y2, 3),
                }
                for s in segments
            ],
            "runs": [
                {"start": r.start.isoformat(), "end": r.end.isoformat(), "length": r.length} for r in runs
            ],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _cmd_habits(args: argparse.Namespace) -> int:
    names = list_habits(args.csv)
    if not names:
        print("No habit column values found.", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def _add_grid_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--csv", type=str, default="records.csv", help="Input CSV (date,value[,habit])")
    p.add_argument("--habit", type=str, default=None, help="Only rows of this habit")
    p.add_argument("--month", type=str, default=None, help="YYYY-MM: show that month plus one week either side")
    p.add_argument("--week-start", type=str, default="sunday", help="First weekday of a grid row (name or 0-6)")
    p.add_argument("--width", type=float, default=DEFAULT_REFERENCE_SIZE, help="Container width")
    p.add_argument("--height", type=float, default=DEFAULT_REFERENCE_SIZE, help="Container height")
    p.add_argument(
        "--reference-size",
        type=float,
        default=DEFAULT_REFERENCE_SIZE,
        help="Side of the square logical layout space",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="streak_grid")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_ren = sub.add_parser("render", help="Render a habit's streak grid to SVG")
    _add_grid_args(p_ren)
    p_ren.add_argument("--title", type=str, default=None, help="Title text (defaults to the habit name)")
    p_ren.add_argument("--out", type=str, default="streak_grid.svg", help="Output SVG path")
    p_ren.set_defaults(func=_cmd_render)

    p_ins = sub.add_parser("inspect", help="Summarize grid layout and streaks")
    _add_grid_args(p_ins)
    p_ins.add_argument("--today", type=str, default=None, help="Reference date for the current streak")
    p_ins.add_argument("--json", action="store_true", help="Also print JSON geometry")
    p_ins.set_defaults(func=_cmd_inspect)

    p_hab = sub.add_parser("habits", help="List habit names in a CSV")
    p_hab.add_argument("--csv", type=str, default="records.csv", help="Input CSV")
    p_hab.set_defaults(func=_cmd_habits)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
