from __future__ import annotations

from datetime import date
from pathlib import Path

import streamlit as st

from streak_grid.csv_io import list_habits, load_daily_records
from streak_grid.dateutils import clip_to_window, month_window, parse_week_start
from streak_grid.models import DEFAULT_REFERENCE_SIZE, DailyRecord, GridParams
from streak_grid.render import build_scene_with
from streak_grid.streaks import current_streak, longest_streak
from streak_grid.svg import scene_to_svg

_WEEK_STARTS = ["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]


@st.cache_data(show_spinner=False)
def _load_records(records_csv: str, habit: str | None, mtime: float) -> list[DailyRecord]:
    _ = mtime  # part of cache key so updated files reload automatically
    records, _summary = load_daily_records(records_csv, habit=habit)
    return records


@st.cache_data(show_spinner=False)
def _load_habits(records_csv: str, mtime: float) -> list[str]:
    _ = mtime
    return list_habits(records_csv)


def main() -> None:
    st.set_page_config(page_title="Habit streak grid", layout="wide")
    st.title("Habit streak grid")

    with st.sidebar:
        st.subheader("Data")
        records_csv = st.text_input("Records CSV (date,value[,habit])", value="records.csv")

        p = Path(records_csv)
        if not p.exists():
            st.error(f"File not found: {records_csv!r}")
            return
        mtime = p.stat().st_mtime

        habits = _load_habits(records_csv, mtime)
        habit: str | None = st.selectbox("Habit", habits) if habits else None

        st.subheader("Period")
        today = date.today()
        month_first = st.date_input("Month", value=today.replace(day=1))
        week_start = st.selectbox("Week starts on", _WEEK_STARTS, index=0)

        st.subheader("Container")
        width = st.slider("Width", min_value=0, max_value=1000, value=int(DEFAULT_REFERENCE_SIZE), step=10)
        height = st.slider("Height", min_value=0, max_value=1000, value=int(DEFAULT_REFERENCE_SIZE), step=10)

    try:
        all_records = _load_records(records_csv, habit, mtime)
    except (KeyError, ValueError) as exc:
        st.exception(exc)
        return

    if not all_records:
        st.info("No records for this habit yet.")
        return

    start, end = month_window(month_first.year, month_first.month)
    records = clip_to_window(all_records, start, end)
    params = GridParams(week_start=parse_week_start(week_start))
    label = habit or "Habit"

    c1, c2 = st.columns(2)
    c1.metric("Current streak", f"{current_streak(all_records, today)} days")
    c2.metric("Longest streak", f"{longest_streak(all_records)} days")

    # Full redraw on every rerun: the scene is rebuilt and the SVG replaced wholesale.
    scene = build_scene_with(records, label, float(width), float(height), params)
    if scene is None:
        st.info("Nothing to draw for this period.")
        return
    st.markdown(scene_to_svg(scene), unsafe_allow_html=True)

    with st.expander("Layout details", expanded=False):
        st.write(
            {
                "scale_factor": round(scene.scale.scale_factor, 4),
                "dot_radius": round(scene.scale.dot_radius, 3),
                "stroke_width": round(scene.scale.stroke_width, 3),
                "dots": len(scene.dots),
                "lines": len(scene.lines),
            }
        )


if __name__ == "__main__":
    main()
