"""Tests for the command-line interface."""

import json

import pytest

from streak_grid.cli import build_parser, main
from streak_grid.csv_io import write_daily_records_csv

from conftest import make_records


@pytest.fixture
def records_csv(tmp_path, example_records):
    p = tmp_path / "records.csv"
    write_daily_records_csv(example_records, p, habit="Reading")
    return p


def test_render_writes_svg(tmp_path, records_csv, capsys):
    out = tmp_path / "grid.svg"

    rc = main(["render", "--csv", str(records_csv), "--habit", "Reading", "--out", str(out), "--width", "250"])

    assert rc == 0
    svg = out.read_text(encoding="utf-8")
    assert svg.count("<circle ") == 10
    assert "Reading" in svg
    assert "scale=0.500" in capsys.readouterr().err


def test_render_nothing(tmp_path, records_csv, capsys):
    rc = main(["render", "--csv", str(records_csv), "--habit", "Nope", "--out", str(tmp_path / "x.svg")])

    assert rc == 1
    assert "No records" in capsys.readouterr().err
    assert not (tmp_path / "x.svg").exists()


def test_inspect_json(records_csv, capsys):
    rc = main(["inspect", "--csv", str(records_csv), "--habit", "Reading", "--today", "2025-06-11", "--json"])

    assert rc == 0
    out = capsys.readouterr().out
    assert "current=2, longest=3, runs=3" in out
    assert "forward_segments=6, leading_stubs=1" in out
    payload = json.loads(out[out.index("{") :])
    assert payload["days"] == 10
    assert len(payload["cells"]) == 10
    assert payload["segments"][0]["to"] is None
    assert payload["cells"][7] == {
        "date": "2025-06-08",
        "value": 0.0,
        "row": 1,
        "column": 0,
        "x": 30.0,
        "y": 272.5,
    }


def test_inspect_month_window(tmp_path, capsys):
    p = tmp_path / "records.csv"
    write_daily_records_csv(make_records([1] * 10), p)

    rc = main(["inspect", "--csv", str(p), "--month", "2025-06", "--today", "2025-06-11"])

    assert rc == 0
    out = capsys.readouterr().out
    # June window: May 25 .. July 7.
    assert "start=2025-05-25, end=2025-07-07, days=44" in out


def test_habits(records_csv, capsys):
    assert main(["habits", "--csv", str(records_csv)]) == 0
    assert capsys.readouterr().out.split() == ["Reading"]


def test_week_start_flag_rejected():
    args = build_parser().parse_args(["render", "--week-start", "someday"])

    with pytest.raises(ValueError):
        args.func(args)
