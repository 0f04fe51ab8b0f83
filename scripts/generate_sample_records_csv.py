from __future__ import annotations

import argparse
import csv
import random
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Habit:
    name: str
    # Chance of keeping an active run going / of starting one after a rest day.
    keep_p: float
    start_p: float
    max_value: int


def generate_rows(*, habits: list[Habit], days: int, seed: int, start: date) -> list[dict[str, str]]:
    """Generate fake daily habit rows with streaky on/off behaviour."""

    rng = random.Random(seed)
    out: list[dict[str, str]] = []
    for habit in habits:
        active = False
        for i in range(days):
            d = start + timedelta(days=i)
            active = rng.random() < (habit.keep_p if active else habit.start_p)
            value = rng.randint(1, habit.max_value) if active else 0
            # Leave some rest days out entirely; the loader fills them with 0.
            if value == 0 and rng.random() < 0.3:
                continue
            out.append({"date": d.isoformat(), "habit": habit.name, "value": str(value)})

    out.sort(key=lambda r: (r["habit"], r["date"]))
    return out


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake habit records CSV for demo/testing.")
    p.add_argument("--out", type=str, default="sample_data/records.csv", help="Output CSV path")
    p.add_argument("--days", type=int, default=120, help="Number of days per habit")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p.add_argument("--start", type=str, default="2025-01-01", help="First day, e.g. '2025-01-01'")
    args = p.parse_args()

    habits = [
        Habit("Reading", keep_p=0.85, start_p=0.5, max_value=60),
        Habit("Running", keep_p=0.6, start_p=0.3, max_value=10),
        Habit("Meditation", keep_p=0.9, start_p=0.7, max_value=30),
    ]
    rows = generate_rows(habits=habits, days=args.days, seed=args.seed, start=date.fromisoformat(args.start))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["date", "habit", "value"])
        w.writeheader()
        w.writerows(rows)

    print(f"Generated: {out_path} (rows={len(rows)}, seed={args.seed})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
