"""Module entry point: python -m streak_grid ..."""

from __future__ import annotations

from streak_grid.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
