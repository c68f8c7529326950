#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from fancal.cli import add_calendar_args, engine_from_args


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fancal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fancal[diagnostics]"') from e


def daylight_series(eng, year: int):
    """Per-day (sunrise, sunset, daylight hours) arrays for one display year."""
    np = _need_numpy()
    first = eng.date(year, 1, 1)
    n = eng.days_in_year(year)
    rows = []
    for k in range(n):
        info = eng.daylight(eng.add_days(first, k))
        rows.append((info.sunrise, info.sunset, info.daylight_hours))
    return np.array(rows, dtype=float).reshape(n, 3)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sunrise, sunset and day length through one display year.")
    add_calendar_args(p)
    p.add_argument("year", type=int, help="display year")
    p.add_argument("--step", type=int, default=7, help="print every Nth day (default 7)")
    p.add_argument("--out", default=None, help="write a PNG plot here (needs matplotlib)")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    if not eng.config.daylight.enabled:
        print(f"{eng.name}: daylight disabled, fixed {eng.config.days.hours_per_day / 2:g} h days")

    arr = daylight_series(eng, args.year)
    print(f"{'day':>5}  {'rise':>6}  {'set':>6}  {'hours':>6}")
    for k in range(0, len(arr), max(1, args.step)):
        rise, sset, hours = arr[k]
        print(f"{k + 1:>5}  {rise:6.2f}  {sset:6.2f}  {hours:6.2f}")

    hours = arr[:, 2]
    print()
    print(f"shortest {hours.min():.2f} h on day {int(hours.argmin()) + 1}; "
          f"longest {hours.max():.2f} h on day {int(hours.argmax()) + 1}")

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 4))
        x = range(1, len(arr) + 1)
        ax.fill_between(x, arr[:, 0], arr[:, 1], alpha=0.4, label="daylight")
        ax.set_xlabel("day of year")
        ax.set_ylabel("hour")
        ax.set_ylim(0, eng.config.days.hours_per_day)
        ax.set_title(f"{eng.name} {args.year}")
        ax.legend()
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
