#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from fancal.cli import add_calendar_args, engine_from_args
from fancal.engines.moon import convergences_in_range


def full_moon_days(eng, moon_index: int, year: int) -> List[int]:
    """0-indexed days of `year` on which the moon starts a full phase."""
    start = eng.date(year, 1, 1)
    end = eng.add_days(start, eng.days_in_year(year) - 1)
    return [eng.day_of_year(c) for c in convergences_in_range(eng, [moon_index], start, end)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Full moons per moon over one display year, with spacing statistics.")
    add_calendar_args(p)
    p.add_argument("year", type=int, help="display year")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    if not eng.config.moons:
        print(f"{eng.name} has no moons")
        return 0

    for i, m in enumerate(eng.config.moons):
        days = full_moon_days(eng, i, args.year)
        print(f"{m.name} (cycle {m.cycle_length:g} days): {len(days)} full moons")
        print("  days of year: " + ", ".join(str(d + 1) for d in days))
        if len(days) >= 2:
            gaps = [b - a for a, b in zip(days, days[1:])]
            print(f"  spacing: mean={sum(gaps) / len(gaps):.3f} min={min(gaps)} max={max(gaps)}")
        print()

    if len(eng.config.moons) > 1:
        start = eng.date(args.year, 1, 1)
        end = eng.add_days(start, eng.days_in_year(args.year) - 1)
        all_full = convergences_in_range(eng, range(len(eng.config.moons)), start, end)
        print(f"All moons full together: {len(all_full)}")
        for c in all_full:
            print(f"  {eng.format(c, 'long')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
