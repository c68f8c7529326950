#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from fancal.cli import add_calendar_args, engine_from_args
from fancal.engines.leap import leap_year_description


def leap_rows(eng, start_year: int, end_year: int) -> List[Tuple[int, bool, int]]:
    """(display year, is leap, days in year) for each year in [start_year, end_year]."""
    return [(y, eng.is_leap_year(y), eng.days_in_year(y)) for y in range(start_year, end_year + 1)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap years and year lengths over a range of display years.")
    add_calendar_args(p)
    p.add_argument("--start-year", type=int, default=None, help="default: year zero")
    p.add_argument("--end-year", type=int, default=None, help="default: start + 20")
    p.add_argument("--only-leap", action="store_true", help="print leap years only")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    start = args.start_year if args.start_year is not None else eng.config.years.year_zero
    end = args.end_year if args.end_year is not None else start + 20
    if end < start:
        raise SystemExit("--end-year must be >= --start-year")

    rows = leap_rows(eng, start, end)
    print(f"{eng.name}: {leap_year_description(eng.config)}")
    print(f"{'year':>8}  leap  days")
    for y, leap, n in rows:
        if args.only_leap and not leap:
            continue
        print(f"{y:>8}  {'yes ' if leap else '    '}  {n}")

    total = sum(n for _, _, n in rows)
    n_leap = sum(1 for _, leap, _ in rows if leap)
    print()
    print(f"{n_leap} leap years of {len(rows)}; mean year = {total / len(rows):.4f} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
