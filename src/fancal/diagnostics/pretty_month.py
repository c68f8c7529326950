from __future__ import annotations

import argparse

from fancal.cli import add_calendar_args, engine_from_args
from fancal.engines.weeks import weekday_index


def dow_header(eng, w: int = 6) -> str:
    names = [wd.abbreviation or wd.name[:3] for wd in eng.config.weekdays]
    if not names:
        names = [str(i + 1) for i in range(eng.config.week_length)]
    return " ".join(n[:w].ljust(w) for n in names)


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]], extras: list[str]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    for line in extras:
        print(line)
    print()


def month_grid(eng, year: int, month: int) -> tuple[list[list[tuple[str, str]]], list[str]]:
    """
    Weeks of (day number, moon icon + festival mark) cells. Festivals outside
    the weekday cycle get no cell and are listed underneath instead.
    """
    wl = eng.config.week_length
    n_days = eng.days_in_month(month - 1, year)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    extras: list[str] = []
    started = False

    for d in range(1, n_days + 1):
        c = eng.date(year, month, d)
        fest = eng.festival(c)
        if fest is not None and not fest.counts_for_weekday:
            extras.append(f"  {d:2d}: {fest.name} (outside the week)")
            continue

        wd = weekday_index(eng.config, c)
        if not started:
            for _ in range(wd):
                wk.append(cell("", ""))
            started = True

        phase = eng.moon_phase(c)
        bot = phase.icon if phase else ""
        if fest is not None:
            bot += "*"
            extras.append(f"  {d:2d}: {fest.name}")
        wk.append(cell(f"{d:2d}", bot))
        if len(wk) == wl:
            weeks.append(wk)
            wk = []

    if wk:
        while len(wk) < wl:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks, extras


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month grid with weekday columns, first-moon icons and festivals."
    )
    add_calendar_args(p)
    p.add_argument("year", type=int, help="display year")
    p.add_argument("month", type=int, help="1-indexed month")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    m = eng.config.months[args.month - 1]
    weeks, extras = month_grid(eng, args.year, args.month)
    title = f"{eng.name}  {m.name} {args.year}  ({eng.days_in_month(args.month - 1, args.year)} days)"
    print_grid(title, dow_header(eng), weeks, extras)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
