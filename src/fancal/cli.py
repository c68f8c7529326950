from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import re
import sys

from .core.errors import FancalError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})(?:[T ](\d{1,2}):(\d{2})(?::(\d{2}))?)?$")


def _parse_date(s: str) -> tuple:
    """'YYYY-MM-DD[THH:MM[:SS]]' in the calendar's own display years, 1-indexed."""
    m = _DATE_RE.match(s.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"expected YEAR-MONTH-DAY[THH:MM[:SS]], got {s!r}")
    return tuple(int(g) if g is not None else 0 for g in m.groups())


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def add_calendar_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default="gregorian", help="built-in calendar name (see `fancal list`)")
    p.add_argument("--file", default=None, help="calendar JSON file; overrides --calendar")


def engine_from_args(args: argparse.Namespace):
    import fancal

    if getattr(args, "file", None):
        return fancal.make_engine(args.file)
    return fancal.get_calendar(args.calendar)


def _moment(eng, args: argparse.Namespace):
    if args.time is not None:
        return eng.components(args.time)
    if args.date is None:
        raise SystemExit("give a date (YEAR-MONTH-DAY) or --time SECONDS")
    return eng.date(*args.date)


def _add_moment_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("date", nargs="?", type=_parse_date, help="YEAR-MONTH-DAY[THH:MM[:SS]] (1-indexed)")
    p.add_argument("--time", type=int, default=None, help="absolute world time in seconds")
    add_calendar_args(p)


def cmd_day(argv: list[str]) -> int:
    from dataclasses import asdict
    from .attributes.registry import compute_attributes, list_attributes

    p = argparse.ArgumentParser(prog="fancal day", description="Everything known about one moment")
    _add_moment_args(p)
    p.add_argument("--attr", action="append", default=[], help="extra attribute (repeatable): " + ", ".join(list_attributes()))
    p.add_argument("--json", action="store_true", help="print JSON instead of a summary")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    info = eng.day_info(_moment(eng, args))
    attrs = compute_attributes(eng, info, args.attr) if args.attr else {}

    if args.json:
        out = asdict(info)
        out["attributes"] = attrs or None
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    print(eng.format(info.components, "full"))
    print(f"  weekday       : {info.weekday}")
    print(f"  leap year     : {info.is_leap_year}")
    if info.festival:
        print(f"  festival      : {info.festival}")
    if info.season:
        print(f"  season        : {info.season}")
    if info.era:
        print(f"  era           : {info.era.name} ({info.era.year_in_era})")
    for m in info.moons:
        print(f"  moon          : {m.icon} {m.sub_phase_name} ({m.day_in_cycle})")
    if info.canonical_hour:
        print(f"  canonical hour: {info.canonical_hour}")
    if info.week:
        print(f"  week          : {info.week.week_name} (#{info.week.week_number})")
    if info.cycles.text:
        print(f"  cycles        : {info.cycles.text}")
    dl = info.daylight
    print(f"  daylight      : {dl.sunrise:.2f} -> {dl.sunset:.2f} ({dl.daylight_hours:.2f} h)")
    for k, v in attrs.items():
        print(f"  {k:<14}: {v}")
    return 0


def cmd_format(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="fancal format", description="Format a moment with a preset or template")
    _add_moment_args(p)
    p.add_argument("--template", "-t", default="long", help="preset name, date_formats key or raw template")
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    print(eng.format(_moment(eng, args), args.template))
    return 0


def cmd_info(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="fancal info", description="Summary of a calendar definition")
    add_calendar_args(p)
    args = p.parse_args(argv)

    eng = engine_from_args(args)
    print(json.dumps(eng.info(), indent=2, ensure_ascii=False))
    return 0


def cmd_validate(argv: list[str]) -> int:
    from .engines.config import load_calendar, validate_config

    p = argparse.ArgumentParser(prog="fancal validate", description="Load a calendar JSON file and report problems")
    p.add_argument("file")
    args = p.parse_args(argv)

    problems = validate_config(load_calendar(args.file))
    for msg in problems:
        print(f"- {msg}")
    if not problems:
        print("ok")
    return 1 if problems else 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="fancal", description="Fantasy calendar toolkit CLI.")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List built-in calendars")
    sub.add_parser("info", help="Summary of a calendar definition")
    sub.add_parser("day", help="Everything known about one moment")
    sub.add_parser("format", help="Format a moment")
    sub.add_parser("validate", help="Validate a calendar JSON file")
    # diagnostics
    sub.add_parser("pretty-month", help="Print a month grid")
    sub.add_parser("leap", help="Leap years and year lengths over a range")
    sub.add_parser("moon", help="Full moons of every moon through one year")
    sub.add_parser("daylight", help="Sunrise, sunset and day length through one year")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "list":
            import fancal
            for name in fancal.list_calendars():
                print(name)
            return 0

        if args.cmd == "info":
            return cmd_info(rest)

        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "format":
            return cmd_format(rest)

        if args.cmd == "validate":
            return cmd_validate(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("fancal.diagnostics.pretty_month", rest)

        tool_map = {
            "leap": "fancal.diagnostics.leap_table",
            "moon": "fancal.diagnostics.moon_table",
            "daylight": "fancal.diagnostics.daylight_table",
        }
        if args.cmd in tool_map:
            return _run_module_main(tool_map[args.cmd], rest)
    except FancalError as e:
        logger.debug("command failed", exc_info=True)
        print(f"fancal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
