from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

from .core.errors import LunisolarError
from .core.types import Unit


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_unit(s: str) -> Unit:
    try:
        return Unit[s.strip().upper()]
    except KeyError:
        raise SystemExit(f"Unknown unit '{s}'. Known: {[u.name.lower() for u in Unit]}") from None


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


def _describe(d) -> str:
    return (
        f"{d!r}  cycle={d.cycle} year={d.year_of_cycle} month={d.month} day={d.day_of_month}  "
        f"{d.day_of_week().name.capitalize()}  gregorian={d.to_gregorian().isoformat()}"
    )


def cmd_day(argv: list[str]) -> int:
    import lunisolar

    p = argparse.ArgumentParser(prog="lunisolar day", description="Gregorian -> lunisolar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    d = lunisolar.from_gregorian(_parse_ymd(args.date), calendar=args.calendar)
    print(_describe(d))
    print(f"  day of year     = {d.day_of_year()} / {d.length_of_year()}")
    print(f"  length of month = {d.length_of_month()}")
    print(f"  leap month      = {d.leap_month_of_year or '-'}")
    return 0


def cmd_add(argv: list[str]) -> int:
    import lunisolar

    p = argparse.ArgumentParser(prog="lunisolar add", description="Add years/months/weeks/days to a date")
    p.add_argument("date", help="Gregorian YYYY-MM-DD of the start date")
    p.add_argument("amount", type=int)
    p.add_argument("unit", help="years|months|weeks|days")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    d = lunisolar.from_gregorian(_parse_ymd(args.date), calendar=args.calendar)
    print(_describe(lunisolar.add(d, args.amount, _parse_unit(args.unit))))
    return 0


def cmd_between(argv: list[str]) -> int:
    import lunisolar

    p = argparse.ArgumentParser(prog="lunisolar between", description="Signed distance between two dates")
    p.add_argument("start", help="Gregorian YYYY-MM-DD")
    p.add_argument("end", help="Gregorian YYYY-MM-DD")
    p.add_argument("unit", help="years|months|weeks|days")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    s = lunisolar.from_gregorian(_parse_ymd(args.start), calendar=args.calendar)
    e = lunisolar.from_gregorian(_parse_ymd(args.end), calendar=args.calendar)
    print(lunisolar.between(s, e, _parse_unit(args.unit)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `lunisolar YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="lunisolar", description="East-Asian lunisolar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunisolar day label")
    sub.add_parser("add", help="Add an amount of a unit to a date")
    sub.add_parser("between", help="Distance between two dates in a unit")

    # diagnostics
    sub.add_parser("pretty-month", help="Print a lunisolar month as a weekday grid (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["leap-months", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "add":
            return cmd_add(rest)

        if args.cmd == "between":
            return cmd_between(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("lunisolar.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("lunisolar.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "leap-months": "lunisolar.diagnostics.leap_months",
                "round-trip": "lunisolar.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except LunisolarError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
