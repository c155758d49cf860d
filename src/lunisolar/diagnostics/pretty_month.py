from __future__ import annotations

import argparse

import lunisolar
from lunisolar.core.time import from_absolute_day


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(calendar: str, Y: int, M: int, is_leap: bool) -> None:
    first = lunisolar.of_year(Y, M, 1, leap=is_leap, calendar=calendar)
    n = first.length_of_month()

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = int(first.day_of_week()) - 1  # Monday=1
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(n):
        g = from_absolute_day(first.absolute_day + i)
        wk.append(cell(f"{i + 1:2d}", f"{g.month:02d}-{g.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    d0 = first.to_gregorian()
    d1 = from_absolute_day(first.absolute_day + n - 1)
    title = f"{calendar} lunisolar month  {first!r}  M={first.month}  ({d0} .. {d1}, {n} days)"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunisolar month as a weekday grid with Gregorian labels."
    )
    p.add_argument("--calendar", default="chinese", help="chinese|korean|vietnamese (default: chinese)")
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"), default=(2024, 1),
                   help="Related Gregorian year and month number (default: 2024 1)")
    p.add_argument("--leap", action="store_true",
                   help="If set, print the leap instance of the month.")
    p.add_argument("--year", action="store_true",
                   help="Print every month of the year instead of a single month.")
    args = p.parse_args(argv)

    Y, M = args.lunar
    if args.year:
        for rec in lunisolar.months_in_year(Y, calendar=args.calendar, as_date=False):
            m = rec["month"]
            lunar_month_calendar(args.calendar, Y, m.number, m.is_leap)
        return 0

    lunar_month_calendar(args.calendar, Y=Y, M=M, is_leap=args.leap)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
