from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import lunisolar


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Chinese", "chinese"),
    ("Korean", "korean"),
    ("Vietnamese", "vietnamese"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "CN=chinese,KR=korean"
    If you pass just names, labels will be the capitalized names:
      --calendars "chinese,vietnamese"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cal = it.split("=", 1)
            out.append((name.strip(), cal.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print New Year date table for several lunisolar calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "CN=chinese,KR=korean" (default: all three variants).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Cyc"] + [name for name, _ in calendars]
    colw = [5, 3] + [max(10, len(h)) for h in headers[2:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        cyc = None
        for (name, cal), w in zip(calendars, colw[2:]):
            ny = lunisolar.new_year_day(Y, calendar=cal)
            cyc = ny["year_of_cycle"]
            leap = f" L{ny['leap_month']}" if ny["leap_month"] else ""
            row.append((fmt(ny["date"]) + leap).ljust(w))
        row.insert(1, str(cyc).rjust(colw[1]))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
