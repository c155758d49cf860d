from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import lunisolar
from lunisolar.core.types import Unit


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "chinese,korean" -> ["chinese", "korean"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    system = lunisolar.get_calendar(calendar)

    for _ in range(N):
        d0 = random_date(start, end)
        t = lunisolar.from_gregorian(d0, calendar=calendar)

        back = system.to_absolute(t.cycle, t.year_of_cycle, t.month, t.day_of_month)
        if back != t.absolute_day or t.to_gregorian() != d0:
            failures += 1
            print("\nFAIL (label)")
            print("calendar:", calendar)
            print("d0:", d0)
            print("lunisolar:", t)
            print("back:", back, "expected:", t.absolute_day)
            if failures >= max_failures:
                return failures

        n = random.randint(-400, 400)
        moved = lunisolar.add(t, n, Unit.DAYS)
        if lunisolar.between(t, moved, Unit.DAYS) != n:
            failures += 1
            print("\nFAIL (days)")
            print("calendar:", calendar)
            print("lunisolar:", t, "n:", n, "moved:", moved)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunisolar -> gregorian.")
    p.add_argument("--calendars", type=str, default="chinese,korean,vietnamese",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=500, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed,
                                     max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
