# tests/test_unit_rules.py

import random
from datetime import date

import pytest

import lunisolar
from lunisolar import (
    ArithmeticLimitError,
    DateRangeError,
    EastAsianMonth,
    Unit,
    UnsupportedUnitError,
)
from lunisolar.core.date import next_year
from lunisolar.rules.units import MAX_MONTH_DELTA, MonthCursor, UnitRule


@pytest.mark.parametrize("unit", list(Unit))
def test_add_zero_is_identity(unit):
    for g in (date(2024, 6, 15), date(1987, 7, 30), date(2033, 12, 1)):
        d = lunisolar.from_gregorian(g)
        assert lunisolar.add(d, 0, unit) == d


def test_days_roundtrip(chinese):
    random.seed(2024)
    for _ in range(100):
        d = lunisolar.from_gregorian(date(1950, 1, 1)).plus(random.randint(0, 50000), Unit.DAYS)
        n = random.randint(-5000, 5000)
        e = lunisolar.add(d, n, Unit.DAYS)
        assert e.absolute_day == d.absolute_day + n
        assert lunisolar.between(d, e, Unit.DAYS) == n
        assert lunisolar.between(e, d, Unit.DAYS) == -n


def test_weeks():
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    assert lunisolar.add(d, 3, Unit.WEEKS).to_gregorian() == date(2024, 7, 6)
    assert lunisolar.add(d, -1, Unit.WEEKS).to_gregorian() == date(2024, 6, 8)

    e = lunisolar.add(d, 13, Unit.DAYS)
    assert lunisolar.between(d, e, Unit.WEEKS) == 1
    # truncated toward zero, not floored
    assert lunisolar.between(e, d, Unit.WEEKS) == -1
    assert lunisolar.between(d, lunisolar.add(d, 6, Unit.DAYS), Unit.WEEKS) == 0
    assert lunisolar.between(lunisolar.add(d, 6, Unit.DAYS), d, Unit.WEEKS) == 0
    assert lunisolar.between(d, lunisolar.add(d, 14, Unit.DAYS), Unit.WEEKS) == 2


# ---------------------------------------------------------
# Months
# ---------------------------------------------------------

def test_month_walk_is_contiguous():
    d = lunisolar.of_year(2020, 1, 1)
    prev = d
    for k in range(1, 40):
        cur = lunisolar.add(d, k, Unit.MONTHS)
        assert cur.day_of_month == 1
        assert cur.absolute_day == prev.absolute_day + prev.length_of_month()
        prev = cur


def test_month_walk_backward_is_contiguous():
    d = lunisolar.of_year(2030, 1, 1)
    nxt = d
    for k in range(1, 40):
        cur = lunisolar.add(d, -k, Unit.MONTHS)
        assert cur.day_of_month == 1
        assert cur.absolute_day + cur.length_of_month() == nxt.absolute_day
        nxt = cur


def test_month_forward_backward_inverse():
    random.seed(11)
    base = lunisolar.from_gregorian(date(2000, 1, 1))
    for _ in range(40):
        d = lunisolar.add(base, random.randint(0, 8000), Unit.DAYS)
        d = lunisolar.with_field(d, lunisolar.DAY_OF_MONTH, min(d.day_of_month, 29))
        n = random.randint(-60, 60)
        e = lunisolar.add(d, n, Unit.MONTHS)
        assert e.day_of_month == d.day_of_month
        assert lunisolar.add(e, -n, Unit.MONTHS) == d
        assert lunisolar.between(d, e, Unit.MONTHS) == n


def test_leap_month_sequence(leap3_year):
    c, y = leap3_year
    d = lunisolar.of(c, y, 3, 29)

    one = lunisolar.add(d, 1, Unit.MONTHS)
    assert (one.year_of_cycle, one.month, one.day_of_month) == (y, EastAsianMonth(3, True), 29)

    two = lunisolar.add(d, 2, Unit.MONTHS)
    assert (two.year_of_cycle, two.month, two.day_of_month) == (y, EastAsianMonth(4), 29)

    assert lunisolar.add(two, -1, Unit.MONTHS) == one
    assert lunisolar.add(one, -1, Unit.MONTHS) == d
    assert lunisolar.between(d, two, Unit.MONTHS) == 2
    assert lunisolar.between(two, d, Unit.MONTHS) == -2


def test_month_across_year_boundary(chinese):
    Y = next(Y for Y in range(2024, 2040) if chinese.leap_month(*chinese.cycle_and_year(Y)) != 12)
    d = lunisolar.of_year(Y, 12, 5)
    e = lunisolar.add(d, 1, Unit.MONTHS)
    assert (e.related_gregorian_year, e.month, e.day_of_month) == (Y + 1, EastAsianMonth(1), 5)
    assert lunisolar.add(e, -1, Unit.MONTHS).month.number == 12


def test_month_cycle_rollover(chinese):
    # year 60 of cycle 78 is 2043
    d = lunisolar.of(78, 60, 12, 1, leap=chinese.leap_month(78, 60) == 12)
    e = lunisolar.add(d, 1, Unit.MONTHS)
    assert (e.cycle, e.year_of_cycle, e.month) == (79, 1, EastAsianMonth(1))
    back = lunisolar.add(e, -1, Unit.MONTHS)
    assert (back.cycle, back.year_of_cycle) == (78, 60)


def test_month_leap_12_boundary(fixed_system):
    # year (78, 3) repeats month 12; (78, 4) does not
    system = fixed_system
    leap12 = EastAsianMonth.of(12).with_leap()
    one = system.from_absolute(system.to_absolute(78, 4, EastAsianMonth(1), 3))

    back = lunisolar.add(one, -1, Unit.MONTHS)
    assert (back.cycle, back.year_of_cycle, back.month, back.day_of_month) == (78, 3, leap12, 3)
    twelve = lunisolar.add(one, -2, Unit.MONTHS)
    assert (twelve.cycle, twelve.year_of_cycle, twelve.month) == (78, 3, EastAsianMonth(12))

    assert lunisolar.add(twelve, 1, Unit.MONTHS) == back
    assert lunisolar.add(twelve, 2, Unit.MONTHS) == one
    assert lunisolar.add(back, 1, Unit.MONTHS) == one

    assert lunisolar.between(twelve, one, Unit.MONTHS) == 2
    assert lunisolar.between(one, twelve, Unit.MONTHS) == -2
    assert lunisolar.between(back, one, Unit.MONTHS) == 1
    assert lunisolar.between(one, back, Unit.MONTHS) == -1
    assert lunisolar.between(twelve, back, Unit.MONTHS) == 1


def test_month_leap_12_clamps(fixed_system):
    # in year (78, 3) ordinary 12 has 29 days, leap 12 has 30
    system = fixed_system
    d = system.from_absolute(system.to_absolute(78, 4, EastAsianMonth(1), 30))
    back = lunisolar.add(d, -1, Unit.MONTHS)
    assert (back.month, back.day_of_month) == (EastAsianMonth.of(12).with_leap(), 30)
    twelve = lunisolar.add(d, -2, Unit.MONTHS)
    assert (twelve.month, twelve.day_of_month) == (EastAsianMonth(12), 29)


def test_month_cursor_leap_12_cycle_wrap(fixed_system):
    # (78, 60) repeats month 12 and is followed by (79, 1)
    cursor = MonthCursor(fixed_system, 79, 1, EastAsianMonth(1))
    cursor.backward()
    assert cursor.label() == (78, 60, EastAsianMonth.of(12).with_leap())
    cursor.backward()
    assert cursor.label() == (78, 60, EastAsianMonth(12))
    cursor.forward()
    assert cursor.label() == (78, 60, EastAsianMonth.of(12).with_leap())
    cursor.forward()
    assert cursor.label() == (79, 1, EastAsianMonth(1))
    cursor.backward()
    cursor.backward()
    cursor.backward()
    assert cursor.label() == (78, 60, EastAsianMonth(11))


def test_month_clamps_day_30(chinese):
    months = chinese.months_of_year(78, 41)
    for a, b in zip(months, months[1:]):
        if a["length"] == 30 and b["length"] == 29:
            d = lunisolar.of(78, 41, a["month"], 30)
            e = lunisolar.add(d, 1, Unit.MONTHS)
            assert e.month == b["month"] and e.day_of_month == 29
            break
    else:
        pytest.skip("no long month followed by a short one in 2024")


def test_month_between_uses_day_as_tie_break(chinese):
    steps = 2 if chinese.leap_month(78, 41) == 5 else 1
    d = lunisolar.of_year(2024, 5, 20)
    e = lunisolar.of_year(2024, 6, 10)
    assert lunisolar.between(d, e, Unit.MONTHS) == steps - 1
    assert lunisolar.between(e, d, Unit.MONTHS) == -(steps - 1)
    f = lunisolar.of_year(2024, 6, 20)
    assert lunisolar.between(d, f, Unit.MONTHS) == steps
    assert lunisolar.between(f, d, Unit.MONTHS) == -steps


def test_month_delta_limit():
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    assert MAX_MONTH_DELTA == 1200
    assert lunisolar.add(d, 1200, Unit.MONTHS).related_gregorian_year in (2120, 2121, 2122)
    assert lunisolar.add(d, -1200, Unit.MONTHS).related_gregorian_year in (1926, 1927, 1928)
    with pytest.raises(ArithmeticLimitError):
        lunisolar.add(d, 1201, Unit.MONTHS)
    with pytest.raises(ArithmeticLimitError):
        lunisolar.add(d, -1201, Unit.MONTHS)
    # also an ArithmeticError
    with pytest.raises(ArithmeticError):
        lunisolar.add(d, 5000, Unit.MONTHS)


# ---------------------------------------------------------
# Years
# ---------------------------------------------------------

def test_years_one_cycle():
    d = lunisolar.of_year(2024, 5, 1)
    e = lunisolar.add(d, 60, Unit.YEARS)
    assert (e.cycle, e.year_of_cycle, e.month, e.day_of_month) == (79, 41, EastAsianMonth(5), 1)
    assert e.related_gregorian_year == 2084
    assert lunisolar.between(d, e, Unit.YEARS) == 60
    assert lunisolar.between(e, d, Unit.YEARS) == -60


def test_years_partial():
    d = lunisolar.of_year(2024, 5, 10)
    assert lunisolar.between(d, lunisolar.of_year(2025, 5, 9), Unit.YEARS) == 0
    assert lunisolar.between(d, lunisolar.of_year(2025, 5, 10), Unit.YEARS) == 1
    assert lunisolar.between(d, lunisolar.of_year(2025, 4, 29), Unit.YEARS) == 0
    assert lunisolar.between(lunisolar.of_year(2025, 5, 9), d, Unit.YEARS) == 0
    assert lunisolar.between(lunisolar.of_year(2026, 5, 9), d, Unit.YEARS) == -1


def test_years_demote_leap_month(leap3_year, chinese):
    c, y = leap3_year
    d = lunisolar.of(c, y, 3, 2, leap=True)
    e = lunisolar.add(d, 1, Unit.YEARS)
    assert chinese.leap_month(e.cycle, e.year_of_cycle) != 3
    assert e.month == EastAsianMonth(3)
    assert e.day_of_month == 2


def test_years_between_from_leap_month(leap3_year):
    # leap 3 sorts after ordinary 3, so a year has not yet elapsed
    c, y = leap3_year
    d = lunisolar.of(c, y, 3, 5, leap=True)
    e = lunisolar.of(*next_year(c, y), 3, 10)
    assert lunisolar.between(d, e, Unit.YEARS) == 0
    assert lunisolar.between(e, d, Unit.YEARS) == 0

    plain = lunisolar.of(c, y, 3, 5)
    assert lunisolar.between(plain, e, Unit.YEARS) == 1
    assert lunisolar.between(e, plain, Unit.YEARS) == -1


def test_years_negative_cross_cycle():
    d = lunisolar.of(79, 2, 4, 8)
    e = lunisolar.add(d, -3, Unit.YEARS)
    assert (e.cycle, e.year_of_cycle, e.month, e.day_of_month) == (78, 59, EastAsianMonth(4), 8)


# ---------------------------------------------------------
# Errors
# ---------------------------------------------------------

def test_unsupported_unit():
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    with pytest.raises(UnsupportedUnitError):
        lunisolar.add(d, 1, 99)
    with pytest.raises(UnsupportedUnitError):
        UnitRule(99).add_to(d, 1)
    with pytest.raises(UnsupportedUnitError):
        UnitRule(99).between(d, d)
    with pytest.raises(NotImplementedError):
        lunisolar.between(d, d, 0)


def test_range_limits(chinese):
    hi = chinese.from_absolute(chinese.max_day)
    with pytest.raises(DateRangeError):
        lunisolar.add(hi, 1, Unit.DAYS)
    with pytest.raises(DateRangeError):
        lunisolar.add(hi, 1, Unit.MONTHS)
    lo = chinese.from_absolute(chinese.min_day)
    with pytest.raises(DateRangeError):
        lunisolar.add(lo, -1, Unit.YEARS)
