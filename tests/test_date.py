# tests/test_date.py

from datetime import date

import pytest

import lunisolar
from lunisolar import CalendarValidationError, EastAsianDate, EastAsianMonth, Unit
from lunisolar.core.date import next_year, previous_year


def test_year_stepping():
    assert next_year(78, 60) == (79, 1)
    assert next_year(78, 41) == (78, 42)
    assert previous_year(79, 1) == (78, 60)
    assert previous_year(78, 41) == (78, 40)


def test_derived_fields(chinese):
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    assert d.related_gregorian_year == 2024
    assert (d.cycle, d.year_of_cycle) == (78, 41)
    assert d.to_gregorian() == date(2024, 6, 15)
    assert d.leap_month_of_year == chinese.leap_month(78, 41)
    assert d.is_leap_year() == (d.leap_month_of_year > 0)

    ny = chinese.new_year(78, 41)
    assert d.day_of_year() == d.absolute_day - ny + 1
    assert d.length_of_year() == chinese.new_year(78, 42) - ny


def test_first_and_last_day_of_year(chinese):
    ny = chinese.new_year(78, 41)
    first = chinese.from_absolute(ny)
    assert first.day_of_year() == 1
    last = chinese.from_absolute(ny + first.length_of_year() - 1)
    assert last.day_of_year() == first.length_of_year()
    assert last.year_of_cycle == 41


def test_length_of_month_agrees_with_month_table(chinese):
    for rec in chinese.months_of_year(78, 41):
        for offset in (0, 14, rec["length"] - 1):
            d = chinese.from_absolute(rec["first_day"] + offset)
            assert d.month == rec["month"]
            assert d.day_of_month == offset + 1
            assert d.length_of_month() == rec["length"]


def test_construction_validates(chinese):
    c, y = 78, 41
    lm = chinese.leap_month(c, y)
    other = 5 if lm != 5 else 6
    ny = chinese.new_year(c, y)

    with pytest.raises(CalendarValidationError):
        EastAsianDate(chinese, c, y, EastAsianMonth(other, True), 1, ny)
    with pytest.raises(CalendarValidationError):
        EastAsianDate(chinese, c, 61, EastAsianMonth(1), 1, ny)
    with pytest.raises(CalendarValidationError):
        EastAsianDate(chinese, c, y, EastAsianMonth(1), 0, ny)
    with pytest.raises(CalendarValidationError):
        EastAsianDate(chinese, c, y, EastAsianMonth(1), 31, ny)


def test_leap_month_date(leap3_year, chinese):
    c, y = leap3_year
    d = lunisolar.of(c, y, 3, 1, leap=True)
    assert d.month == EastAsianMonth(3, True)
    assert d.is_leap_year() and d.leap_month_of_year == 3
    assert "-*3-01]" in repr(d)
    # the leap month follows the ordinary one
    ordinary = lunisolar.of(c, y, 3, 1)
    assert d.absolute_day == ordinary.absolute_day + ordinary.length_of_month()


def test_repr():
    d = lunisolar.of_year(2024, 1, 1)
    assert repr(d) == "chinese[41(2024)-1-01]"
    k = lunisolar.of_year(2024, 1, 1, calendar="korean")
    assert repr(k).startswith("korean[41(2024)-1-01")


def test_equality_and_hash():
    a = lunisolar.from_gregorian(date(2024, 6, 15))
    b = lunisolar.from_gregorian(date(2024, 6, 15))
    c = lunisolar.from_gregorian(date(2024, 6, 16))
    assert a == b and hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2
    assert a != "2024-06-15"

    k = lunisolar.from_gregorian(date(2024, 6, 15), calendar="korean")
    assert a != k


def test_ordering():
    a = lunisolar.from_gregorian(date(2024, 6, 15))
    c = lunisolar.from_gregorian(date(2024, 6, 16))
    assert a < c and a <= c and c > a and c >= a and a <= a
    assert c.is_after(a) and a.is_before(c)
    assert not a.is_after(a)
    assert sorted([c, a]) == [a, c]


def test_ordering_across_calendars_is_an_error():
    a = lunisolar.from_gregorian(date(2024, 6, 15))
    k = lunisolar.from_gregorian(date(2024, 6, 20), calendar="korean")
    with pytest.raises(TypeError):
        a < k
    with pytest.raises(TypeError):
        a.is_before(k)


def test_convenience_methods():
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    assert d.plus(10, Unit.DAYS).to_gregorian() == date(2024, 6, 25)
    assert d.minus(1, Unit.WEEKS).to_gregorian() == date(2024, 6, 8)
    assert d.until(d.plus(3, Unit.MONTHS), Unit.MONTHS) == 3
    assert d.get(lunisolar.DAY_OF_MONTH) == d.day_of_month
    assert d.with_field(lunisolar.DAY_OF_MONTH, 1).day_of_month == 1


def test_dates_are_immutable():
    d = lunisolar.from_gregorian(date(2024, 6, 15))
    with pytest.raises(AttributeError):
        d.day_of_month = 3
