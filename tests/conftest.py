# tests/conftest.py

from typing import Any, Dict, List

import pytest

import lunisolar
from lunisolar import CalendarValidationError, EastAsianMonth
from lunisolar.core.date import EastAsianDate, next_year, previous_year
from lunisolar.core.types import EngineId


@pytest.fixture(scope="session")
def chinese():
    return lunisolar.get_calendar("chinese")


@pytest.fixture(scope="session")
def leap3_year(chinese):
    """(cycle, year_of_cycle) of the first year from 1900 whose leap month is 3."""
    for Y in range(1900, 2300):
        c, y = chinese.cycle_and_year(Y)
        if chinese.leap_month(c, y) == 3:
            return c, y
    pytest.fail("no year with leap month 3 between 1900 and 2300")


class FixedMonthSystem:
    """
    Arithmetic stand-in for a calendar system. Months alternate 30 and 29
    days within each year, and every year with (cycle * 60 + year) divisible
    by 3 repeats month 12 as a leap month. Year (78, 1) starts on day 0.
    """
    id = EngineId("mean", "fixed", "test")

    def leap_month(self, cycle: int, year_of_cycle: int) -> int:
        return 12 if (cycle * 60 + year_of_cycle) % 3 == 0 else 0

    def _labels(self, cycle: int, year_of_cycle: int) -> List[EastAsianMonth]:
        out = [EastAsianMonth.of(n) for n in range(1, 13)]
        if self.leap_month(cycle, year_of_cycle) == 12:
            out.append(EastAsianMonth.of(12).with_leap())
        return out

    def _year_length(self, cycle: int, year_of_cycle: int) -> int:
        return sum(30 if i % 2 == 0 else 29 for i in range(len(self._labels(cycle, year_of_cycle))))

    def new_year(self, cycle: int, year_of_cycle: int) -> int:
        target = cycle * 60 + year_of_cycle
        c, y, day = 78, 1, 0
        while c * 60 + y < target:
            day += self._year_length(c, y)
            c, y = next_year(c, y)
        while c * 60 + y > target:
            c, y = previous_year(c, y)
            day -= self._year_length(c, y)
        return day

    def months_of_year(self, cycle: int, year_of_cycle: int) -> List[Dict[str, Any]]:
        out = []
        first = self.new_year(cycle, year_of_cycle)
        for i, m in enumerate(self._labels(cycle, year_of_cycle)):
            length = 30 if i % 2 == 0 else 29
            out.append({"month": m, "first_day": first, "length": length})
            first += length
        return out

    def _year_of(self, day: int):
        c, y = 78, 1
        while self.new_year(*next_year(c, y)) <= day:
            c, y = next_year(c, y)
        while self.new_year(c, y) > day:
            c, y = previous_year(c, y)
        return c, y

    def new_moon_on_or_after(self, day: int) -> int:
        for row in self.months_of_year(*self._year_of(day)):
            if row["first_day"] >= day:
                return row["first_day"]
            if day < row["first_day"] + row["length"]:
                return row["first_day"] + row["length"]
        raise AssertionError("unreachable")

    def to_absolute(self, cycle: int, year_of_cycle: int, month: EastAsianMonth, day: int) -> int:
        for row in self.months_of_year(cycle, year_of_cycle):
            if row["month"] == month and 1 <= day <= row["length"]:
                return row["first_day"] + day - 1
        raise CalendarValidationError(f"No such date: {cycle}-{year_of_cycle}-{month}-{day}")

    def from_absolute(self, day: int) -> EastAsianDate:
        c, y = self._year_of(day)
        for row in self.months_of_year(c, y):
            if day < row["first_day"] + row["length"]:
                return self.create(c, y, row["month"], day - row["first_day"] + 1, day)
        raise AssertionError("unreachable")

    def create(self, cycle, year_of_cycle, month, day, absolute_day) -> EastAsianDate:
        return EastAsianDate(self, cycle, year_of_cycle, month, day, absolute_day)

    def related_gregorian_year(self, cycle: int, year_of_cycle: int) -> int:
        return (cycle - 1) * 60 + year_of_cycle - 2637


@pytest.fixture(scope="session")
def fixed_system():
    return FixedMonthSystem()
