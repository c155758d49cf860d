"""
lunisolar.rules.units
---------------------
Calendar-unit arithmetic: adding years, months, weeks or days to a date,
and the signed distance between two dates in one of those units.
"""

from __future__ import annotations

from ..core.date import EastAsianDate, next_year, previous_year
from ..core.errors import ArithmeticLimitError, UnsupportedUnitError
from ..core.types import EastAsianMonth, Unit
from ..engines.interfaces import CalendarSystemProtocol
from .fields import clamped_date

# Month walking is linear in the delta; about one century
MAX_MONTH_DELTA = 1200


def check_month_delta(amount: int) -> None:
    if amount > MAX_MONTH_DELTA or amount < -MAX_MONTH_DELTA:
        raise ArithmeticLimitError(
            f"Month arithmetic limited to delta not greater than {MAX_MONTH_DELTA}: {amount}"
        )


class MonthCursor:
    """Steps through the month sequence of a calendar one month at a time."""

    def __init__(self, system: CalendarSystemProtocol, cycle: int, year_of_cycle: int, month: EastAsianMonth):
        self.system = system
        self.cycle = cycle
        self.year = year_of_cycle
        self.number = month.number
        self.leap = month.is_leap
        self.leap_month = system.leap_month(cycle, year_of_cycle)

    @property
    def month(self) -> EastAsianMonth:
        return EastAsianMonth(self.number, self.leap)

    def label(self):
        return self.cycle, self.year, self.month

    def forward(self) -> None:
        if self.leap:
            self.leap = False
            self.number += 1
        elif self.leap_month == self.number:
            self.leap = True
        else:
            self.number += 1

        if self.number > 12:
            self.number = 1
            self.cycle, self.year = next_year(self.cycle, self.year)
            self.leap_month = self.system.leap_month(self.cycle, self.year)

    def backward(self) -> None:
        if self.leap:
            self.leap = False
        elif self.number > 1 and self.leap_month == self.number - 1:
            self.leap = True
            self.number -= 1
        else:
            self.number -= 1

        if self.number < 1:
            self.cycle, self.year = previous_year(self.cycle, self.year)
            self.leap_month = self.system.leap_month(self.cycle, self.year)
            self.number = 12
            self.leap = (self.leap_month == 12)


class UnitRule:
    def __init__(self, unit: Unit):
        self.unit = unit

    def add_to(self, date: EastAsianDate, amount: int) -> EastAsianDate:
        system = date.system
        unit = self.unit

        if unit == Unit.YEARS:
            years = date.cycle * 60 + date.year_of_cycle - 1 + amount
            cycle, year = years // 60, years % 60 + 1
            month = date.month
            if month.is_leap and system.leap_month(cycle, year) != month.number:
                month = EastAsianMonth.of(month.number)
            return clamped_date(system, cycle, year, month, date.day_of_month)

        if unit == Unit.MONTHS:
            check_month_delta(amount)
            cursor = MonthCursor(system, date.cycle, date.year_of_cycle, date.month)
            step = cursor.forward if amount > 0 else cursor.backward
            for _ in range(abs(amount)):
                step()
            return clamped_date(system, cursor.cycle, cursor.year, cursor.month, date.day_of_month)

        if unit == Unit.WEEKS:
            return system.from_absolute(date.absolute_day + amount * 7)

        if unit == Unit.DAYS:
            return system.from_absolute(date.absolute_day + amount)

        raise UnsupportedUnitError(f"Unsupported unit: {unit!r}")

    def between(self, start: EastAsianDate, end: EastAsianDate) -> int:
        unit = self.unit

        if unit == Unit.YEARS:
            delta = (end.cycle * 60 + end.year_of_cycle) - (start.cycle * 60 + start.year_of_cycle)
            s_pos = (start.month, start.day_of_month)
            e_pos = (end.month, end.day_of_month)
            if delta > 0 and s_pos > e_pos:
                delta -= 1
            elif delta < 0 and s_pos < e_pos:
                delta += 1
            return delta

        if unit == Unit.MONTHS:
            negative = start.is_after(end)
            s, e = (end, start) if negative else (start, end)

            cursor = MonthCursor(s.system, s.cycle, s.year_of_cycle, s.month)
            target = (e.cycle, e.year_of_cycle, e.month)
            amount = 0
            while cursor.label() != target:
                cursor.forward()
                amount += 1
            if amount > 0 and s.day_of_month > e.day_of_month:
                amount -= 1
            return -amount if negative else amount

        if unit == Unit.WEEKS:
            days = end.absolute_day - start.absolute_day
            # truncated toward zero
            return days // 7 if days >= 0 else -(-days // 7)

        if unit == Unit.DAYS:
            return end.absolute_day - start.absolute_day

        raise UnsupportedUnitError(f"Unsupported unit: {unit!r}")
