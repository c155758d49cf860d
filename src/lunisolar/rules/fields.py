"""
lunisolar.rules.fields
----------------------
Field rules: the get / validate / set contract a generic chronology uses to
read and write single fields of an EastAsianDate.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

from ..core.date import EastAsianDate
from ..core.errors import CalendarValidationError
from ..core.types import ChronoField, EastAsianMonth
from ..engines.interfaces import CalendarSystemProtocol


class FieldRule(Protocol):
    def get(self, date: EastAsianDate) -> Any: ...
    def minimum(self, date: EastAsianDate) -> Any: ...
    def maximum(self, date: EastAsianDate) -> Any: ...
    def is_valid(self, date: EastAsianDate, value: Any) -> bool: ...
    def with_value(self, date: EastAsianDate, value: Any, lenient: bool = False) -> EastAsianDate: ...
    def child_at_floor(self, date: EastAsianDate) -> Optional[ChronoField]: ...
    def child_at_ceiling(self, date: EastAsianDate) -> Optional[ChronoField]: ...


def clamped_date(
    system: CalendarSystemProtocol,
    cycle: int,
    year_of_cycle: int,
    month: EastAsianMonth,
    day: int,
) -> EastAsianDate:
    """
    Date for a label whose day may overshoot the month.
    Day 30 is clamped to the length of the target month.
    """
    if day <= 29:
        return system.create(cycle, year_of_cycle, month, day, system.to_absolute(cycle, year_of_cycle, month, day))

    first_day = system.to_absolute(cycle, year_of_cycle, month, 1)
    day = min(day, system.from_absolute(first_day).length_of_month())
    return system.create(cycle, year_of_cycle, month, day, first_day + day - 1)


class DayRule:
    """Day of month (monthly=True) or day of year (monthly=False)."""

    def __init__(self, monthly: bool):
        self.monthly = monthly

    def _what(self) -> str:
        return "month" if self.monthly else "year"

    def get(self, date: EastAsianDate) -> int:
        return date.day_of_month if self.monthly else date.day_of_year()

    def minimum(self, date: EastAsianDate) -> int:
        return 1

    def maximum(self, date: EastAsianDate) -> int:
        return date.length_of_month() if self.monthly else date.length_of_year()

    def is_valid(self, date: EastAsianDate, value: Optional[int]) -> bool:
        if value is None or value < 1:
            return False
        if not self.monthly:
            return value <= date.length_of_year()
        if value > 30:
            return False
        if value == 30:
            return date.length_of_month() == 30
        return True

    def with_value(self, date: EastAsianDate, value: Optional[int], lenient: bool = False) -> EastAsianDate:
        if value is None:
            raise CalendarValidationError(f"Missing day of {self._what()}.")

        system = date.system
        shifted = date.absolute_day + value - self.get(date)

        if lenient:
            return system.from_absolute(shifted)
        if not self.is_valid(date, value):
            raise CalendarValidationError(f"Day of {self._what()} out of range: {value}")
        if self.monthly:
            return system.create(date.cycle, date.year_of_cycle, date.month, value, shifted)
        return system.from_absolute(shifted)

    def child_at_floor(self, date: EastAsianDate) -> Optional[ChronoField]:
        return None

    def child_at_ceiling(self, date: EastAsianDate) -> Optional[ChronoField]:
        return None


class MonthRule:
    """Month of year, including leap months."""

    def __init__(self, child: ChronoField):
        self.child = child

    def get(self, date: EastAsianDate) -> EastAsianMonth:
        return date.month

    def minimum(self, date: EastAsianDate) -> EastAsianMonth:
        return EastAsianMonth.of(1)

    def maximum(self, date: EastAsianDate) -> EastAsianMonth:
        # leap month 12 is not treated as the year's extreme
        return EastAsianMonth.of(12)

    def is_valid(self, date: EastAsianDate, value: Optional[EastAsianMonth]) -> bool:
        if value is None:
            return False
        return (not value.is_leap) or (value.number == date.leap_month_of_year)

    def with_value(
        self, date: EastAsianDate, value: Optional[EastAsianMonth], lenient: bool = False
    ) -> EastAsianDate:
        if not self.is_valid(date, value):
            raise CalendarValidationError(f"Invalid month: {value}")
        return clamped_date(date.system, date.cycle, date.year_of_cycle, value, date.day_of_month)

    def child_at_floor(self, date: EastAsianDate) -> Optional[ChronoField]:
        return self.child

    def child_at_ceiling(self, date: EastAsianDate) -> Optional[ChronoField]:
        return self.child
