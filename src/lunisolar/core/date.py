"""
lunisolar.core.date
-------------------
The immutable date value shared by every East-Asian lunisolar variant.

A date carries its primary label (cycle, year of cycle, month, day of month)
together with two values cached at construction: the absolute day count
(days since 1972-01-01) and the leap month of its year. Instances are built
by a calendar system's `create` / `from_absolute` factories, never by hand.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any, Tuple

from .errors import CalendarValidationError
from .types import EastAsianMonth, Weekday, ChronoField, Unit

if TYPE_CHECKING:
    from ..engines.interfaces import CalendarSystemProtocol


def next_year(cycle: int, year_of_cycle: int) -> Tuple[int, int]:
    if year_of_cycle == 60:
        return cycle + 1, 1
    return cycle, year_of_cycle + 1


def previous_year(cycle: int, year_of_cycle: int) -> Tuple[int, int]:
    if year_of_cycle == 1:
        return cycle - 1, 60
    return cycle, year_of_cycle - 1


@dataclass(frozen=True, eq=False, repr=False)
class EastAsianDate:
    system: "CalendarSystemProtocol"
    cycle: int
    year_of_cycle: int
    month: EastAsianMonth
    day_of_month: int
    absolute_day: int
    leap_month_of_year: int = field(init=False)

    def __post_init__(self) -> None:
        if not (1 <= self.year_of_cycle <= 60):
            raise CalendarValidationError(f"Year of cycle out of range: {self.year_of_cycle}")
        if not (1 <= self.day_of_month <= 30):
            raise CalendarValidationError(f"Day of month out of range: {self.day_of_month}")

        lm = self.system.leap_month(self.cycle, self.year_of_cycle)
        if self.month.is_leap and self.month.number != lm:
            raise CalendarValidationError(
                f"Month {self.month} is not the leap month of year {self.cycle}-{self.year_of_cycle}."
            )
        object.__setattr__(self, "leap_month_of_year", lm)

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def related_gregorian_year(self) -> int:
        return self.system.related_gregorian_year(self.cycle, self.year_of_cycle)

    def day_of_week(self) -> Weekday:
        # absolute day 0 (1972-01-01) is a Saturday
        return Weekday((self.absolute_day + 5) % 7 + 1)

    def day_of_year(self) -> int:
        return self.absolute_day - self.system.new_year(self.cycle, self.year_of_cycle) + 1

    def is_leap_year(self) -> bool:
        return self.leap_month_of_year > 0

    def length_of_month(self) -> int:
        next_new_moon = self.system.new_moon_on_or_after(self.absolute_day + 1)
        return self.day_of_month + next_new_moon - self.absolute_day - 1

    def length_of_year(self) -> int:
        c, y = next_year(self.cycle, self.year_of_cycle)
        return self.system.new_year(c, y) - self.system.new_year(self.cycle, self.year_of_cycle)

    def to_gregorian(self) -> date:
        from .time import from_absolute_day
        return from_absolute_day(self.absolute_day)

    # ---------------------------------------------------------
    # Chronology shortcuts
    # ---------------------------------------------------------

    def get(self, f: ChronoField) -> Any:
        from ..chronology import CHRONOLOGY
        return CHRONOLOGY.get(self, f)

    def with_field(self, f: ChronoField, value: Any, *, lenient: bool = False) -> "EastAsianDate":
        from ..chronology import CHRONOLOGY
        return CHRONOLOGY.with_value(self, f, value, lenient=lenient)

    def plus(self, amount: int, unit: Unit) -> "EastAsianDate":
        from ..chronology import CHRONOLOGY
        return CHRONOLOGY.add(self, amount, unit)

    def minus(self, amount: int, unit: Unit) -> "EastAsianDate":
        return self.plus(-amount, unit)

    def until(self, end: "EastAsianDate", unit: Unit) -> int:
        from ..chronology import CHRONOLOGY
        return CHRONOLOGY.between(self, end, unit)

    # ---------------------------------------------------------
    # Identity and ordering
    # ---------------------------------------------------------

    def _same_calendar(self, other: "EastAsianDate") -> bool:
        return self.system.id == other.system.id

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EastAsianDate):
            return NotImplemented
        return (
            self._same_calendar(other)
            and self.cycle == other.cycle
            and self.year_of_cycle == other.year_of_cycle
            and self.day_of_month == other.day_of_month
            and self.month == other.month
            and self.absolute_day == other.absolute_day
        )

    def __hash__(self) -> int:
        return hash(self.absolute_day)

    def _key(self, other: object) -> int:
        if not isinstance(other, EastAsianDate):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if not self._same_calendar(other):
            raise TypeError(f"Cannot compare dates of '{self.system.id.name}' and '{other.system.id.name}'")
        return other.absolute_day

    def __lt__(self, other: "EastAsianDate") -> bool:
        return self.absolute_day < self._key(other)

    def __le__(self, other: "EastAsianDate") -> bool:
        return self.absolute_day <= self._key(other)

    def __gt__(self, other: "EastAsianDate") -> bool:
        return self.absolute_day > self._key(other)

    def __ge__(self, other: "EastAsianDate") -> bool:
        return self.absolute_day >= self._key(other)

    def is_after(self, other: "EastAsianDate") -> bool:
        return self > other

    def is_before(self, other: "EastAsianDate") -> bool:
        return self < other

    def __repr__(self) -> str:
        return (
            f"{self.system.id.name}[{self.year_of_cycle}({self.related_gregorian_year})"
            f"-{self.month}-{self.day_of_month:02d}]"
        )
