from __future__ import annotations
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Literal

from .errors import CalendarValidationError


@dataclass(frozen=True)
class EngineId:
    family: Literal["mean"]
    name: str
    version: str


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar system of one variant."""
    id: EngineId
    label: str
    zone_offset_minutes: int  # civil day boundary, minutes east of Greenwich
    min_year: int             # first supported related Gregorian year
    max_year: int             # last supported related Gregorian year

    def __post_init__(self) -> None:
        if not (-720 <= self.zone_offset_minutes <= 840):
            raise ValueError("zone_offset_minutes must be in -720..840")
        if self.min_year > self.max_year:
            raise ValueError("Require min_year <= max_year")

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


@dataclass(frozen=True, order=True)
class EastAsianMonth:
    """
    Month number 1..12 plus leap flag.

    Ordering is numeric; a leap month sorts directly after the ordinary
    month of the same number.
    """
    number: int
    is_leap: bool = False

    def __post_init__(self) -> None:
        if not (1 <= self.number <= 12):
            raise CalendarValidationError(f"Month number out of range: {self.number}")

    @classmethod
    def of(cls, number: int) -> "EastAsianMonth":
        return cls(number)

    def with_leap(self) -> "EastAsianMonth":
        return replace(self, is_leap=True)

    def __str__(self) -> str:
        return f"*{self.number}" if self.is_leap else str(self.number)


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class Unit(IntEnum):
    YEARS = 1
    MONTHS = 2
    WEEKS = 3
    DAYS = 4


@dataclass(frozen=True)
class ChronoField:
    """Process-wide field descriptor; rules are looked up by it, never owned by it."""
    name: str

    def __str__(self) -> str:
        return self.name


DAY_OF_MONTH = ChronoField("DAY_OF_MONTH")
DAY_OF_YEAR = ChronoField("DAY_OF_YEAR")
MONTH_OF_YEAR = ChronoField("MONTH_OF_YEAR")
