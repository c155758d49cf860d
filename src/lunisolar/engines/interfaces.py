"""
lunisolar.engines.interfaces
----------------------------
The boundary between the date core and the calendar system that places
lunations, solar terms and leap months.

Standard Reference Frame:
All day arguments and results are absolute day counts, i.e. whole civil days
since 1972-01-01 in the variant's own time zone.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, List, Protocol, Tuple

from ..core.types import EastAsianMonth, EngineId

if TYPE_CHECKING:
    from ..core.date import EastAsianDate


class CalendarSystemProtocol(Protocol):
    """
    Supplies absolute-day conversions and leap-month lookup for one variant.
    Implementations must be pure functions of their inputs.
    """
    id: EngineId

    # ---------------------------------------------------------
    # 1. Astronomical primitives
    # ---------------------------------------------------------
    def new_year(self, cycle: int, year_of_cycle: int) -> int:
        """First day of the given lunisolar year."""
        ...

    def new_moon_on_or_after(self, day: int) -> int:
        """First day of the first month that starts on or after `day`."""
        ...

    def leap_month(self, cycle: int, year_of_cycle: int) -> int:
        """
        Number of the leap month of the year, or 0 if the year has none.
        A leap month n follows the ordinary month n.
        """
        ...

    # ---------------------------------------------------------
    # 2. Factories (validating)
    # ---------------------------------------------------------
    def to_absolute(self, cycle: int, year_of_cycle: int, month: EastAsianMonth, day: int) -> int:
        """
        Absolute day of a full label. Raises CalendarValidationError if the
        label does not exist.
        """
        ...

    def from_absolute(self, day: int) -> "EastAsianDate":
        """Fully formed date for an absolute day."""
        ...

    def create(
        self, cycle: int, year_of_cycle: int, month: EastAsianMonth, day: int, absolute_day: int
    ) -> "EastAsianDate":
        """Low-level constructor when the absolute day is already known."""
        ...

    # ---------------------------------------------------------
    # 3. Labels
    # ---------------------------------------------------------
    def related_gregorian_year(self, cycle: int, year_of_cycle: int) -> int:
        ...

    def cycle_and_year(self, related_year: int) -> Tuple[int, int]:
        """Inverse of related_gregorian_year."""
        ...

    def from_gregorian(self, d: date) -> "EastAsianDate":
        ...

    def months_of_year(self, cycle: int, year_of_cycle: int) -> List[Dict[str, Any]]:
        """
        Expected keys per month, in chronological order:
        'month': EastAsianMonth
        'first_day': int (absolute day)
        'length': int (29 or 30)
        """
        ...

    def info(self) -> Dict[str, Any]:
        ...
