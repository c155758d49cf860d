"""lunisolar public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_system,
    register_calendar,
    of,
    of_year,
    from_gregorian,
    add,
    between,
    with_field,
    new_year_day,
    months_in_year,
)
from .chronology import CHRONOLOGY, Chronology
from .core.date import EastAsianDate
from .core.errors import (
    LunisolarError,
    CalendarValidationError,
    DateRangeError,
    ArithmeticLimitError,
    UnsupportedUnitError,
    UnknownCalendarError,
)
from .core.types import (
    CalendarSpec,
    EngineId,
    EastAsianMonth,
    Weekday,
    Unit,
    ChronoField,
    DAY_OF_MONTH,
    DAY_OF_YEAR,
    MONTH_OF_YEAR,
)

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_system",
    "register_calendar",
    "of",
    "of_year",
    "from_gregorian",
    "add",
    "between",
    "with_field",
    "new_year_day",
    "months_in_year",
    "CHRONOLOGY",
    "Chronology",
    "EastAsianDate",
    "EastAsianMonth",
    "CalendarSpec",
    "EngineId",
    "Weekday",
    "Unit",
    "ChronoField",
    "DAY_OF_MONTH",
    "DAY_OF_YEAR",
    "MONTH_OF_YEAR",
    "LunisolarError",
    "CalendarValidationError",
    "DateRangeError",
    "ArithmeticLimitError",
    "UnsupportedUnitError",
    "UnknownCalendarError",
]
