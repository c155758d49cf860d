class LunisolarError(Exception):
    """Base error."""

class CalendarValidationError(LunisolarError, ValueError):
    """Raised when a field value or date label does not exist in the calendar."""

class DateRangeError(CalendarValidationError):
    """Raised when a date falls outside the supported range of a calendar variant."""

class ArithmeticLimitError(LunisolarError, ArithmeticError):
    """Raised when month arithmetic exceeds the supported delta."""

class UnsupportedUnitError(LunisolarError, NotImplementedError):
    """Raised for units or fields a chronology does not handle."""

class UnknownCalendarError(LunisolarError, KeyError):
    """Raised when a calendar variant is not registered."""
