from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .chronology import CHRONOLOGY
from .core.date import EastAsianDate
from .core.engine import EngineRegistry
from .core.time import from_absolute_day
from .core.types import CalendarSpec, ChronoField, EastAsianMonth, Unit
from .engines.factory import make_system as _make_system
from .engines.interfaces import CalendarSystemProtocol

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def get_calendar(calendar: str) -> CalendarSystemProtocol:
    return _reg().get(calendar)

def make_system(spec: CalendarSpec) -> CalendarSystemProtocol:
    return _make_system(spec)

def register_calendar(name: str, system: CalendarSystemProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, system, overwrite=overwrite)

# ============================================================
# Dates
# ============================================================

def _month(month: Union[int, EastAsianMonth], leap: bool) -> EastAsianMonth:
    if isinstance(month, EastAsianMonth):
        return month.with_leap() if leap else month
    return EastAsianMonth(month, leap)

def of(
    cycle: int,
    year_of_cycle: int,
    month: Union[int, EastAsianMonth],
    day: int,
    *,
    leap: bool = False,
    calendar: str = "chinese",
) -> EastAsianDate:
    """Date from a full cyclic label; raises CalendarValidationError if it does not exist."""
    cs = _reg().get(calendar)
    m = _month(month, leap)
    return cs.create(cycle, year_of_cycle, m, day, cs.to_absolute(cycle, year_of_cycle, m, day))

def of_year(
    related_year: int,
    month: Union[int, EastAsianMonth],
    day: int,
    *,
    leap: bool = False,
    calendar: str = "chinese",
) -> EastAsianDate:
    """Same as of(), with the year given as its related Gregorian year."""
    cycle, year = _reg().get(calendar).cycle_and_year(related_year)
    return of(cycle, year, month, day, leap=leap, calendar=calendar)

def from_gregorian(d: date, *, calendar: str = "chinese") -> EastAsianDate:
    return _reg().get(calendar).from_gregorian(d)

def add(d: EastAsianDate, amount: int, unit: Unit) -> EastAsianDate:
    return CHRONOLOGY.add(d, amount, unit)

def between(start: EastAsianDate, end: EastAsianDate, unit: Unit) -> int:
    return CHRONOLOGY.between(start, end, unit)

def with_field(d: EastAsianDate, field: ChronoField, value: Any, *, lenient: bool = False) -> EastAsianDate:
    return CHRONOLOGY.with_value(d, field, value, lenient=lenient)

# ============================================================
# Year-level helpers
# ============================================================

def new_year_day(related_year: int, *, calendar: str = "chinese", as_date: bool = True) -> dict:
    cs = _reg().get(calendar)
    cycle, year = cs.cycle_and_year(related_year)
    day = cs.new_year(cycle, year)
    out = {
        "Y": related_year,
        "cycle": cycle,
        "year_of_cycle": year,
        "absolute_day": day,
        "leap_month": cs.leap_month(cycle, year),
    }
    if as_date:
        out["date"] = from_absolute_day(day)
    return out

def months_in_year(related_year: int, *, calendar: str = "chinese", as_date: bool = True) -> List[Dict[str, Any]]:
    cs = _reg().get(calendar)
    cycle, year = cs.cycle_and_year(related_year)
    out = []
    for rec in cs.months_of_year(cycle, year):
        rec = dict(rec, Y=related_year)
        if as_date:
            rec["first_date"] = from_absolute_day(rec["first_day"])
            rec["last_date"] = from_absolute_day(rec["first_day"] + rec["length"] - 1)
        out.append(rec)
    return out
