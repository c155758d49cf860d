from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of 1972-01-01, day zero of the absolute day count
UTC_EPOCH_JDN = 2441318


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (astronomical year numbering) to Julian Day Number."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))


def to_absolute_day(d: date) -> int:
    """Days since 1972-01-01."""
    return to_jdn(d) - UTC_EPOCH_JDN


def from_absolute_day(day: int) -> date:
    return from_jdn(day + UTC_EPOCH_JDN)
