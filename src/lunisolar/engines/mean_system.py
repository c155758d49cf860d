"""
lunisolar.engines.mean_system
-----------------------------
Calendar system driven by mean lunations and the apparent Sun.

The month and year rules are the classic ones of the Chinese calendar:
  * a month starts on the civil day containing a new moon;
  * month 11 contains the winter solstice;
  * a sui (month 11 to the next month 11) of 13 months receives one leap
    month, the first month without a major solar term;
  * the new year is the second new moon after the solstice month, or the
    third when month 11 or 12 is leap.

New moons are the linear (mean) lunations, evaluated in exact rational
arithmetic; a month can therefore start a day away from an almanac that
uses the true Moon. Solar terms and the solstice use the apparent solar
longitude (equation of center included), which places leap months and new
years in the same month as the almanac.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from functools import lru_cache
from typing import Any, Dict, List, Tuple

from ..core.date import EastAsianDate, next_year
from ..core.errors import CalendarValidationError, DateRangeError
from ..core.time import UTC_EPOCH_JDN, gregorian_to_jdn, from_absolute_day, to_absolute_day
from ..core.types import CalendarSpec, EastAsianMonth
from ._solar import solar_longitude

log = logging.getLogger(__name__)

# JD of the Meeus k=0 mean new moon and the mean synodic month (days)
NEW_MOON_K0 = Fraction(245155009766, 100000)
SYNODIC_MONTH = Fraction(29530588861, 1000000000)

# Mean solar longitude rate (deg/day), used to bracket term crossings
SUN_RATE = 36000.76983 / 36525.0

MEAN_TROPICAL_YEAR = Fraction(365242189, 1000000)
WINTER_SOLSTICE = 270

# Gregorian year (astronomical numbering) of cycle 1, year 1
EPOCH_YEAR = -2636

HALF = Fraction(1, 2)


def amod(x: int, n: int) -> int:
    """Arithmetic mod giving 1..n."""
    return ((x - 1) % n) + 1


class MeanLunisolarSystem:
    """
    Fully implements CalendarSystemProtocol for one variant.
    The variant only fixes the zone offset of the civil day and the
    supported range.
    """
    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        self.id = spec.id
        self.zone = Fraction(spec.zone_offset_minutes, 1440)
        self.epoch = gregorian_to_jdn(EPOCH_YEAR, 2, 15) - UTC_EPOCH_JDN

        # per-instance memo tables
        self._label = lru_cache(maxsize=8192)(self._compute_label)
        self.new_year = lru_cache(maxsize=4096)(self._new_year)
        self.leap_month = lru_cache(maxsize=4096)(self._leap_month)

        self.min_day = self.new_year(*self.cycle_and_year(spec.min_year))
        self.max_day = self.new_year(*self.cycle_and_year(spec.max_year + 1)) - 1

    # ---------------------------------------------------------
    # Day / instant conversions
    # ---------------------------------------------------------

    def _day_of(self, jd: Fraction) -> int:
        """Absolute day containing the instant jd (UT)."""
        return math.floor(jd + HALF + self.zone) - UTC_EPOCH_JDN

    def _start_of(self, day: int) -> Fraction:
        """Instant (JD, UT) of the local midnight opening an absolute day."""
        return day + UTC_EPOCH_JDN - HALF - self.zone

    # ---------------------------------------------------------
    # Mean Moon
    # ---------------------------------------------------------

    def _lunation_on_or_after(self, day: int) -> int:
        """Index k of the first mean new moon at or after the start of `day`."""
        return math.ceil((self._start_of(day) - NEW_MOON_K0) / SYNODIC_MONTH)

    def _new_moon_day(self, k: int) -> int:
        return self._day_of(NEW_MOON_K0 + k * SYNODIC_MONTH)

    def new_moon_on_or_after(self, day: int) -> int:
        return self._new_moon_day(self._lunation_on_or_after(day))

    def new_moon_before(self, day: int) -> int:
        return self._new_moon_day(self._lunation_on_or_after(day) - 1)

    # ---------------------------------------------------------
    # Apparent Sun
    # ---------------------------------------------------------

    def _solar_longitude(self, jd: Fraction) -> float:
        return solar_longitude(float(jd))

    def _major_term(self, day: int) -> int:
        """Major solar term (1..12) in force at the start of `day`."""
        return amod(2 + math.floor(self._solar_longitude(self._start_of(day)) / 30), 12)

    def _no_major_term(self, month_start: int) -> bool:
        nxt = self.new_moon_on_or_after(month_start + 1)
        return self._major_term(month_start) == self._major_term(nxt)

    def _past_solstice(self, day: int) -> bool:
        """True if the Sun has passed the solstice at the start of `day`, within half a year."""
        return (self._solar_longitude(self._start_of(day)) - WINTER_SOLSTICE) % 360 < 180

    def _winter_solstice_on_or_before(self, day: int) -> int:
        t = self._start_of(day + 1)
        delta = (self._solar_longitude(t) - WINTER_SOLSTICE) % 360
        # the mean-rate estimate is within four days of the crossing
        x = self._day_of(t - Fraction(delta / SUN_RATE)) - 6
        while not self._past_solstice(x + 1):
            x += 1
        return x

    # ---------------------------------------------------------
    # Sui structure
    # ---------------------------------------------------------

    def _prior_leap_month(self, start: int, month_start: int) -> bool:
        """True if some month in [start, month_start] lacks a major term."""
        m = month_start
        while m >= start:
            if self._no_major_term(m):
                return True
            m = self.new_moon_before(m)
        return False

    def _sui(self, day: int) -> Tuple[int, bool]:
        """(first month after the solstice month, has_leap) for the sui of `day`."""
        s1 = self._winter_solstice_on_or_before(day)
        s2 = self._winter_solstice_on_or_before(s1 + 370)
        m12 = self.new_moon_on_or_after(s1 + 1)
        next_m11 = self.new_moon_before(s2 + 1)
        return m12, round((next_m11 - m12) / SYNODIC_MONTH) == 12

    def _new_year_in_sui(self, day: int) -> int:
        m12, leap_sui = self._sui(day)
        m13 = self.new_moon_on_or_after(m12 + 1)
        if leap_sui and (self._no_major_term(m12) or self._no_major_term(m13)):
            return self.new_moon_on_or_after(m13 + 1)
        return m13

    def _new_year_on_or_before(self, day: int) -> int:
        ny = self._new_year_in_sui(day)
        if day >= ny:
            return ny
        return self._new_year_in_sui(day - 180)

    def _compute_label(self, day: int) -> Tuple[int, int, EastAsianMonth, int]:
        """(cycle, year_of_cycle, month, day_of_month) of an absolute day."""
        m12, leap_sui = self._sui(day)
        m = self.new_moon_before(day + 1)

        number = round((m - m12) / SYNODIC_MONTH)
        if leap_sui and self._prior_leap_month(m12, m):
            number -= 1
        number = amod(number, 12)

        is_leap = (
            leap_sui
            and self._no_major_term(m)
            and not self._prior_leap_month(m12, self.new_moon_before(m))
        )

        elapsed = math.floor(
            Fraction(3, 2) - Fraction(number, 12) + Fraction(day - self.epoch) / MEAN_TROPICAL_YEAR
        )
        cycle = 1 + (elapsed - 1) // 60
        year = amod(elapsed, 60)
        return cycle, year, EastAsianMonth(number, is_leap), day - m + 1

    # ---------------------------------------------------------
    # Protocol: astronomical primitives
    # ---------------------------------------------------------

    def _new_year(self, cycle: int, year_of_cycle: int) -> int:
        mid_year = math.floor(
            self.epoch + ((cycle - 1) * 60 + year_of_cycle - 1 + HALF) * MEAN_TROPICAL_YEAR
        )
        return self._new_year_on_or_before(mid_year)

    def _leap_month(self, cycle: int, year_of_cycle: int) -> int:
        start = self.new_year(cycle, year_of_cycle)
        end = self.new_year(*next_year(cycle, year_of_cycle))
        if round((end - start) / SYNODIC_MONTH) < 13:
            return 0

        m = start
        while m < end:
            month = self._label(m)[2]
            if month.is_leap:
                return month.number
            m = self.new_moon_on_or_after(m + 1)
        return 0

    # ---------------------------------------------------------
    # Protocol: factories
    # ---------------------------------------------------------

    def _check_range(self, day: int) -> None:
        if not (self.min_day <= day <= self.max_day):
            log.debug("%s: absolute day %d outside [%d, %d]", self.id.name, day, self.min_day, self.max_day)
            raise DateRangeError(
                f"Day {day} is out of range for calendar '{self.id.name}' "
                f"({from_absolute_day(self.min_day)} .. {from_absolute_day(self.max_day)})."
            )

    def to_absolute(self, cycle: int, year_of_cycle: int, month: EastAsianMonth, day: int) -> int:
        if not (1 <= year_of_cycle <= 60):
            raise CalendarValidationError(f"Year of cycle out of range: {year_of_cycle}")
        if not (1 <= day <= 30):
            raise CalendarValidationError(f"Day of month out of range: {day}")
        if month.is_leap and self.leap_month(cycle, year_of_cycle) != month.number:
            raise CalendarValidationError(
                f"Month {month} is not the leap month of year {cycle}-{year_of_cycle}."
            )

        ny = self.new_year(cycle, year_of_cycle)
        p = self.new_moon_on_or_after(ny + (month.number - 1) * 29)
        if self._label(p)[2] != month:
            p = self.new_moon_on_or_after(p + 1)

        if day > self.new_moon_on_or_after(p + 1) - p:
            raise CalendarValidationError(f"Day of month out of range: {day}")

        result = p + day - 1
        self._check_range(result)
        return result

    def from_absolute(self, day: int) -> EastAsianDate:
        self._check_range(day)
        cycle, year, month, dom = self._label(day)
        return EastAsianDate(self, cycle, year, month, dom, day)

    def create(
        self, cycle: int, year_of_cycle: int, month: EastAsianMonth, day: int, absolute_day: int
    ) -> EastAsianDate:
        self._check_range(absolute_day)
        return EastAsianDate(self, cycle, year_of_cycle, month, day, absolute_day)

    # ---------------------------------------------------------
    # Labels and conveniences
    # ---------------------------------------------------------

    def related_gregorian_year(self, cycle: int, year_of_cycle: int) -> int:
        return (cycle - 1) * 60 + year_of_cycle - 1 + EPOCH_YEAR

    def cycle_and_year(self, related_year: int) -> Tuple[int, int]:
        elapsed = related_year - EPOCH_YEAR
        return elapsed // 60 + 1, elapsed % 60 + 1

    def from_gregorian(self, d: Any) -> EastAsianDate:
        return self.from_absolute(to_absolute_day(d))

    def months_of_year(self, cycle: int, year_of_cycle: int) -> List[Dict[str, Any]]:
        """Month records of one year in chronological order."""
        start = self.new_year(cycle, year_of_cycle)
        end = self.new_year(*next_year(cycle, year_of_cycle))
        out = []
        m = start
        while m < end:
            nxt = self.new_moon_on_or_after(m + 1)
            out.append({"month": self._label(m)[2], "first_day": m, "length": nxt - m})
            m = nxt
        return out

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "label": self.spec.label,
            "zone_offset_minutes": self.spec.zone_offset_minutes,
            "min_date": from_absolute_day(self.min_day),
            "max_date": from_absolute_day(self.max_day),
        }
