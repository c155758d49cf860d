# engines/_solar.py

from __future__ import annotations

import math

J2000 = 2451545.0


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = math.fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / 36525.0


def solar_longitude(jd: float) -> float:
    """
    Apparent geocentric solar longitude (deg) at Julian Day `jd`.

    Mean longitude plus the equation of center, corrected for aberration
    and the leading nutation term; good to about 0.01 deg. The difference
    between TT and UT is ignored.
    """
    T = T_centuries(jd)
    T2 = T * T

    L0_deg = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M_rad = math.radians(357.52911 + 35999.05029 * T - 0.0001537 * T2)

    # Equation of center
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T2) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    Omega_rad = math.radians(125.04452 - 1934.136261 * T)
    return wrap_deg(L0_deg + C_sun - 0.00569 - 0.00478 * math.sin(Omega_rad))
