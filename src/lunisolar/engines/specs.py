from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec, EngineId


# ============================================================
# MEAN-ELEMENT VARIANTS
# ============================================================

# The variants share the month/year rules and differ in the meridian that
# fixes the civil day, and in the supported span of related Gregorian years.
MEAN_VERSION = "1"

CHINESE = CalendarSpec(
    id=EngineId("mean", "chinese", MEAN_VERSION),
    label="Chinese",
    zone_offset_minutes=8 * 60,   # 120 deg E
    min_year=1645,
    max_year=2999,
)

KOREAN = CalendarSpec(
    id=EngineId("mean", "korean", MEAN_VERSION),
    label="Korean",
    zone_offset_minutes=9 * 60,   # 135 deg E
    min_year=1645,
    max_year=2999,
)

VIETNAMESE = CalendarSpec(
    id=EngineId("mean", "vietnamese", MEAN_VERSION),
    label="Vietnamese",
    zone_offset_minutes=7 * 60,   # 105 deg E
    min_year=1813,
    max_year=2999,
)


ALL_SPECS: Dict[str, CalendarSpec] = {
    "chinese": CHINESE,
    "korean": KOREAN,
    "vietnamese": VIETNAMESE,
}

