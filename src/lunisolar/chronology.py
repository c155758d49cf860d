"""
lunisolar.chronology
--------------------
Wires field descriptors and units to their rules. A generic engine holds a
Chronology and dispatches through its tables; nothing is looked up by type.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping

from .core.date import EastAsianDate
from .core.errors import UnsupportedUnitError
from .core.types import ChronoField, Unit, DAY_OF_MONTH, DAY_OF_YEAR, MONTH_OF_YEAR
from .rules.fields import DayRule, FieldRule, MonthRule
from .rules.units import UnitRule


@dataclass(frozen=True)
class Chronology:
    fields: Mapping[ChronoField, FieldRule]
    units: Mapping[Unit, UnitRule]

    def field_rule(self, field: ChronoField) -> FieldRule:
        if field not in self.fields:
            raise UnsupportedUnitError(f"Unsupported field '{field}'. Available: {sorted(map(str, self.fields))}")
        return self.fields[field]

    def unit_rule(self, unit: Unit) -> UnitRule:
        if unit not in self.units:
            raise UnsupportedUnitError(f"Unsupported unit: {unit!r}")
        return self.units[unit]

    # ---------------------------------------------------------
    # Field access
    # ---------------------------------------------------------

    def get(self, date: EastAsianDate, field: ChronoField) -> Any:
        return self.field_rule(field).get(date)

    def minimum(self, date: EastAsianDate, field: ChronoField) -> Any:
        return self.field_rule(field).minimum(date)

    def maximum(self, date: EastAsianDate, field: ChronoField) -> Any:
        return self.field_rule(field).maximum(date)

    def is_valid(self, date: EastAsianDate, field: ChronoField, value: Any) -> bool:
        return self.field_rule(field).is_valid(date, value)

    def with_value(self, date: EastAsianDate, field: ChronoField, value: Any, *, lenient: bool = False) -> EastAsianDate:
        return self.field_rule(field).with_value(date, value, lenient)

    def floor(self, date: EastAsianDate, field: ChronoField) -> EastAsianDate:
        """Start of the period named by `field`, e.g. first day of the month."""
        child = self.field_rule(field).child_at_floor(date)
        if child is None:
            return date
        rule = self.field_rule(child)
        return rule.with_value(date, rule.minimum(date), False)

    def ceiling(self, date: EastAsianDate, field: ChronoField) -> EastAsianDate:
        """End of the period named by `field`, e.g. last day of the month."""
        child = self.field_rule(field).child_at_ceiling(date)
        if child is None:
            return date
        rule = self.field_rule(child)
        return rule.with_value(date, rule.maximum(date), False)

    # ---------------------------------------------------------
    # Unit arithmetic
    # ---------------------------------------------------------

    def add(self, date: EastAsianDate, amount: int, unit: Unit) -> EastAsianDate:
        return self.unit_rule(unit).add_to(date, amount)

    def between(self, start: EastAsianDate, end: EastAsianDate, unit: Unit) -> int:
        return self.unit_rule(unit).between(start, end)


CHRONOLOGY = Chronology(
    fields={
        DAY_OF_MONTH: DayRule(monthly=True),
        DAY_OF_YEAR: DayRule(monthly=False),
        MONTH_OF_YEAR: MonthRule(child=DAY_OF_MONTH),
    },
    units={unit: UnitRule(unit) for unit in Unit},
)
