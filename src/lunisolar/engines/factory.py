"""
lunisolar.engines.factory
-------------------------
Transforms pure data specifications into live calendar systems.
"""

from __future__ import annotations
from ..core.types import CalendarSpec
from .interfaces import CalendarSystemProtocol
from .mean_system import MeanLunisolarSystem


def make_system(spec: CalendarSpec) -> CalendarSystemProtocol:
    """The universal entry point."""
    if spec.id.family == "mean":
        return MeanLunisolarSystem(spec)
    raise TypeError(f"Unknown calendar family: {spec.id.family!r}")
