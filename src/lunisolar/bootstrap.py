from __future__ import annotations
from lunisolar.core.engine import EngineRegistry
from lunisolar.engines.specs import ALL_SPECS
from lunisolar.engines.factory import make_system

def build_registry() -> EngineRegistry:
    systems = {}
    for name, spec in ALL_SPECS.items():
        systems[name] = make_system(spec)
    return EngineRegistry(systems)
