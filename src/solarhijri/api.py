from __future__ import annotations

from datetime import date
from typing import List, Optional

from .core.chronology import Chronology, ChronologyRegistry
from .engines.date import SolarHijriDate

_registry: Optional[ChronologyRegistry] = None

def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Chronology registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str = "Solar-hijri") -> Chronology:
    """Look up a chronology by id ("Solar-hijri") or calendar type ("persian")."""
    return _reg().get(name)

def register_calendar(chrono: Chronology, *, overwrite: bool = False) -> None:
    _reg().register(chrono, overwrite=overwrite)

def to_gregorian(d: SolarHijriDate) -> date:
    return d.to_gregorian()

def from_gregorian(d: date) -> SolarHijriDate:
    return SolarHijriDate.from_gregorian(d)
