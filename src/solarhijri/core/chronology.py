from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, runtime_checkable

from .types import ChronoField, ChronoUnit, Period, ValueRange

@runtime_checkable
class EpochDayProvider(Protocol):
    """Anything that can be placed on the shared ISO day line."""
    def to_epoch_day(self) -> int: ...

class ChronoDate(EpochDayProvider, Protocol):
    """Capabilities shared by date values of any calendar."""
    def get_long(self, field: ChronoField) -> int: ...
    def plus(self, amount: int, unit: ChronoUnit) -> "ChronoDate": ...
    def minus(self, amount: int, unit: ChronoUnit) -> "ChronoDate": ...
    def until(self, end: Any, unit: ChronoUnit | None = None) -> int | Period: ...
    def compare_to(self, other: Any) -> int: ...

class Chronology(Protocol):
    @property
    def id(self) -> str: ...
    @property
    def calendar_type(self) -> str: ...
    def date(self, year: int, month: int, day: int) -> ChronoDate: ...
    def date_epoch_day(self, epoch_day: int) -> ChronoDate: ...
    def is_leap_year(self, year: int) -> bool: ...
    def range(self, field: ChronoField) -> ValueRange: ...

@dataclass
class ChronologyRegistry:
    """Chronologies by id, with calendar types as aliases."""
    _chronologies: Dict[str, Chronology] = field(default_factory=dict)
    _by_type: Dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> Chronology:
        if name in self._chronologies:
            return self._chronologies[name]
        if name in self._by_type:
            return self._chronologies[self._by_type[name]]
        raise KeyError(f"Unknown chronology '{name}'. Available: {self.list()}")

    def list(self) -> List[str]:
        return sorted(self._chronologies.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._chronologies or name in self._by_type

    def register(self, chrono: Chronology, *, overwrite: bool = False) -> None:
        name = chrono.id
        if (not overwrite) and (name in self._chronologies):
            raise KeyError(f"Chronology '{name}' already exists. Use overwrite=True to replace.")
        self._chronologies[name] = chrono
        ctype = chrono.calendar_type
        if ctype and (overwrite or ctype not in self._by_type):
            self._by_type[ctype] = name
