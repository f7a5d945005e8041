"""
solarhijri.engines.chronology
-----------------------------
Calendar-level rules and factories for the Solar Hijri calendar system, as
used in Iran and Afghanistan.
"""

from __future__ import annotations

from typing import Any, List

from ..core.errors import InvalidEraError, UnsupportedFieldError
from ..core.types import ChronoField, Period, ValueRange
from .arithmetic_year import ENGINE
from .date import CHRONOLOGY_ID, SolarHijriDate
from .era import SolarHijriEra

# CLDR calendar type, see http://unicode.org/reports/tr35/
CALENDAR_TYPE = "persian"

_DAY_OF_MONTH_RANGE = ValueRange.of(1, 29, 31)


class SolarHijriChronology:
    INSTANCE: "SolarHijriChronology"

    @property
    def id(self) -> str:
        return CHRONOLOGY_ID

    @property
    def calendar_type(self) -> str:
        return CALENDAR_TYPE

    def date(self, year: int, month: int, day: int) -> SolarHijriDate:
        return SolarHijriDate.of(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> SolarHijriDate:
        return SolarHijriDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> SolarHijriDate:
        return SolarHijriDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: Any) -> SolarHijriDate:
        return SolarHijriDate.from_temporal(temporal)

    def date_now(self) -> SolarHijriDate:
        return SolarHijriDate.today()

    def date_era(self, era: SolarHijriEra, year_of_era: int, month: int, day: int) -> SolarHijriDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def is_leap_year(self, year: int) -> bool:
        return ENGINE.is_leap_year(year)

    def proleptic_year(self, era: SolarHijriEra, year_of_era: int) -> int:
        if not isinstance(era, SolarHijriEra):
            raise InvalidEraError(f"Era must be SolarHijriEra, got {type(era).__name__}")
        return era.proleptic_year(year_of_era)

    def era_of(self, value: int) -> SolarHijriEra:
        return SolarHijriEra.from_number(value)

    def eras(self) -> List[SolarHijriEra]:
        return list(SolarHijriEra)

    def range(self, field: ChronoField) -> ValueRange:
        if not isinstance(field, ChronoField):
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        if field is ChronoField.DAY_OF_MONTH:
            return _DAY_OF_MONTH_RANGE
        return field.range()

    def period(self, years: int, months: int, days: int) -> Period:
        return Period(years, months, days, CHRONOLOGY_ID)

    def __str__(self) -> str:
        return CHRONOLOGY_ID

    def __repr__(self) -> str:
        return f"SolarHijriChronology(id={CHRONOLOGY_ID!r}, calendar_type={CALENDAR_TYPE!r})"


SolarHijriChronology.INSTANCE = SolarHijriChronology()
CHRONOLOGY = SolarHijriChronology.INSTANCE
