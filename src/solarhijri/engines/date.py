"""
solarhijri.engines.date
-----------------------
The Solar Hijri date value: an immutable (year, month, day) label with field
access, calendar arithmetic, comparison and period computation.

Every conversion goes through the arithmetic year engine; nothing here keeps
state beyond the three fields.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Optional, Union

from ..core.chronology import EpochDayProvider
from ..core.errors import (
    ArithmeticOverflowError,
    InvalidDateError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from ..core.time import date_to_epoch_day, epoch_day_to_date
from ..core.types import (
    ChronoField,
    ChronoUnit,
    Period,
    ValueRange,
    add_exact,
    check_int64,
    multiply_exact,
    trunc_div,
    trunc_mod,
)
from .arithmetic_year import ENGINE
from .era import SolarHijriEra, year_of_era

CHRONOLOGY_ID = "Solar-hijri"

_YEAR_RANGE = ChronoField.YEAR.range()


def epoch_day_of(temporal: Any) -> int:
    """Epoch day of a date-like value: a `datetime.date`, or anything exposing an epoch day."""
    if isinstance(temporal, date):
        return date_to_epoch_day(temporal)
    if isinstance(temporal, EpochDayProvider):
        return int(temporal.to_epoch_day())
    get_long = getattr(temporal, "get_long", None)
    if callable(get_long):
        return int(get_long(ChronoField.EPOCH_DAY))
    raise UnsupportedFieldError(
        f"Unable to obtain an epoch day from {type(temporal).__name__}: {temporal!r}"
    )


@dataclass(frozen=True, order=True)
class SolarHijriDate:
    """
    A date in the Solar Hijri calendar.

    `year` is the proleptic year (1 = first year AH, 0 = 1 BH, -1 = 2 BH, ...).
    Constructing with an invalid month or day raises InvalidDateError; use
    `with_year` / `with_month` / `plus_months` when clamping is wanted.
    """
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # Accept any integral type (e.g. numpy ints) but store plain ints
        for name in ("year", "month", "day"):
            object.__setattr__(self, name, operator.index(getattr(self, name)))
        if not (1 <= self.month <= 12):
            raise InvalidDateError(f"Invalid date: {self.year}/{self.month}/{self.day} (month must be 1..12)")
        if self.day < 1 or self.day > ENGINE.length_of_month(self.year, self.month):
            raise InvalidDateError(f"Invalid date: {self.year}/{self.month}/{self.day}")

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "SolarHijriDate":
        ChronoField.YEAR.check_valid_value(year)
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "SolarHijriDate":
        return cls(*ENGINE.from_epoch_day(epoch_day))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "SolarHijriDate":
        ChronoField.YEAR.check_valid_value(year)
        if not (1 <= day_of_year <= ENGINE.length_of_year(year)):
            raise InvalidDateError(f"Invalid day-of-year {day_of_year} for year {year}")
        month, day = ENGINE.from_year_day(day_of_year)
        return cls(year, month, day)

    @classmethod
    def from_temporal(cls, temporal: Any) -> "SolarHijriDate":
        if isinstance(temporal, SolarHijriDate):
            return temporal
        return cls.of_epoch_day(epoch_day_of(temporal))

    @classmethod
    def from_gregorian(cls, d: date) -> "SolarHijriDate":
        return cls.of_epoch_day(date_to_epoch_day(d))

    @classmethod
    def today(cls) -> "SolarHijriDate":
        return cls.from_gregorian(date.today())

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day: int) -> "SolarHijriDate":
        return SolarHijriDate(year, month, min(day, ENGINE.length_of_month(year, month)))

    # ---------------------------------------------------------
    # Derived fields
    # ---------------------------------------------------------

    @property
    def chronology(self):
        from .chronology import SolarHijriChronology
        return SolarHijriChronology.INSTANCE

    @property
    def era(self) -> SolarHijriEra:
        return SolarHijriEra.of_year(self.year)

    @property
    def year_of_era(self) -> int:
        return year_of_era(self.year)

    @property
    def day_of_year(self) -> int:
        return ENGINE.day_of_year(self.month, self.day)

    @property
    def day_of_week(self) -> int:
        """1 = Monday ... 7 = Sunday."""
        return (self.to_epoch_day() + 3) % 7 + 1

    @property
    def proleptic_month(self) -> int:
        return self.year * 12 + self.month - 1

    @property
    def aligned_day_of_week_in_month(self) -> int:
        return (self.day - 1) % 7 + 1

    @property
    def aligned_day_of_week_in_year(self) -> int:
        return (self.day_of_year - 1) % 7 + 1

    @property
    def aligned_week_of_month(self) -> int:
        return (self.day - 1) // 7 + 1

    @property
    def aligned_week_of_year(self) -> int:
        return (self.day_of_year - 1) // 7 + 1

    def is_leap_year(self) -> bool:
        return ENGINE.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return ENGINE.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return ENGINE.length_of_year(self.year)

    def to_epoch_day(self) -> int:
        return ENGINE.to_epoch_day(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return epoch_day_to_date(self.to_epoch_day())

    # ---------------------------------------------------------
    # Generic field access
    # ---------------------------------------------------------

    def is_supported(self, field_or_unit: Union[ChronoField, ChronoUnit]) -> bool:
        if isinstance(field_or_unit, ChronoField):
            return True
        if isinstance(field_or_unit, ChronoUnit):
            return field_or_unit is not ChronoUnit.FOREVER
        return False

    def get_long(self, field: ChronoField) -> int:
        getter = _GETTERS.get(field) if isinstance(field, ChronoField) else None
        if getter is None:
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        return getter(self)

    get = get_long

    def range(self, field: ChronoField) -> ValueRange:
        """Valid values of `field` for this particular date."""
        if not isinstance(field, ChronoField):
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            return ValueRange.of(1, (self.length_of_month() - 1) // 7 + 1)
        if field is ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, _YEAR_RANGE.maximum + 1 if self.year <= 0 else _YEAR_RANGE.maximum)
        return self.chronology.range(field)

    # ---------------------------------------------------------
    # Adjustment
    # ---------------------------------------------------------

    def with_field(self, field: ChronoField, new_value: int) -> "SolarHijriDate":
        if not isinstance(field, ChronoField):
            raise UnsupportedFieldError(f"Unsupported field: {field}")
        field.check_valid_value(new_value)
        if field in (
            ChronoField.DAY_OF_WEEK,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
            ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
        ):
            return self.plus_days(new_value - self.get_long(field))
        if field in (ChronoField.ALIGNED_WEEK_OF_MONTH, ChronoField.ALIGNED_WEEK_OF_YEAR):
            return self.plus_weeks(new_value - self.get_long(field))
        if field is ChronoField.DAY_OF_MONTH:
            return self.with_day(new_value)
        if field is ChronoField.DAY_OF_YEAR:
            return self.with_day_of_year(new_value)
        if field is ChronoField.EPOCH_DAY:
            return SolarHijriDate.of_epoch_day(new_value)
        if field is ChronoField.MONTH_OF_YEAR:
            return self.with_month(new_value)
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self.proleptic_month)
        if field is ChronoField.YEAR_OF_ERA:
            return self.with_year(new_value if self.year >= 1 else 1 - new_value)
        if field is ChronoField.YEAR:
            return self.with_year(new_value)
        if field is ChronoField.ERA:
            if self.era.to_number() == new_value:
                return self
            return self.with_year(1 - self.year)
        raise UnsupportedFieldError(f"Unsupported field: {field}")

    def with_year(self, year: int) -> "SolarHijriDate":
        if self.year == year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        return self._resolve_previous_valid(year, self.month, self.day)

    def with_month(self, month: int) -> "SolarHijriDate":
        if self.month == month:
            return self
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return self._resolve_previous_valid(self.year, month, self.day)

    def with_day(self, day: int) -> "SolarHijriDate":
        if self.day == day:
            return self
        return SolarHijriDate.of(self.year, self.month, day)

    def with_day_of_year(self, day_of_year: int) -> "SolarHijriDate":
        if self.day_of_year == day_of_year:
            return self
        return SolarHijriDate.of_year_day(self.year, day_of_year)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus(self, amount: int, unit: ChronoUnit) -> "SolarHijriDate":
        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit is ChronoUnit.MONTHS:
            return self.plus_months(amount)
        if unit is ChronoUnit.YEARS:
            return self.plus_years(amount)
        if unit is ChronoUnit.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        if unit is ChronoUnit.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        if unit is ChronoUnit.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1000))
        if unit is ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, add_exact(self.era.to_number(), amount))
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def minus(self, amount: int, unit: ChronoUnit) -> "SolarHijriDate":
        return self.plus(check_int64(-amount, "negated amount"), unit)

    def plus_years(self, years: int) -> "SolarHijriDate":
        if years == 0:
            return self
        new_year = self.year + years
        if not _YEAR_RANGE.is_valid_value(new_year):
            raise ArithmeticOverflowError(f"Year out of range: {new_year}")
        return self._resolve_previous_valid(new_year, self.month, self.day)

    def plus_months(self, months: int) -> "SolarHijriDate":
        if months == 0:
            return self
        calc = self.proleptic_month + months
        new_year = calc // 12
        if not _YEAR_RANGE.is_valid_value(new_year):
            raise ArithmeticOverflowError(f"Year out of range: {new_year}")
        return self._resolve_previous_valid(new_year, calc % 12 + 1, self.day)

    def plus_weeks(self, weeks: int) -> "SolarHijriDate":
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_days(self, days: int) -> "SolarHijriDate":
        if days == 0:
            return self
        return SolarHijriDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def minus_years(self, years: int) -> "SolarHijriDate":
        return self.minus(years, ChronoUnit.YEARS)

    def minus_months(self, months: int) -> "SolarHijriDate":
        return self.minus(months, ChronoUnit.MONTHS)

    def minus_weeks(self, weeks: int) -> "SolarHijriDate":
        return self.minus(weeks, ChronoUnit.WEEKS)

    def minus_days(self, days: int) -> "SolarHijriDate":
        return self.minus(days, ChronoUnit.DAYS)

    # ---------------------------------------------------------
    # Difference
    # ---------------------------------------------------------

    def until(self, end: Any, unit: Optional[ChronoUnit] = None) -> Union[int, Period]:
        """
        Amount of time until `end` (exclusive).

        With a unit: the number of whole units, truncated toward zero.
        Without: the Period of years, months and days.
        """
        end = SolarHijriDate.from_temporal(end)
        if unit is None:
            return self._period_until(end)
        if unit is ChronoUnit.DAYS:
            return self._days_until(end)
        if unit is ChronoUnit.WEEKS:
            return trunc_div(self._days_until(end), 7)
        if unit is ChronoUnit.MONTHS:
            return self._months_until(end)
        if unit is ChronoUnit.YEARS:
            return trunc_div(self._months_until(end), 12)
        if unit is ChronoUnit.DECADES:
            return trunc_div(self._months_until(end), 120)
        if unit is ChronoUnit.CENTURIES:
            return trunc_div(self._months_until(end), 1200)
        if unit is ChronoUnit.MILLENNIA:
            return trunc_div(self._months_until(end), 12000)
        if unit is ChronoUnit.ERAS:
            return end.era.to_number() - self.era.to_number()
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def _days_until(self, end: "SolarHijriDate") -> int:
        return end.to_epoch_day() - self.to_epoch_day()

    def _months_until(self, end: "SolarHijriDate") -> int:
        packed1 = self.proleptic_month * 32 + self.day
        packed2 = end.proleptic_month * 32 + end.day
        return trunc_div(packed2 - packed1, 32)

    def _period_until(self, end: "SolarHijriDate") -> Period:
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            calc = self.plus_months(total_months)
            days = end.to_epoch_day() - calc.to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = trunc_div(total_months, 12)
        months = trunc_mod(total_months, 12)
        return Period(years, months, days, CHRONOLOGY_ID)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare_to(self, other: Any) -> int:
        """Negative, zero or positive as self is before, equal to or after `other`."""
        if isinstance(other, SolarHijriDate):
            cmp = self.year - other.year
            if cmp == 0:
                cmp = self.month - other.month
                if cmp == 0:
                    cmp = self.day - other.day
            return cmp
        return self.to_epoch_day() - epoch_day_of(other)

    def is_before(self, other: Any) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: Any) -> bool:
        return self.compare_to(other) > 0

    def is_equal(self, other: Any) -> bool:
        return self.compare_to(other) == 0

    # ---------------------------------------------------------
    # Display
    # ---------------------------------------------------------

    def isoformat(self) -> str:
        if self.year < 0:
            return f"-{-self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return f"{CHRONOLOGY_ID} {self.era.name} {self.year_of_era}-{self.month:02d}-{self.day:02d}"


_GETTERS: Dict[ChronoField, Callable[[SolarHijriDate], int]] = {
    ChronoField.DAY_OF_WEEK: lambda d: d.day_of_week,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: d.aligned_day_of_week_in_month,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: d.aligned_day_of_week_in_year,
    ChronoField.DAY_OF_MONTH: lambda d: d.day,
    ChronoField.DAY_OF_YEAR: lambda d: d.day_of_year,
    ChronoField.EPOCH_DAY: lambda d: d.to_epoch_day(),
    ChronoField.ALIGNED_WEEK_OF_MONTH: lambda d: d.aligned_week_of_month,
    ChronoField.ALIGNED_WEEK_OF_YEAR: lambda d: d.aligned_week_of_year,
    ChronoField.MONTH_OF_YEAR: lambda d: d.month,
    ChronoField.PROLEPTIC_MONTH: lambda d: d.proleptic_month,
    ChronoField.YEAR_OF_ERA: lambda d: d.year_of_era,
    ChronoField.YEAR: lambda d: d.year,
    ChronoField.ERA: lambda d: d.era.to_number(),
}
