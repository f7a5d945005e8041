from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .errors import ArithmeticOverflowError, InvalidFieldValueError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

@dataclass(frozen=True)
class ValueRange:
    """Valid values of a field: [minimum, maximum], with variable bounds in between."""
    minimum: int
    largest_minimum: int
    smallest_maximum: int
    maximum: int

    @staticmethod
    def of(minimum: int, *maxima: int) -> "ValueRange":
        """of(min, max) or of(min, smallest_max, largest_max)."""
        if len(maxima) == 1:
            smallest_maximum = maximum = maxima[0]
        elif len(maxima) == 2:
            smallest_maximum, maximum = maxima
        else:
            raise TypeError("ValueRange.of takes two or three bounds")
        if not (minimum <= smallest_maximum <= maximum):
            raise ValueError("require minimum <= smallest_maximum <= maximum")
        return ValueRange(minimum, minimum, smallest_maximum, maximum)

    @property
    def is_fixed(self) -> bool:
        return self.minimum == self.largest_minimum and self.smallest_maximum == self.maximum

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: int, field: "ChronoField | str" = "value") -> int:
        if not self.is_valid_value(value):
            name = field.name if isinstance(field, ChronoField) else field
            raise InvalidFieldValueError(f"Invalid value for {name} (valid values {self}): {value}")
        return value

    def __str__(self) -> str:
        lo = str(self.minimum) if self.minimum == self.largest_minimum else f"{self.minimum}/{self.largest_minimum}"
        hi = str(self.maximum) if self.smallest_maximum == self.maximum else f"{self.smallest_maximum}/{self.maximum}"
        return f"{lo} - {hi}"


class ChronoField(Enum):
    DAY_OF_WEEK = ValueRange.of(1, 7)
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ValueRange.of(1, 7)
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ValueRange.of(1, 7)
    DAY_OF_MONTH = ValueRange.of(1, 28, 31)
    DAY_OF_YEAR = ValueRange.of(1, 365, 366)
    EPOCH_DAY = ValueRange.of(-365243219162, 365241780471)
    ALIGNED_WEEK_OF_MONTH = ValueRange.of(1, 4, 5)
    ALIGNED_WEEK_OF_YEAR = ValueRange.of(1, 53)
    MONTH_OF_YEAR = ValueRange.of(1, 12)
    PROLEPTIC_MONTH = ValueRange.of(-999_999_999 * 12, 999_999_999 * 12 + 11)
    YEAR_OF_ERA = ValueRange.of(1, 999_999_999, 1_000_000_000)
    YEAR = ValueRange.of(-999_999_999, 999_999_999)
    ERA = ValueRange.of(0, 1)

    # Members with equal ranges would alias each other without this.
    def __new__(cls, value_range: ValueRange):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__)
        obj.value_range = value_range
        return obj

    def range(self) -> ValueRange:
        return self.value_range

    def check_valid_value(self, value: int) -> int:
        return self.value_range.check_valid_value(value, self)


class ChronoUnit(Enum):
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"
    FOREVER = "Forever"

    def __str__(self) -> str:
        return self.value


def check_int64(value: int, what: str = "value") -> int:
    """Return `value` unchanged, or raise if it does not fit a signed 64-bit integer."""
    if not (INT64_MIN <= value <= INT64_MAX):
        raise ArithmeticOverflowError(f"{what} overflows a signed 64-bit integer: {value}")
    return value


def multiply_exact(a: int, b: int) -> int:
    return check_int64(a * b, "product")


def add_exact(a: int, b: int) -> int:
    return check_int64(a + b, "sum")


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def trunc_mod(a: int, b: int) -> int:
    """Remainder matching trunc_div: takes the sign of the dividend."""
    return a - b * trunc_div(a, b)


@dataclass(frozen=True)
class Period:
    """A date-based amount of time: years, months and days in one chronology."""
    years: int
    months: int
    days: int
    chronology_id: str

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_negative(self) -> bool:
        return self.years < 0 or self.months < 0 or self.days < 0

    def to_total_months(self) -> int:
        return self.years * 12 + self.months

    def __str__(self) -> str:
        if self.is_zero:
            return f"{self.chronology_id} P0D"
        out = "P"
        if self.years:
            out += f"{self.years}Y"
        if self.months:
            out += f"{self.months}M"
        if self.days:
            out += f"{self.days}D"
        return f"{self.chronology_id} {out}"
