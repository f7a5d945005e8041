"""solarhijri public API.

Keep this surface small: users should mostly interact with the date type and
the functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    register_calendar,
    to_gregorian,
    from_gregorian,
)
from .bootstrap import register
from .core.errors import (
    SolarHijriError,
    DateTimeError,
    InvalidDateError,
    InvalidFieldValueError,
    InvalidEraError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ArithmeticOverflowError,
)
from .core.types import ChronoField, ChronoUnit, Period, ValueRange
from .engines.arithmetic_year import (
    EPOCH_OFFSET,
    is_leap_year,
    length_of_month,
    length_of_year,
    to_epoch_day,
    from_epoch_day,
)
from .engines.chronology import SolarHijriChronology
from .engines.date import SolarHijriDate
from .engines.era import SolarHijriEra

__all__ = [
    "list_calendars",
    "get_calendar",
    "register_calendar",
    "register",
    "to_gregorian",
    "from_gregorian",
    "SolarHijriError",
    "DateTimeError",
    "InvalidDateError",
    "InvalidFieldValueError",
    "InvalidEraError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "ArithmeticOverflowError",
    "ChronoField",
    "ChronoUnit",
    "Period",
    "ValueRange",
    "EPOCH_OFFSET",
    "is_leap_year",
    "length_of_month",
    "length_of_year",
    "to_epoch_day",
    "from_epoch_day",
    "SolarHijriChronology",
    "SolarHijriDate",
    "SolarHijriEra",
]
