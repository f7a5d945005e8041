class SolarHijriError(Exception):
    """Base error."""

class DateTimeError(SolarHijriError, ValueError):
    """Raised when a date cannot be built, queried or adjusted."""

class InvalidDateError(DateTimeError):
    """Raised when (year, month, day) does not name a day of the calendar."""

class InvalidFieldValueError(DateTimeError):
    """Raised when a field value lies outside the field's declared range."""

class InvalidEraError(DateTimeError):
    """Raised for era values other than 0 (BH) and 1 (AH)."""

class UnsupportedFieldError(DateTimeError):
    """Raised when a field (or a date-like object) is not understood."""

class UnsupportedUnitError(DateTimeError):
    """Raised when a unit is not supported by this calendar."""

class ArithmeticOverflowError(SolarHijriError, OverflowError):
    """Raised when scaled arithmetic leaves the signed 64-bit range."""
