from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of 1970-01-01, the ISO epoch day 0.
JDN_UNIX_EPOCH = 2440588


def iso_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) to Julian Day Number, for any integer year."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_iso(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of iso_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def iso_to_epoch_day(y: int, m: int, d: int) -> int:
    return iso_to_jdn(y, m, d) - JDN_UNIX_EPOCH


def epoch_day_to_iso(epoch_day: int) -> Tuple[int, int, int]:
    return jdn_to_iso(epoch_day + JDN_UNIX_EPOCH)


def date_to_epoch_day(d: date) -> int:
    """ISO epoch day of a `datetime.date` (a `datetime` contributes its date part only)."""
    return iso_to_epoch_day(d.year, d.month, d.day)


def epoch_day_to_date(epoch_day: int) -> date:
    """Raises ValueError outside datetime's year range 1..9999."""
    return date(*epoch_day_to_iso(epoch_day))
