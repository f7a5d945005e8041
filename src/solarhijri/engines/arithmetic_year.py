"""
solarhijri.engines.arithmetic_year
----------------------------------
Discrete arithmetic engine for the Solar Hijri year: the 33-year leap rule,
month lengths, and the closed-form maps between ISO epoch days and
(year, month, day) labels.

All divisions are floored (Python `//` and `%`), so the formulas stay valid
for proleptic years <= 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

# Days in months 1..6 (31 each); months 7..11 have 30, month 12 has 29 or 30.
FIRST_HALF_DAYS = 186


@dataclass(frozen=True)
class ArithmeticYearParams:
    """
    Leap rule:        leap(Y)  iff (leap_mul*Y + leap_add) mod cycle < leaps
    Year start:       F(Y)     = 365*(Y-1) + floor((leaps*Y + first_day_add)/cycle)
    Inverse estimate: Y(d)     = 1 + floor((cycle*d + inverse_add)/cycle_days)
    where d is counted from `epoch`, the ISO epoch day of 1/1/1.
    """
    epoch: int

    cycle: int
    leaps: int

    leap_mul: int
    leap_add: int
    first_day_add: int
    inverse_add: int

    def __post_init__(self) -> None:
        if self.cycle <= 0:
            raise ValueError("cycle must be positive")
        if not (0 < self.leaps < self.cycle):
            raise ValueError("require 0 < leaps < cycle")
        if math.gcd(self.leap_mul, self.cycle) != 1:
            raise ValueError("leap_mul must be coprime to cycle")

    @property
    def cycle_days(self) -> int:
        """Days in a full cycle: 365*cycle + leaps."""
        return 365 * self.cycle + self.leaps


SOLAR_HIJRI_PARAMS = ArithmeticYearParams(
    epoch=-492268,
    cycle=33,
    leaps=8,
    leap_mul=25,
    leap_add=11,
    first_day_add=21,
    inverse_add=3,
)


class ArithmeticYearEngine:
    """
    Maps ISO epoch days to (year, month, day) labels and back.
    Pure integer arithmetic; safe to share between threads.
    """
    def __init__(self, params: ArithmeticYearParams):
        self.p = params

    @property
    def epoch(self) -> int:
        return self.p.epoch

    # ---------------------------------------------------------
    # Year / month structure
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return (self.p.leap_mul * year + self.p.leap_add) % self.p.cycle < self.p.leaps

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def length_of_month(self, year: int, month: int) -> int:
        if month == 12:
            return 30 if self.is_leap_year(year) else 29
        if month > 6:
            return 30
        return 31

    @staticmethod
    def day_of_year(month: int, day: int) -> int:
        if month <= 6:
            return (month - 1) * 31 + day
        return FIRST_HALF_DAYS + (month - 7) * 30 + day

    @staticmethod
    def from_year_day(day_of_year: int) -> Tuple[int, int]:
        """
        Zero-based split of a day-of-year into (month, day).
        No range check: values past the year spill into a 13th month.
        """
        doy0 = day_of_year - 1
        if doy0 < FIRST_HALF_DAYS:
            moy0 = doy0 // 31
            dom0 = doy0 - moy0 * 31
        else:
            moy0 = (doy0 - FIRST_HALF_DAYS) // 30 + 6
            dom0 = doy0 - FIRST_HALF_DAYS - (moy0 - 6) * 30
        return moy0 + 1, dom0 + 1

    # ---------------------------------------------------------
    # Epoch day conversion
    # ---------------------------------------------------------

    def days_before_year(self, year: int) -> int:
        """F(Y): days from 1/1/1 to 1/1/Y."""
        return 365 * (year - 1) + (self.p.leaps * year + self.p.first_day_add) // self.p.cycle

    def first_epoch_day_of_year(self, year: int) -> int:
        """ISO epoch day of Nowruz (1 Farvardin) of `year`."""
        return self.p.epoch + self.days_before_year(year)

    def to_epoch_day(self, year: int, month: int, day: int) -> int:
        return self.first_epoch_day_of_year(year) + self.day_of_year(month, day) - 1

    def year_of_epoch_day(self, epoch_day: int) -> int:
        d = epoch_day - self.p.epoch
        return 1 + (self.p.cycle * d + self.p.inverse_add) // self.p.cycle_days

    def from_epoch_day(self, epoch_day: int) -> Tuple[int, int, int]:
        year = self.year_of_epoch_day(epoch_day)
        doy = epoch_day - self.first_epoch_day_of_year(year) + 1
        month, day = self.from_year_day(doy)
        return year, month, day

    # ---------------------------------------------------------
    # Vectorized (numpy int64) variants
    # ---------------------------------------------------------

    def is_leap_year_array(self, years) -> np.ndarray:
        y = np.asarray(years, dtype=np.int64)
        return np.mod(self.p.leap_mul * y + self.p.leap_add, self.p.cycle) < self.p.leaps

    def to_epoch_days(self, years, months, days) -> np.ndarray:
        y = np.asarray(years, dtype=np.int64)
        m = np.asarray(months, dtype=np.int64)
        d = np.asarray(days, dtype=np.int64)
        doy = np.where(m <= 6, (m - 1) * 31 + d, FIRST_HALF_DAYS + (m - 7) * 30 + d)
        first = 365 * (y - 1) + np.floor_divide(self.p.leaps * y + self.p.first_day_add, self.p.cycle)
        return self.p.epoch + first + doy - 1

    def from_epoch_days(self, epoch_days) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        e = np.asarray(epoch_days, dtype=np.int64)
        d = e - self.p.epoch
        y = 1 + np.floor_divide(self.p.cycle * d + self.p.inverse_add, self.p.cycle_days)
        first = 365 * (y - 1) + np.floor_divide(self.p.leaps * y + self.p.first_day_add, self.p.cycle)
        doy0 = d - first
        first_half = doy0 < FIRST_HALF_DAYS
        moy0 = np.where(first_half, doy0 // 31, (doy0 - FIRST_HALF_DAYS) // 30 + 6)
        dom0 = np.where(first_half, doy0 - moy0 * 31, doy0 - FIRST_HALF_DAYS - (moy0 - 6) * 30)
        return y, moy0 + 1, dom0 + 1


ENGINE = ArithmeticYearEngine(SOLAR_HIJRI_PARAMS)

EPOCH_OFFSET = SOLAR_HIJRI_PARAMS.epoch


def is_leap_year(year: int) -> bool:
    """floorMod(25*year + 11, 33) < 8."""
    return ENGINE.is_leap_year(year)


def length_of_year(year: int) -> int:
    return ENGINE.length_of_year(year)


def length_of_month(year: int, month: int) -> int:
    return ENGINE.length_of_month(year, month)


def day_of_year(year: int, month: int, day: int) -> int:
    # year is irrelevant: the leap day is the last day of the year
    return ENGINE.day_of_year(month, day)


def from_year_day(year: int, day_of_year: int) -> Tuple[int, int]:
    return ENGINE.from_year_day(day_of_year)


def first_epoch_day_of_year(year: int) -> int:
    return ENGINE.first_epoch_day_of_year(year)


def to_epoch_day(year: int, month: int, day: int) -> int:
    return ENGINE.to_epoch_day(year, month, day)


def from_epoch_day(epoch_day: int) -> Tuple[int, int, int]:
    return ENGINE.from_epoch_day(epoch_day)


def is_leap_year_array(years) -> np.ndarray:
    return ENGINE.is_leap_year_array(years)


def to_epoch_days(years, months, days) -> np.ndarray:
    return ENGINE.to_epoch_days(years, months, days)


def from_epoch_days(epoch_days) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    return ENGINE.from_epoch_days(epoch_days)
