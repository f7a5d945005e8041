# tests/test_cross_calendar.py
"""
Check the arithmetic kernel against jdatetime for every day of
Gregorian 0622-03-22 .. 2100-03-20, and against a year-length walk for the
proleptic years 0 and -1 (before jdatetime's first year).
"""

from datetime import date, timedelta

import jdatetime
import numpy as np

from solarhijri import SolarHijriDate
from solarhijri.engines import arithmetic_year as ay

FIRST_DAY = date(622, 3, 22)
LAST_DAY = date(2100, 3, 20)
UNIX0 = date(1970, 1, 1).toordinal()

# jdatetime cannot convert 1 Farvardin 1; step back from the second day
NOWRUZ_1 = jdatetime.date(1, 1, 2).togregorian() - timedelta(days=1)

# leap years of the 33-year cycle, for proleptic years jdatetime cannot represent
BH_LEAP_RESIDUES = {1, 5, 9, 13, 17, 22, 26, 30}


def _epoch_day(d):
    return d.toordinal() - UNIX0


def _jalali(g):
    j = jdatetime.date.fromgregorian(date=g)
    return j.year, j.month, j.day


def test_every_day_matches_jdatetime():
    span = (LAST_DAY - FIRST_DAY).days + 1
    expected = []
    for i in range(span):
        g = FIRST_DAY + timedelta(days=i)
        ymd = _jalali(g)
        assert SolarHijriDate.from_gregorian(g) == SolarHijriDate(*ymd), g
        expected.append(ymd)

    ref = np.array(expected, dtype=np.int64)
    days = np.arange(_epoch_day(FIRST_DAY), _epoch_day(LAST_DAY) + 1, dtype=np.int64)
    ys, ms, ds = ay.from_epoch_days(days)
    np.testing.assert_array_equal(ys, ref[:, 0])
    np.testing.assert_array_equal(ms, ref[:, 1])
    np.testing.assert_array_equal(ds, ref[:, 2])
    np.testing.assert_array_equal(ay.to_epoch_days(ref[:, 0], ref[:, 1], ref[:, 2]), days)


def test_year_boundaries_match_jdatetime():
    for y in range(2, 1479):
        assert SolarHijriDate(y, 1, 1).to_gregorian() == jdatetime.date(y, 1, 1).togregorian(), y
        last = 30 if jdatetime.date(y, 1, 1).isleap() else 29
        assert SolarHijriDate(y, 12, 1).length_of_month() == last, y
        assert SolarHijriDate(y, 12, last).to_gregorian() == jdatetime.date(y, 12, last).togregorian()


def test_first_year_starts_on_reference_day():
    assert NOWRUZ_1 == date(622, 3, 21)
    assert SolarHijriDate(1, 1, 1).to_gregorian() == NOWRUZ_1
    assert SolarHijriDate(1, 1, 2).to_gregorian() == FIRST_DAY


def test_years_before_the_hijra_by_year_walk():
    # walk back from 1 Farvardin 1 through years 0 and -1
    nowruz = {1: NOWRUZ_1}
    for y in (0, -1):
        n = 366 if y % 33 in BH_LEAP_RESIDUES else 365
        nowruz[y] = nowruz[y + 1] - timedelta(days=n)
    assert nowruz[-1] == date(620, 3, 21)

    for y in (0, -1):
        first = SolarHijriDate(y, 1, 1)
        assert first.to_gregorian() == nowruz[y]
        assert first.length_of_year() == (nowruz[y + 1] - nowruz[y]).days
        g = nowruz[y]
        while g < nowruz[y + 1]:
            sh = SolarHijriDate.from_gregorian(g)
            assert sh.year == y
            assert sh.day_of_year == (g - nowruz[y]).days + 1
            assert sh.to_gregorian() == g
            g += timedelta(days=1)
