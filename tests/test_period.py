# tests/test_period.py

import random
from datetime import date

import pytest

from solarhijri import ChronoUnit, Period, SolarHijriDate, UnsupportedUnitError


def test_period_across_nowruz():
    p = SolarHijriDate(1399, 12, 29).until(SolarHijriDate(1400, 1, 1))
    assert p == Period(0, 0, 2, "Solar-hijri")
    assert str(p) == "Solar-hijri P2D"


def test_period_borrows_from_months():
    assert SolarHijriDate(1400, 1, 31).until(SolarHijriDate(1400, 3, 1)) == Period(0, 1, 1, "Solar-hijri")
    assert SolarHijriDate(1390, 5, 10).until(SolarHijriDate(1403, 8, 20)) == Period(13, 3, 10, "Solar-hijri")
    assert str(Period(13, 3, 10, "Solar-hijri")) == "Solar-hijri P13Y3M10D"


def test_negative_period():
    p = SolarHijriDate(1400, 3, 1).until(SolarHijriDate(1400, 1, 31))
    assert p == Period(0, -1, -1, "Solar-hijri")
    assert p.is_negative
    assert SolarHijriDate(1403, 8, 20).until(SolarHijriDate(1390, 5, 10)) == Period(-13, -3, -10, "Solar-hijri")


def test_zero_period():
    d = SolarHijriDate(1400, 1, 1)
    p = d.until(d)
    assert p.is_zero
    assert str(p) == "Solar-hijri P0D"


def test_period_reaches_end_date():
    rng = random.Random(42)
    for _ in range(3000):
        a = SolarHijriDate.of_epoch_day(rng.randint(-200000, 200000))
        b = a.plus_days(rng.randint(0, 20000))
        p = a.until(b)
        assert not p.is_negative
        assert a.plus_months(p.to_total_months()).plus_days(p.days) == b


def test_until_days_and_weeks():
    a = SolarHijriDate(1400, 1, 1)
    assert SolarHijriDate(1399, 12, 29).until(a, ChronoUnit.DAYS) == 2
    assert a.until(SolarHijriDate(1400, 1, 14), ChronoUnit.WEEKS) == 1
    assert SolarHijriDate(1400, 1, 14).until(a, ChronoUnit.WEEKS) == -1
    assert a.until(date(2021, 3, 31), ChronoUnit.DAYS) == 10


def test_until_months_truncates_toward_zero():
    assert SolarHijriDate(1400, 1, 31).until(SolarHijriDate(1400, 2, 30), ChronoUnit.MONTHS) == 0
    assert SolarHijriDate(1400, 1, 31).until(SolarHijriDate(1400, 2, 31), ChronoUnit.MONTHS) == 1
    assert SolarHijriDate(1400, 2, 30).until(SolarHijriDate(1400, 1, 31), ChronoUnit.MONTHS) == 0
    assert SolarHijriDate(1400, 2, 31).until(SolarHijriDate(1400, 1, 31), ChronoUnit.MONTHS) == -1


def test_until_years_and_larger():
    a = SolarHijriDate(1400, 1, 1)
    assert a.until(SolarHijriDate(1401, 1, 1), ChronoUnit.YEARS) == 1
    assert a.until(SolarHijriDate(1400, 12, 29), ChronoUnit.YEARS) == 0
    assert SolarHijriDate(1401, 1, 1).until(SolarHijriDate(1400, 1, 2), ChronoUnit.YEARS) == 0
    assert a.until(SolarHijriDate(1430, 1, 1), ChronoUnit.DECADES) == 3
    assert a.until(SolarHijriDate(1200, 1, 2), ChronoUnit.CENTURIES) == -1
    assert a.until(SolarHijriDate(3400, 1, 1), ChronoUnit.MILLENNIA) == 2
    assert a.until(SolarHijriDate(0, 1, 1), ChronoUnit.ERAS) == -1
    assert a.until(SolarHijriDate(1, 1, 1), ChronoUnit.ERAS) == 0


def test_until_unsupported_unit():
    with pytest.raises(UnsupportedUnitError):
        SolarHijriDate(1400, 1, 1).until(SolarHijriDate(1401, 1, 1), ChronoUnit.FOREVER)


def test_until_matches_plus_for_days():
    rng = random.Random(3)
    for _ in range(2000):
        a = SolarHijriDate.of_epoch_day(rng.randint(-10**6, 10**6))
        n = rng.randint(-10**5, 10**5)
        assert a.until(a.plus_days(n), ChronoUnit.DAYS) == n


def test_period_value():
    p = Period(1, 2, 3, "Solar-hijri")
    assert p.to_total_months() == 14
    assert p.chronology_id == "Solar-hijri"
    assert not p.is_zero
    assert not p.is_negative
    assert str(Period(0, 0, -5, "Solar-hijri")) == "Solar-hijri P-5D"


def test_period_requires_a_chronology_id():
    with pytest.raises(TypeError):
        Period(1, 2, 3)
    assert str(Period(0, 1, 0, "ISO")) == "ISO P1M"
