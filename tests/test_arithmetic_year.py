# tests/test_arithmetic_year.py

import random

import numpy as np
import pytest

from solarhijri.engines import arithmetic_year as ay
from solarhijri.engines.arithmetic_year import ArithmeticYearParams, SOLAR_HIJRI_PARAMS

LEAP_RESIDUES = {1, 5, 9, 13, 17, 22, 26, 30}


def test_epoch_offset_is_first_day_of_year_one():
    assert ay.EPOCH_OFFSET == -492268
    assert ay.to_epoch_day(1, 1, 1) == ay.EPOCH_OFFSET
    assert ay.from_epoch_day(ay.EPOCH_OFFSET) == (1, 1, 1)
    assert ay.from_epoch_day(ay.EPOCH_OFFSET - 1) == (0, 12, 29)


def test_known_nowruz_epoch_days():
    # ISO epoch days of 2020-03-20, 2021-03-21, 2024-03-20, 2025-03-21
    assert ay.to_epoch_day(1399, 1, 1) == 18341
    assert ay.to_epoch_day(1400, 1, 1) == 18707
    assert ay.to_epoch_day(1403, 1, 1) == 19802
    assert ay.to_epoch_day(1404, 1, 1) == 20168
    assert ay.first_epoch_day_of_year(1400) == 18707


def test_leap_years_scenarios():
    assert ay.is_leap_year(1403) is True
    assert ay.is_leap_year(1404) is False
    assert ay.is_leap_year(1399) is True
    assert ay.is_leap_year(1400) is False
    assert [y for y in range(1390, 1431) if ay.is_leap_year(y)] == [
        1391, 1395, 1399, 1403, 1408, 1412, 1416, 1420, 1424, 1428,
    ]


def test_leap_rule_uses_floored_modulo():
    for y in range(-5000, 5000):
        assert ay.is_leap_year(y) == (y % 33 in LEAP_RESIDUES), y
    # -3 = 30 (mod 33)
    assert ay.is_leap_year(-3)
    assert not ay.is_leap_year(0)
    assert not ay.is_leap_year(-1)


def test_eight_leaps_per_cycle():
    for start in (-990, -33, 0, 1, 1387, 100000):
        assert sum(ay.is_leap_year(y) for y in range(start, start + 33)) == 8


def test_month_lengths():
    for y in range(-2000, 3000):
        assert ay.length_of_month(y, 12) == (30 if ay.is_leap_year(y) else 29)
        assert ay.length_of_year(y) == sum(ay.length_of_month(y, m) for m in range(1, 13))
    for m in range(1, 7):
        assert ay.length_of_month(1400, m) == 31
    for m in range(7, 12):
        assert ay.length_of_month(1400, m) == 30


def test_day_of_year_and_inverse():
    assert ay.day_of_year(1400, 1, 1) == 1
    assert ay.day_of_year(1400, 6, 31) == 186
    assert ay.day_of_year(1400, 7, 1) == 187
    assert ay.day_of_year(1403, 12, 30) == 366
    for doy in range(1, 367):
        m, d = ay.from_year_day(1403, doy)
        assert ay.day_of_year(1403, m, d) == doy
    assert ay.from_year_day(1400, 186) == (6, 31)
    assert ay.from_year_day(1400, 187) == (7, 1)


def test_round_trip_all_dates_in_ranges():
    for y in list(range(-100, 101)) + list(range(1300, 1501)):
        for m in range(1, 13):
            for d in range(1, ay.length_of_month(y, m) + 1):
                assert ay.from_epoch_day(ay.to_epoch_day(y, m, d)) == (y, m, d)


def test_round_trip_random_extreme_years():
    random.seed(42)
    for _ in range(20000):
        y = random.randint(-999_999_999, 999_999_999)
        m = random.randint(1, 12)
        d = random.randint(1, ay.length_of_month(y, m))
        assert ay.from_epoch_day(ay.to_epoch_day(y, m, d)) == (y, m, d)


def test_epoch_day_round_trip_random():
    random.seed(7)
    for _ in range(20000):
        e = random.randint(-365243219162, 365241780471)
        assert ay.to_epoch_day(*ay.from_epoch_day(e)) == e


def test_consecutive_epoch_days_are_calendar_successors():
    e0 = ay.to_epoch_day(-40, 1, 1)
    e1 = ay.to_epoch_day(40, 1, 1)
    prev = ay.from_epoch_day(e0)
    for e in range(e0 + 1, e1 + 1):
        cur = ay.from_epoch_day(e)
        y, m, d = prev
        if d < ay.length_of_month(y, m):
            expected = (y, m, d + 1)
        elif m < 12:
            expected = (y, m + 1, 1)
        else:
            expected = (y + 1, 1, 1)
        assert cur == expected, e
        prev = cur


def test_vectorized_matches_scalar():
    random.seed(3)
    days = np.array([random.randint(-10**9, 10**9) for _ in range(5000)], dtype=np.int64)
    ys, ms, ds = ay.from_epoch_days(days)
    for e, y, m, d in zip(days[:500], ys[:500], ms[:500], ds[:500]):
        assert ay.from_epoch_day(int(e)) == (int(y), int(m), int(d))
    np.testing.assert_array_equal(ay.to_epoch_days(ys, ms, ds), days)

    years = np.arange(-500, 500)
    np.testing.assert_array_equal(
        ay.is_leap_year_array(years),
        np.array([ay.is_leap_year(int(y)) for y in years]),
    )


def test_params_validation():
    with pytest.raises(ValueError):
        ArithmeticYearParams(epoch=0, cycle=0, leaps=0, leap_mul=1, leap_add=0, first_day_add=0, inverse_add=0)
    with pytest.raises(ValueError):
        ArithmeticYearParams(epoch=0, cycle=33, leaps=33, leap_mul=25, leap_add=11, first_day_add=21, inverse_add=3)
    with pytest.raises(ValueError):
        ArithmeticYearParams(epoch=0, cycle=33, leaps=8, leap_mul=11, leap_add=11, first_day_add=21, inverse_add=3)
    assert SOLAR_HIJRI_PARAMS.cycle_days == 12053
