from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import numpy as np

from solarhijri.core.time import date_to_epoch_day
from solarhijri.engines import arithmetic_year as ay
from solarhijri.engines.date import SolarHijriDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> Solar Hijri -> Gregorian on N random days."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        sh = SolarHijriDate.from_gregorian(d0)
        back = sh.to_gregorian()
        if back != d0:
            failures += 1
            print("\nFAIL (scalar)")
            print("d0:", d0)
            print("solar hijri:", sh, repr(sh))
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def sweep_test(start: date, end: date, *, max_failures: int) -> int:
    """
    Every day in [start, end]: vectorized decode must agree with the scalar
    kernel, be a bijection, and step by exactly one calendar day.
    """
    e0, e1 = date_to_epoch_day(start), date_to_epoch_day(end)
    days = np.arange(e0, e1 + 1, dtype=np.int64)
    ys, ms, ds = ay.from_epoch_days(days)

    failures = 0
    back = ay.to_epoch_days(ys, ms, ds)
    bad = np.nonzero(back != days)[0]
    for i in bad[:max_failures]:
        failures += 1
        print(f"\nFAIL (vector round trip) epoch_day={days[i]} -> {ys[i]}/{ms[i]}/{ds[i]} -> {back[i]}")
    if failures >= max_failures:
        return failures

    # successor: same month and day+1, or day 1 after the last day of a month
    leap = ay.is_leap_year_array(ys)
    month_len = np.where(ms == 12, np.where(leap, 30, 29), np.where(ms > 6, 30, 31))
    month_end = ds[:-1] == month_len[:-1]
    same_month = (ys[1:] == ys[:-1]) & (ms[1:] == ms[:-1]) & (ds[1:] == ds[:-1] + 1)
    next_month = month_end & (ys[1:] == ys[:-1]) & (ms[1:] == ms[:-1] + 1) & (ds[1:] == 1)
    next_year = month_end & (ys[1:] == ys[:-1] + 1) & (ms[1:] == 1) & (ds[1:] == 1) & (ms[:-1] == 12)
    bad = np.nonzero(~(same_month | next_month | next_year))[0]
    for i in bad[: max_failures - failures]:
        failures += 1
        print(f"\nFAIL (successor) {ys[i]}/{ms[i]}/{ds[i]} -> {ys[i + 1]}/{ms[i + 1]}/{ds[i + 1]}")

    step = max(1, len(days) // 1000)
    for i in range(0, len(days), step):
        if failures >= max_failures:
            break
        scalar = ay.from_epoch_day(int(days[i]))
        if scalar != (int(ys[i]), int(ms[i]), int(ds[i])):
            failures += 1
            print(f"\nFAIL (scalar/vector) epoch_day={days[i]}: {scalar} != {ys[i]}/{ms[i]}/{ds[i]}")

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: gregorian -> solar hijri -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Random trials.")
    p.add_argument("--start", type=str, default="0620-03-21", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-03-21", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    print(f"Random scalar round trips ({args.N}) ...")
    total_fail = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"Sweeping {(end - start).days + 1} days ...")
    total_fail += sweep_test(start, end, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
