from __future__ import annotations

import argparse
from datetime import date

from solarhijri.core.time import epoch_day_to_date
from solarhijri.engines import arithmetic_year as ay


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def nowruz(year: int) -> date:
    """Gregorian date of 1 Farvardin of Solar Hijri `year`."""
    return epoch_day_to_date(ay.first_epoch_day_of_year(year))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Nowruz (1 Farvardin) date table with leap-year flags."
    )
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1425)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--list-day",
        type=int,
        default=20,
        help="After the table, list all years whose Nowruz falls on this day of March (default: 20).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Nowruz", "Leap", "Cycle"]
    colw = [6, 10, 5, 5]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    hits: list[tuple[date, int]] = []

    for Y in range(Y0, Y1 + 1):
        d = nowruz(Y)
        leap = ay.is_leap_year(Y)
        row = [str(Y), fmt(d), "*" if leap else "", str(Y % ay.SOLAR_HIJRI_PARAMS.cycle)]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if d.month == 3 and d.day == args.list_day:
            hits.append((d, Y))

    print(f"\nNowruz on March {args.list_day:02d}:")
    if not hits:
        print("(none)")
        return 0

    for d, Y in hits:
        print(f"{d.isoformat()}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
