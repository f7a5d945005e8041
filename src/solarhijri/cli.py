from __future__ import annotations

import argparse
from datetime import date
import importlib
import logging
import re
import sys

from solarhijri.core.errors import SolarHijriError
from solarhijri.engines import arithmetic_year as ay
from solarhijri.engines.date import SolarHijriDate


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_SH_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _parse_sh(s: str) -> SolarHijriDate:
    match = _SH_DATE_RE.match(s)
    if not match:
        raise ValueError(f"Expected Y-M-D, got {s!r}")
    y, m, d = (int(g) for g in match.groups())
    return SolarHijriDate.of(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Import a diagnostics module and run its main(argv)."""
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    return int(fn(argv) or 0)


def describe(d: SolarHijriDate) -> str:
    lines = [
        str(d),
        f"  iso label    : {d.isoformat()}",
        f"  weekday      : {_WEEKDAYS[d.day_of_week - 1]} ({d.day_of_week})",
        f"  day of year  : {d.day_of_year} / {d.length_of_year()}",
        f"  leap year    : {'yes' if d.is_leap_year() else 'no'}",
        f"  epoch day    : {d.to_epoch_day()}",
    ]
    return "\n".join(lines)


def cmd_day(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="solarhijri day", description="Gregorian -> Solar Hijri")
    p.add_argument("date", help="YYYY-MM-DD (Gregorian)")
    args = p.parse_args(argv)

    g = _parse_ymd(args.date)
    logger.debug("converting gregorian %s", g)
    print(describe(SolarHijriDate.from_gregorian(g)))
    return 0


def cmd_gregorian(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="solarhijri gregorian", description="Solar Hijri -> Gregorian")
    p.add_argument("date", help="Y-M-D (Solar Hijri proleptic year, may be negative)")
    args = p.parse_args(argv)

    d = _parse_sh(args.date)
    logger.debug("converting solar hijri %r", d)
    print(d.to_gregorian().isoformat())
    return 0


def cmd_leap_years(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="solarhijri leap-years", description="List leap years in a range.")
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1430)
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    years = [Y for Y in range(args.from_year, args.to_year + 1) if ay.is_leap_year(Y)]
    print(" ".join(str(Y) for Y in years) if years else "(none)")
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `solarhijri YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="solarhijri", description="Solar Hijri calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    p_day = sub.add_parser("day", help="Gregorian -> Solar Hijri")
    p_day.add_argument("date", help="YYYY-MM-DD")

    p_greg = sub.add_parser("gregorian", help="Solar Hijri -> Gregorian")
    p_greg.add_argument("date", help="Y-M-D (put -- before a negative year)")

    sub.add_parser("leap-years", help="List leap years in a range")

    sub.add_parser("nowruz", help="Print Nowruz date table (diagnostics)")
    sub.add_parser("leap-barcode", help="Plot leap years against the 33-year cycle (needs matplotlib)")
    sub.add_parser("nowruz-scatter", help="Plot Nowruz against Gregorian March 21 (needs matplotlib)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    if args.cmd == "day":
        return cmd_day([args.date] + rest)

    if args.cmd == "gregorian":
        return cmd_gregorian(rest + ["--", args.date])

    if args.cmd == "leap-years":
        return cmd_leap_years(rest)

    if args.cmd == "nowruz":
        return _run_module_main("solarhijri.diagnostics.nowruz_table", rest)

    if args.cmd == "leap-barcode":
        return _run_module_main("solarhijri.diagnostics.leap_barcode", rest)

    if args.cmd == "nowruz-scatter":
        return _run_module_main("solarhijri.diagnostics.nowruz_scatter", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "solarhijri.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except (SolarHijriError, ValueError) as e:
        print(f"solarhijri: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
