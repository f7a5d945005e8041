#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import numpy as np

from solarhijri.core.time import iso_to_epoch_day
from solarhijri.engines import arithmetic_year as ay


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarhijri[diagnostics]"') from e


def rolling_median(y, win: int = 33):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """
    x: Solar Hijri year; y: offset of Nowruz from March 21 of the same
    Gregorian year, in days.
    """
    years = np.arange(start_year, end_year + 1, dtype=np.int64)
    nowruz = ay.to_epoch_days(years, np.ones_like(years), np.ones_like(years))
    march21 = np.array([iso_to_epoch_day(int(Y) + 621, 3, 21) for Y in years], dtype=np.int64)
    return years, (nowruz - march21).astype(float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz against Gregorian March 21.")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=1800)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=33, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    x, y = build_series(args.start_year, args.end_year)
    ax.scatter(x, y, s=10, marker="o", c="tab:blue", linewidths=0.0, alpha=0.35, label="Nowruz")
    if args.show_trend:
        ax.plot(x, rolling_median(y, win=int(args.trend_win)), color="tab:blue", linewidth=1.8)

    ax.set_xlabel("Solar Hijri year")
    ax.set_ylabel("Days from Gregorian March 21")
    ax.set_title("Nowruz under the 33-year rule")
    ax.legend(loc="upper right", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
