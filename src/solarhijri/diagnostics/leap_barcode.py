#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import numpy as np

from solarhijri.engines import arithmetic_year as ay


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarhijri[diagnostics]"') from e


def build_points(start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """(year, position within the 33-year cycle) for every leap year in range."""
    years = np.arange(start_year, end_year + 1, dtype=np.int64)
    leap = ay.is_leap_year_array(years)
    x = years[leap]
    return x, np.mod(x, ay.SOLAR_HIJRI_PARAMS.cycle)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year barcode: leap years against their place in the 33-year cycle.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--out", default="leap_barcode.png")
    p.add_argument("--title", default="Solar Hijri leap years (33-year rule)")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    cycle = ay.SOLAR_HIJRI_PARAMS.cycle
    fig, ax = plt.subplots(figsize=(16, 4.2))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(-0.5, cycle + 0.5, 1.0)
    Z = np.zeros((cycle, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap="Greys",
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    x, pos = build_points(start_year, end_year)
    ax.scatter(x, pos, s=14, marker="s", c="0.15", linewidths=0.0, alpha=0.95, label="leap year", zorder=5)

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(-0.5, cycle - 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Solar Hijri year")
    ax.set_ylabel(f"year mod {cycle}")
    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
