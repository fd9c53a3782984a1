#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from mmcal.engines.year import year_info


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "mmcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "mmcal[diagnostics]"') from e


def build_points(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Year numbers and year types (0, 1, 2) over start_year..end_year."""
    ys = np.arange(start_year, end_year + 1, dtype=int)
    ts = np.array([int(year_info(int(y)).year_type) for y in ys], dtype=int)
    return ys, ts


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Watat (intercalary year) barcode diagram.")
    p.add_argument("--start-year", type=int, default=1300, help="First Myanmar year (ME).")
    p.add_argument("--end-year", type=int, default=1400, help="Last Myanmar year (ME).")
    p.add_argument("--out", default="watat_barcode.png")
    p.add_argument("--title", default="Watat years")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    ys, ts = build_points(np, start_year, end_year)

    fig, ax = plt.subplots(figsize=(16, 2.4))
    colors = {1: "0.55", 2: "0.1"}
    for t, label in ((1, "little watat"), (2, "big watat")):
        sel = ts == t
        ax.bar(ys[sel], np.ones(int(sel.sum())), width=0.9, color=colors[t], label=label)

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0, 1)
    ax.set_yticks([])
    ax.tick_params(axis="x", length=0)
    ax.set_xlabel("Myanmar year (ME)")

    n = len(ys)
    counts = np.bincount(ts, minlength=3)
    ax.set_title(f"{args.title}: {counts[1]} little, {counts[2]} big watat in {n} years")
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
