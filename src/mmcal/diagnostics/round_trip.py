#!/usr/bin/env python3
"""
Sweep a range of Myanmar years and check that every Julian day converts to a
Myanmar date and back to itself.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from mmcal.engines.convert import burmese_to_julian, julian_to_burmese
from mmcal.engines.year import year_info

logger = logging.getLogger(__name__)


def year_range_jdn(start_year: int, end_year: int) -> Tuple[int, int]:
    """First and last JDN of Myanmar years start_year..end_year (by Tagu 1)."""
    return year_info(start_year).tagu1, year_info(end_year + 1).tagu1 - 1


def sweep(start_year: int, end_year: int) -> List[Tuple[int, Tuple[int, int, int], int]]:
    """Return (jdn, (my, mm, md), back) for every day that fails to round-trip."""
    j0, j1 = year_range_jdn(start_year, end_year)
    bad = []
    for jdn in range(j0, j1 + 1):
        bd = julian_to_burmese(jdn)
        back = burmese_to_julian(bd.year, bd.month, bd.day)
        if back != jdn:
            logger.debug("JDN %d -> %s -> %d", jdn, bd.as_tuple(), back)
            bad.append((jdn, bd.as_tuple(), back))
    return bad


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip JDN -> Myanmar date -> JDN over a range of years.")
    p.add_argument("--start-year", type=int, default=1100, help="First Myanmar year (ME).")
    p.add_argument("--end-year", type=int, default=1400, help="Last Myanmar year (ME).")
    p.add_argument("--show", type=int, default=10, help="Print at most this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    j0, j1 = year_range_jdn(args.start_year, args.end_year)
    bad = sweep(args.start_year, args.end_year)
    print(f"ME {args.start_year}..{args.end_year}: {j1 - j0 + 1} days checked, {len(bad)} failures")
    for jdn, mdate, back in bad[: args.show]:
        print(f"  JDN {jdn} -> {mdate} -> {back}")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
