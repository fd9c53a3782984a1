from __future__ import annotations

import argparse
from datetime import date
from typing import List, NamedTuple, Optional

from mmcal.attributes.holidays import thingyan
from mmcal.core.time import jdn_to_date
from mmcal.engines.year import year_info

YEAR_TYPE_LABELS = ("common", "little watat", "big watat")


class YearRow(NamedTuple):
    year: int
    year_type: int
    length: int
    tagu1: date
    akya: date
    atat: date
    new_year: date
    calc_error: bool


def year_row(my: int) -> YearRow:
    yo = year_info(my)
    tg = thingyan(my)
    return YearRow(
        year=my,
        year_type=int(yo.year_type),
        length=yo.length,
        tagu1=jdn_to_date(yo.tagu1),
        akya=jdn_to_date(tg.akya),
        atat=jdn_to_date(tg.atat),
        new_year=jdn_to_date(tg.new_year_day),
        calc_error=yo.calc_error,
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print year type, first day of Tagu and Thingyan dates for Myanmar years."
    )
    p.add_argument("--from-year", type=int, default=1380)
    p.add_argument("--to-year", type=int, default=1390)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of dates (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return d.isoformat() if args.dates == "iso" else f"{d.month:02d}-{d.day:02d}"

    headers = ["ME", "Type", "Days", "Tagu 1", "Akya", "Atat", "New Year"]
    print("  ".join(f"{h:<12}" for h in headers).rstrip())
    for my in range(Y0, Y1 + 1):
        r = year_row(my)
        cells = [
            str(r.year),
            YEAR_TYPE_LABELS[r.year_type],
            str(r.length),
            fmt(r.tagu1),
            fmt(r.akya),
            fmt(r.atat),
            fmt(r.new_year),
        ]
        line = "  ".join(f"{c:<12}" for c in cells).rstrip()
        if r.calc_error:
            line += "  (!)"
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
