"""
mmcal.engines.era
-----------------
Calendar-era constants of the Myanmar calendar.

Each era uses its own full-moon offset and watat rule; the hand-curated
exception years below are the records of the calendar authorities and are
not derivable from the formulas.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.types import EraConstants


@dataclass(frozen=True)
class EraBand:
    name: str
    start: Optional[int]  # first Myanmar year of the band, None for the oldest
    ei: float
    wo: float
    nm: int
    full_moon_exceptions: Tuple[Tuple[int, int], ...] = ()
    watat_exceptions: Tuple[int, ...] = ()


# Newest first; the last band has no lower bound.
ERA_BANDS: Tuple[EraBand, ...] = (
    # The third era (the era after Independence, ME 1312 and after)
    EraBand("third", 1312, 3, -0.5, 8,
            full_moon_exceptions=((1377, 1),),
            watat_exceptions=(1344, 1345)),
    # The second era (the era under the British colony, ME 1217 - 1311)
    EraBand("second", 1217, 2, -1, 4,
            full_moon_exceptions=((1234, 1), (1261, -1)),
            watat_exceptions=(1263, 1264)),
    # The first era, Thandeikta (ME 1100 - 1216)
    EraBand("thandeikta", 1100, 1.3, -0.85, -1,
            full_moon_exceptions=((1120, 1), (1126, -1), (1150, 1), (1172, -1), (1207, 1)),
            watat_exceptions=(1201, 1202)),
    # The first era, Makaranta system 2 (ME 798 - 1099)
    EraBand("makaranta2", 798, 1.2, -1.1, -1,
            full_moon_exceptions=((813, -1), (849, -1), (851, -1), (854, -1), (927, -1),
                                  (933, -1), (936, -1), (938, -1), (949, -1), (952, -1),
                                  (963, -1), (968, -1), (1039, -1))),
    # The first era, Makaranta system 1 (ME 0 - 797)
    EraBand("makaranta1", None, 1.1, -1.1, -1,
            full_moon_exceptions=((205, 1), (246, 1), (471, 1), (572, -1), (651, 1),
                                  (653, 2), (656, 1), (672, 1), (729, 1), (767, -1))),
)


def exact_search(key: int, keys: Sequence[int]) -> int:
    """Index of key in the ascending sequence keys, or -1 if absent."""
    i = bisect_left(keys, key)
    if i < len(keys) and keys[i] == key:
        return i
    return -1


def era_band(my: int) -> EraBand:
    for band in ERA_BANDS:
        if band.start is None or my >= band.start:
            return band
    raise RuntimeError("unreachable")


def era_constants(my: int) -> EraConstants:
    """Era constants (EI, WO, NM, EW) for Myanmar year my."""
    band = era_band(my)
    wo = band.wo
    fme = band.full_moon_exceptions
    i = exact_search(my, [y for y, _ in fme])
    if i >= 0:
        wo += fme[i][1]
    ew = 1 if exact_search(my, band.watat_exceptions) >= 0 else 0
    return EraConstants(ei=band.ei, wo=wo, nm=band.nm, ew=ew)
