from __future__ import annotations

from ..core.types import Month, MoonPhase


def month_length(mm: int, year_type: int) -> int:
    """Length of Myanmar month mm: odd months 29 days, even months 30, Nayon of a big watat year 30."""
    mml = 30 - mm % 2
    if mm == Month.NAYON:
        mml += year_type // 2
    return mml


def fortnight_day(md: int) -> int:
    """Day of the fortnight [1-15] from the day of the month [1-30]."""
    return md - 15 * (md // 16)


def moon_phase(md: int, mm: int, year_type: int) -> MoonPhase:
    mml = month_length(mm, year_type)
    return MoonPhase((md + 1) // 16 + md // 16 + md // mml)


def day_of_month(mf: int, mp: int, mm: int, year_type: int) -> int:
    """
    Inverse of fortnight_day/moon_phase: day of the month from the fortnight
    day mf and the moon phase mp. mf is ignored for full and new moon.
    """
    mml = month_length(mm, year_type)
    m1 = mp % 2
    m2 = mp // 2
    return m1 * (15 + m2 * (mml - 15)) + (1 - m1) * (mf + 15 * m2)
