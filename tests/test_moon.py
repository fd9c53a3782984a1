# tests/test_moon.py

import pytest

from mmcal.core.types import Month, MoonPhase, YearType
from mmcal.engines.moon import day_of_month, fortnight_day, month_length, moon_phase

ALL_MONTHS = list(range(0, 15))


@pytest.mark.parametrize("year_type, total", [(0, 354), (1, 384), (2, 385)])
def test_month_lengths_sum_to_year_length(year_type, total):
    months = list(range(1, 13)) + ([Month.FIRST_WASO] if year_type else [])
    assert sum(month_length(mm, year_type) for mm in months) == total


def test_month_length():
    assert month_length(Month.TAGU, 0) == 29
    assert month_length(Month.KASON, 0) == 30
    assert month_length(Month.NAYON, YearType.BIG_WATAT) == 30
    assert month_length(Month.NAYON, YearType.LITTLE_WATAT) == 29
    assert month_length(Month.FIRST_WASO, 1) == 30
    assert month_length(Month.LATE_TAGU, 0) == 29
    assert month_length(Month.LATE_KASON, 0) == 30


@pytest.mark.parametrize("year_type", list(YearType))
@pytest.mark.parametrize("mm", ALL_MONTHS)
def test_one_full_and_one_new_moon_per_month(mm, year_type):
    mml = month_length(mm, year_type)
    phases = [moon_phase(md, mm, year_type) for md in range(1, mml + 1)]
    assert phases.count(MoonPhase.FULL_MOON) == 1
    assert phases.count(MoonPhase.NEW_MOON) == 1
    assert phases[14] == MoonPhase.FULL_MOON
    assert phases[-1] == MoonPhase.NEW_MOON
    assert set(phases[:14]) == {MoonPhase.WAXING}
    assert set(phases[15:-1]) == {MoonPhase.WANING}


def test_fortnight_day():
    assert [fortnight_day(d) for d in (1, 14, 15, 16, 29, 30)] == [1, 14, 15, 1, 14, 15]


@pytest.mark.parametrize("year_type", list(YearType))
@pytest.mark.parametrize("mm", ALL_MONTHS)
def test_day_of_month_inverts_phase(mm, year_type):
    for md in range(1, month_length(mm, year_type) + 1):
        mp = moon_phase(md, mm, year_type)
        assert day_of_month(fortnight_day(md), mp, mm, year_type) == md
