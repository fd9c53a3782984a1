# tests/test_time.py

import random
from datetime import date

import pytest

from mmcal.core.time import (
    GREGORIAN_START,
    CalendarType,
    GregorianDateTime,
    date_to_jdn,
    gregorian_to_julian,
    is_leap_year,
    jdn_to_date,
    julian_to_gregorian,
    julian_to_unix,
    month_length,
    round_half_up,
    time_to_day_fraction,
    unix_to_julian,
    weekday,
)


def test_known_julian_days():
    assert gregorian_to_julian(2022, 10, 31) == 2459884
    assert gregorian_to_julian(1752, 9, 14) == GREGORIAN_START
    assert date_to_jdn(date(2000, 1, 1)) == 2451545


def test_julian_to_gregorian_midnight():
    assert julian_to_gregorian(2459376.5) == GregorianDateTime(2021, 6, 11, 0, 0, 0.0)


def test_time_of_day():
    jd = gregorian_to_julian(2021, 6, 11, 18, 30, 0)
    assert jd == pytest.approx(2459377 + 0.25 + 30 / 1440)
    g = julian_to_gregorian(jd)
    assert (g.year, g.month, g.day, g.hour) == (2021, 6, 11, 18)
    assert time_to_day_fraction(12) == 0


def test_leap_years():
    assert is_leap_year(2020)
    assert not is_leap_year(1900)
    assert is_leap_year(2000)
    assert is_leap_year(0)
    assert is_leap_year(1900, ct=CalendarType.JULIAN)
    # Britain used the Julian rule until 1752
    assert is_leap_year(1700, ct=CalendarType.BRITISH)
    assert not is_leap_year(1800, ct=CalendarType.BRITISH)


def test_british_switch():
    # Wednesday 2 September 1752 was followed by Thursday 14 September
    j2 = round_half_up(gregorian_to_julian(1752, 9, 2))
    assert j2 == GREGORIAN_START - 1
    assert weekday(j2) == 4 and weekday(GREGORIAN_START) == 5
    assert month_length(1752, 9) == 19
    assert month_length(1752, 9, ct=CalendarType.GREGORIAN) == 30
    # days inside the gap collapse onto the switch day
    assert gregorian_to_julian(1752, 9, 5) == GREGORIAN_START


def test_julian_calendar_offset():
    jg = date_to_jdn(date(2020, 1, 1), ct=CalendarType.GREGORIAN)
    jj = date_to_jdn(date(2020, 1, 1), ct=CalendarType.JULIAN)
    assert jj - jg == 13


@pytest.mark.parametrize("ct", list(CalendarType))
def test_jdn_date_roundtrip(ct):
    random.seed(42)
    for _ in range(2000):
        jdn_in = random.randint(1722000, 5373000)
        d = jdn_to_date(jdn_in, ct=ct)
        assert date_to_jdn(d, ct=ct) == jdn_in


def test_weekday():
    assert weekday(2459884) == 2    # Monday
    assert weekday(2459884.4) == 2
    assert weekday(2459884.5) == 3  # rounds half up


def test_month_lengths():
    assert month_length(2024, 2) == 29
    assert month_length(2023, 2) == 28
    assert month_length(2023, 12) == 31


def test_unix_epoch():
    assert unix_to_julian(0) == 2440587.5
    assert julian_to_unix(2440588.5) == 86400.0
