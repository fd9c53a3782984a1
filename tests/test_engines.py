# tests/test_engines.py

import logging
from collections import Counter

import pytest

import mmcal.engines.year as year_mod

from mmcal.core.types import WatatResult, YearType
from mmcal.engines.era import ERA_BANDS, era_constants, exact_search
from mmcal.engines.watat import check_watat
from mmcal.engines.year import MAX_WATAT_GAP, previous_watat, year_info, year_length


@pytest.mark.parametrize(
    "my, ei, wo, nm, ew",
    [
        (1300, 2, -1, 4, 0),
        (1344, 3, -0.5, 8, 1),
        (1377, 3, 0.5, 8, 0),
        (1263, 2, -1, 4, 1),
        (1234, 2, 0, 4, 0),
        (1201, 1.3, -0.85, -1, 1),
        (900, 1.2, -1.1, -1, 0),
    ],
)
def test_era_constants(my, ei, wo, nm, ew):
    c = era_constants(my)
    assert c.ei == ei
    assert c.wo == pytest.approx(wo)
    assert c.nm == nm
    assert c.ew == ew


def test_era_bands_sorted():
    starts = [b.start for b in ERA_BANDS if b.start is not None]
    assert starts == sorted(starts, reverse=True)
    for band in ERA_BANDS:
        keys = [k for k, _ in band.full_moon_exceptions]
        assert keys == sorted(keys)
        assert list(band.watat_exceptions) == sorted(band.watat_exceptions)


def test_exact_search():
    keys = (3, 7, 11, 20)
    assert exact_search(11, keys) == 2
    assert exact_search(3, keys) == 0
    assert exact_search(4, keys) == -1
    assert exact_search(21, keys) == -1
    assert exact_search(1, ()) == -1


def test_check_watat():
    w = check_watat(1300)
    assert not w.is_watat
    assert w.full_moon_day == 2429121
    assert check_watat(1344).is_watat
    assert not check_watat(1345).is_watat


@pytest.mark.parametrize(
    "my, year_type, tagu1, fm",
    [
        (0, 0, 1954167, 1954269),
        (2, 1, 1954875, 1955007),
        (1234, 2, 2404862, 2404995),
        (1300, 0, 2428989, 2429091),
        (1344, 1, 2445054, 2445186),
        (1377, 2, 2457102, 2457235),
        (1380, 1, 2458195, 2458327),
        (1381, 0, 2458579, 2458681),
        (1382, 1, 2458933, 2459065),
        (1385, 2, 2460025, 2460158),
    ],
)
def test_year_info(my, year_type, tagu1, fm):
    yo = year_info(my)
    assert yo.year_type == year_type
    assert yo.tagu1 == tagu1
    assert yo.full_moon_day == fm
    assert not yo.calc_error


@pytest.mark.parametrize(
    "my, tagu1",
    [(1, 1954521), (653, 2192656), (900, 2282871), (1201, 2392814), (1263, 2415463),
     (1345, 2445438), (1383, 2459317), (1384, 2459671), (1386, 2460410)],
)
def test_first_day_of_tagu(my, tagu1):
    assert year_info(my).tagu1 == tagu1


def test_year_type_distribution():
    counts = Counter(year_info(my).year_type for my in range(0, 1501))
    assert counts[YearType.COMMON] == 948
    assert counts[YearType.LITTLE_WATAT] == 262
    assert counts[YearType.BIG_WATAT] == 291


def test_consecutive_years_are_contiguous():
    for my in range(100, 1500):
        yo = year_info(my)
        assert not yo.calc_error
        assert year_info(my + 1).tagu1 - yo.tagu1 == yo.length


def test_previous_watat_within_gap():
    for my in range(100, 1500):
        yd, prev = previous_watat(my)
        assert 1 <= yd <= MAX_WATAT_GAP
        assert prev.is_watat
        assert prev.year == my - yd


def test_year_length():
    assert [year_length(t) for t in YearType] == [354, 384, 385]


def test_inconsistent_watat_table_is_reported(monkeypatch, caplog):
    # ME 10 is watat, the three years before it are not
    fake = {
        10: WatatResult(10, 2000, True),
        9: WatatResult(9, 1990, False),
        8: WatatResult(8, 1980, False),
        7: WatatResult(7, 1870, False),
    }
    monkeypatch.setattr(year_mod, "check_watat", lambda my: fake[my])
    caplog.set_level(logging.WARNING, logger="mmcal.engines.year")

    yd, prev = year_mod.previous_watat(10)
    assert (yd, prev.year, prev.is_watat) == (MAX_WATAT_GAP, 7, False)

    caplog.clear()
    yo = year_info(10)
    assert yo.calc_error is True
    assert yo.year_type == YearType.BIG_WATAT
    assert yo.full_moon_day == 2000
    assert yo.tagu1 == 1870 + 354 * 3 - 102
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "No watat year within 3 years before ME 10",
        "Inconsistent watat gap of 130 days in ME 10",
    ]
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_regular_year_logs_nothing(caplog):
    caplog.set_level(logging.WARNING, logger="mmcal.engines.year")
    yo = year_info(1385)
    assert not yo.calc_error
    assert caplog.records == []
