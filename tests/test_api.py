# tests/test_api.py

import math
from datetime import date

import pytest

import mmcal
from mmcal.core.errors import InvalidDateError, MmcalError, UnknownCalendarError
from mmcal.core.types import MoonPhase


def test_list_calendars():
    assert mmcal.list_calendars() == ["british", "gregorian", "julian"]
    info = mmcal.calendar_info("julian")
    assert info["calendar_type"] == "julian"
    assert info["sg"] == 2361222


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        mmcal.day_info(date(2024, 4, 17), calendar="tibetan")
    with pytest.raises(KeyError):
        mmcal.calendar_info("tibetan")


def test_julian_day_to_burmese_date():
    bd = mmcal.julian_day_to_burmese_date(2460418)
    assert bd.as_tuple() == (1386, 1, 9)
    assert bd.year_type == mmcal.YearType.COMMON
    assert bd.month_length == 29
    assert bd.moon_phase == MoonPhase.WAXING
    assert bd.fortnight_day == 9


def test_burmese_date_to_julian_day():
    assert mmcal.burmese_date_to_julian_day(1386, 1, 9) == 2460418
    assert mmcal.to_gregorian(1386, 1, 9) == date(2024, 4, 17)
    assert mmcal.to_gregorian(1386, 1, 9, calendar="julian") == date(2024, 4, 4)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "2460418", None, True])
def test_invalid_julian_day(bad):
    with pytest.raises(InvalidDateError):
        mmcal.julian_day_to_burmese_date(bad)


@pytest.mark.parametrize(
    "ymd",
    [(1386, 0, 1), (1386, 15, 1), (1386, -1, 1), (1386, 1, 0), (1386, 1, 30), (1386, 2, 31), (1386.0, 1, 1)],
)
def test_invalid_burmese_date(ymd):
    with pytest.raises(InvalidDateError):
        mmcal.burmese_date_to_julian_day(*ymd)


def test_first_waso_only_in_watat_years():
    assert mmcal.burmese_date_to_julian_day(1385, 0, 1) == 2460114
    assert mmcal.burmese_date_to_julian_day(1385, 0, 30) == 2460143
    assert mmcal.julian_day_to_burmese_date(2460114).as_tuple() == (1385, 0, 1)
    assert mmcal.to_gregorian(1382, 0, 15) == date(2020, 7, 4)
    with pytest.raises(InvalidDateError):
        mmcal.to_gregorian(1386, 0, 1)


def test_errors_are_value_errors():
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(InvalidDateError, MmcalError)
    assert issubclass(UnknownCalendarError, MmcalError)


def test_moon_functions():
    assert mmcal.moon_phase(15, 2, 0) == MoonPhase.FULL_MOON
    assert mmcal.moon_phase(30, 3, 2) == MoonPhase.NEW_MOON
    assert mmcal.fortnight_day(20) == 5
    assert mmcal.day_of_month(5, MoonPhase.WANING, 2, 0) == 20
    with pytest.raises(InvalidDateError):
        mmcal.moon_phase(30, 3, 0)
    with pytest.raises(InvalidDateError):
        mmcal.moon_phase(1, 1, 3)
    with pytest.raises(InvalidDateError):
        mmcal.fortnight_day(31)


def test_astrological_days_and_holidays():
    assert mmcal.astrological_days(2460418) == ["Warameittugyi", "Warameittunge", "Yatpote", "Nagapor"]
    assert mmcal.astro_info(2460418).mahabote == 3
    assert mmcal.holidays(2459209) == ["Christmas Day"]
    assert mmcal.holidays(date(2020, 12, 25)) == ["Christmas Day"]
    assert mmcal.other_holidays(date(2024, 3, 31)) == ["Easter"]
    with pytest.raises(InvalidDateError):
        mmcal.holidays(math.nan)


def test_year_info():
    yo = mmcal.year_info(1385)
    assert yo.year_type == mmcal.YearType.BIG_WATAT
    assert yo.length == 385


def test_day_info():
    info = mmcal.day_info(date(2024, 4, 17))
    assert info.jdn == 2460418
    assert info.calendar == "british"
    assert info.burmese.as_tuple() == (1386, 1, 9)
    assert info.weekday == 4
    assert info.civil.date() == date(2024, 4, 17)
    assert info.attributes is None and info.debug is None


def test_day_info_julian_calendar():
    info = mmcal.day_info(date(2024, 4, 4), calendar="julian")
    assert info.jdn == 2460418
    assert info.civil.date() == date(2024, 4, 4)


def test_day_info_attributes():
    info = mmcal.day_info(
        2460418,
        attributes=["weekday", "astro", "holidays", "other_holidays", "sasana_year", "year_name"],
    )
    a = info.attributes
    assert a["weekday"] == 4
    assert a["astro"].days == ("Warameittugyi", "Warameittunge", "Yatpote", "Nagapor")
    assert a["holidays"] == ["Myanmar New Year's Day"]
    assert a["other_holidays"] == []
    assert a["sasana_year"] == 2567
    assert a["year_name"] == "Ashadha"


def test_list_attributes():
    assert mmcal.list_attributes() == [
        "astro", "holidays", "other_holidays", "sasana_year", "weekday", "year_name",
    ]


def test_unknown_attribute():
    with pytest.raises(KeyError):
        mmcal.day_info(2460418, attributes=["zodiac"])


def test_day_info_debug():
    info = mmcal.day_info(2460418, debug=True)
    assert info.debug["tagu1"] == 2460410
    assert info.debug["year_length"] == 354
    assert info.debug["calc_error"] is False
    assert mmcal.explain(2460418)["jdn"] == 2460418


def test_register_calendar():
    cfg = mmcal.CalendarConfig("julian-test", mmcal.CalendarType.JULIAN)
    mmcal.register_calendar("julian-test", mmcal.make_calendar(cfg), overwrite=True)
    assert "julian-test" in mmcal.list_calendars()
    with pytest.raises(KeyError):
        mmcal.register_calendar("julian-test", mmcal.make_calendar(cfg))
    info = mmcal.day_info(date(2020, 12, 25), calendar="julian-test", attributes=["holidays"])
    assert info.attributes["holidays"] == ["Christmas Day"]
    assert mmcal.holidays(date(2020, 12, 25), calendar="julian-test") == ["Christmas Day"]


def test_config_tweak():
    cfg = mmcal.CalendarConfig()
    g = cfg.tweak(name="gregorian-only", calendar_type=1)
    assert g.calendar_type is mmcal.CalendarType.GREGORIAN
    assert cfg.calendar_type is mmcal.CalendarType.BRITISH
    with pytest.raises(ValueError):
        mmcal.CalendarConfig(calendar_type=7)


def test_registry_membership():
    from mmcal.api import _reg
    reg = _reg()
    assert "british" in reg
    assert "tibetan" not in reg
    assert list(reg)[:3] == ["british", "gregorian", "julian"]
