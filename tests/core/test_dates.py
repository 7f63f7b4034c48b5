from __future__ import annotations

from datetime import date, datetime, time

import pytest

from core.dates import age_from_value, age_in_years, minutes_since_midnight, parse_date


@pytest.mark.parametrize(
    ("birth", "today", "expected"),
    [
        (date(2008, 10, 12), date(2026, 10, 12), 18),
        (date(2008, 10, 13), date(2026, 10, 12), 17),
        (date(2005, 10, 12), date(2026, 10, 12), 21),
        (date(2005, 10, 13), date(2026, 10, 12), 20),
        (date(2000, 2, 29), date(2018, 2, 28), 17),
        (date(2000, 2, 29), date(2018, 3, 1), 18),
    ],
)
def test_age_in_years_decrements_before_birthday(birth: date, today: date, expected: int) -> None:
    assert age_in_years(birth, today) == expected


def test_parse_date_accepts_iso_strings_and_dates() -> None:
    assert parse_date("2026-10-19") == date(2026, 10, 19)
    assert parse_date(" 2026-10-19T08:00:00 ") == date(2026, 10, 19)
    assert parse_date(date(2026, 1, 2)) == date(2026, 1, 2)
    assert parse_date(datetime(2026, 1, 2, 15, 30)) == date(2026, 1, 2)


@pytest.mark.parametrize("value", [None, "", "   ", "19.10.2026", "2026-13-01", 20261019])
def test_parse_date_rejects_garbage(value: object) -> None:
    assert parse_date(value) is None


def test_age_from_value_returns_none_for_unparseable_input() -> None:
    assert age_from_value("not a date", date(2026, 10, 12)) is None
    assert age_from_value("1990-05-20", date(2026, 10, 12)) == 36


def test_minutes_since_midnight() -> None:
    assert minutes_since_midnight("09:00") == 540
    assert minutes_since_midnight("9:01") == 541
    assert minutes_since_midnight(time(17, 30)) == 1050
    assert minutes_since_midnight("24:00") is None
    assert minutes_since_midnight("12:60") is None
    assert minutes_since_midnight("noon") is None
    assert minutes_since_midnight(None) is None
