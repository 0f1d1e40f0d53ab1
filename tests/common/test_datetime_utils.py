from datetime import date, datetime, time

import pytest

from src.kiosk_attendance.kiosk_attendance.common.datetime_utils import (
    combine_local,
    format_hhmm,
    parse_local_timestamp,
    parse_time_of_day,
    weekday_tag,
)


def test_weekday_tag_is_locale_independent():
    assert [weekday_tag(date(2026, 10, 19 + i)) for i in range(7)] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def test_parse_time_of_day_accepts_minutes_and_seconds():
    assert parse_time_of_day("09:00") == time(9, 0)
    assert parse_time_of_day(" 13:45:30 ") == time(13, 45, 30)
    assert parse_time_of_day(time(8, 15)) == time(8, 15)


@pytest.mark.parametrize("value", ["", "9am", "25:00", None, 900])
def test_parse_time_of_day_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_time_of_day(value)


def test_parse_local_timestamp_space_and_t_forms():
    assert parse_local_timestamp("2026-10-19 09:05:00") == datetime(2026, 10, 19, 9, 5)
    assert parse_local_timestamp("2026-10-19T09:05:00.250") == datetime(2026, 10, 19, 9, 5, 0, 250000)


def test_parse_local_timestamp_keeps_wall_clock_of_offset_values():
    assert parse_local_timestamp("2026-10-19T23:30:00+08:00") == datetime(2026, 10, 19, 23, 30)
    assert parse_local_timestamp("2026-10-19T23:30:00Z") == datetime(2026, 10, 19, 23, 30)


@pytest.mark.parametrize("value", ["", "not a date", "2026-13-40 09:00", None])
def test_parse_local_timestamp_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_local_timestamp(value)


def test_combine_local_and_format():
    instant = combine_local(date(2026, 10, 19), time(9, 0))
    assert instant == datetime(2026, 10, 19, 9, 0)
    assert instant.tzinfo is None
    assert format_hhmm(instant) == "09:00"
    assert format_hhmm(None) == "--:--"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2026-10-19T09:05:12.1234", datetime(2026, 10, 19, 9, 5, 12, 123400)),
        ("2026-10-19 09:05:12.1", datetime(2026, 10, 19, 9, 5, 12, 100000)),
        ("2026-10-19T09:05:12.123456789", datetime(2026, 10, 19, 9, 5, 12, 123456)),
        ("2026-10-19T09:05:12.12345+00:00", datetime(2026, 10, 19, 9, 5, 12, 123450)),
        ("2026-10-19T09:05:12+0800", datetime(2026, 10, 19, 9, 5, 12)),
        ("2026-10-19T09:05:12-05", datetime(2026, 10, 19, 9, 5, 12)),
        ("2026-10-19 09:05", datetime(2026, 10, 19, 9, 5)),
    ],
)
def test_parse_local_timestamp_accepts_any_fraction_and_offset_form(value, expected):
    assert parse_local_timestamp(value) == expected
