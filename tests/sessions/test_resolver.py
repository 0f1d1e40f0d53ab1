from dataclasses import replace
from datetime import date, datetime

import pytest

from src.kiosk_attendance.kiosk_attendance.core.exceptions import MalformedSession
from src.kiosk_attendance.kiosk_attendance.sessions.model import parse_recurrence_days
from src.kiosk_attendance.kiosk_attendance.sessions.resolver import resolve


def test_resolve_scheduled_day_computes_boundaries(cs101, monday):
    b = resolve(cs101, monday)

    assert b.scheduled is True
    assert b.session_start == datetime(2026, 10, 19, 9, 0)
    assert b.early_access_open == datetime(2026, 10, 19, 8, 0)
    assert b.late_threshold == datetime(2026, 10, 19, 9, 15)
    assert b.session_end == datetime(2026, 10, 19, 10, 0)


def test_resolve_unscheduled_day_has_no_boundaries(cs101, tuesday):
    b = resolve(cs101, tuesday)

    assert b.scheduled is False
    assert b.early_access_open is None
    assert b.late_threshold is None
    assert b.session_end is None


def test_resolve_empty_recurrence_never_occurs(cs101):
    session = replace(cs101, recurrence_days=frozenset())
    assert all(not resolve(session, date(2026, 10, 19 + i)).scheduled for i in range(7))


def test_resolve_accepts_string_times_and_custom_early_window(cs101, monday):
    session = replace(cs101, time_start="13:30", time_end="15:00:00", grace_period_minutes=0)
    b = resolve(session, monday, early_access_minutes=30)

    assert b.early_access_open == datetime(2026, 10, 19, 13, 0)
    assert b.late_threshold == datetime(2026, 10, 19, 13, 30)
    assert b.session_end == datetime(2026, 10, 19, 15, 0)


@pytest.mark.parametrize(
    "changes",
    [
        {"time_start": "nine"},
        {"time_end": ""},
        {"time_start": "10:00", "time_end": "10:00"},
        {"time_start": "22:00", "time_end": "01:00"},
        {"grace_period_minutes": -5},
    ],
)
def test_resolve_rejects_malformed_sessions(cs101, monday, changes):
    with pytest.raises(MalformedSession):
        resolve(replace(cs101, **changes), monday)


def test_malformed_session_is_reported_even_on_unscheduled_day(cs101, tuesday):
    with pytest.raises(MalformedSession):
        resolve(replace(cs101, time_start="bad"), tuesday)


def test_parse_recurrence_days_trims_and_dedupes():
    assert parse_recurrence_days(" Mon, Wed ,Mon,,") == frozenset({"Mon", "Wed"})
    assert parse_recurrence_days("") == frozenset()
    assert parse_recurrence_days(None) == frozenset()
    assert parse_recurrence_days(["Fri", "Tue"]) == frozenset({"Tue", "Fri"})


def test_days_csv_is_in_week_order(cs101):
    session = replace(cs101, recurrence_days=frozenset({"Fri", "Mon", "Wed"}))
    assert session.days_csv == "Mon,Wed,Fri"
