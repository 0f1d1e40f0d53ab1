from __future__ import annotations

from datetime import date, time

import pytest

from src.kiosk_attendance.kiosk_attendance.sessions.model import SessionDefinition
from src.kiosk_attendance.kiosk_attendance.students.model import RosterMember


@pytest.fixture
def monday() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def tuesday() -> date:
    return date(2026, 10, 20)


@pytest.fixture
def cs101() -> SessionDefinition:
    # 09:00-10:00 on Mon/Wed, 15 minutes grace
    return SessionDefinition(
        schedule_id=1,
        subject_code="CS101",
        subject_name="Intro to Programming",
        time_start=time(9, 0),
        time_end=time(10, 0),
        recurrence_days=frozenset({"Mon", "Wed"}),
        grace_period_minutes=15,
    )


@pytest.fixture
def roster() -> list[RosterMember]:
    return [
        RosterMember(student_id="S-001", full_name="Ana Cruz"),
        RosterMember(student_id="S-002", full_name="Ben Reyes", rfid_uid="04A1B2C3"),
        RosterMember(student_id="S-003", full_name="Cara Lim"),
    ]
