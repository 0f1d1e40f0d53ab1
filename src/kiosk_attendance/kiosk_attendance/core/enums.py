from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance verdict for one student, one session, one date."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    INVALID_TIME = "Invalid Time"
