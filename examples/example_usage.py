"""Example: compute attendance through the service layer (no Flask, no DB).

Controllers are a thin layer; the verdict logic lives in the service.
"""

from datetime import date, time

from src.kiosk_attendance.kiosk_attendance.attendance.service import AttendanceService
from src.kiosk_attendance.kiosk_attendance.scans.model import ScanEvent
from src.kiosk_attendance.kiosk_attendance.sessions.model import SessionDefinition, parse_recurrence_days
from src.kiosk_attendance.kiosk_attendance.students.model import RosterMember


def main():
    session = SessionDefinition(
        schedule_id=1,
        subject_code="CS101",
        subject_name="Intro to Programming",
        time_start=time(9, 0),
        time_end=time(10, 0),
        recurrence_days=parse_recurrence_days("Mon,Wed"),
        grace_period_minutes=15,
    )
    roster = [RosterMember("2024-001", "Ana Cruz"), RosterMember("2024-002", "Ben Reyes")]
    scans = [
        ScanEvent("2024-001", "2026-10-19 09:20:00", kiosk_id=1),
        ScanEvent("2024-001", "2026-10-19 09:05:00", kiosk_id=1),
    ]

    service = AttendanceService()
    verdicts = service.get_attendance(session, date(2026, 10, 19), roster, scans)
    for row in service.to_rows(verdicts):
        print(row)


if __name__ == "__main__":
    main()
