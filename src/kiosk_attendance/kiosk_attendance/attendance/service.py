from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..core.constants import DEFAULT_SCAN_LOG_LIMIT, EARLY_ACCESS_MINUTES, FIRST_SCAN_WINS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..scans.model import ScanEvent
from ..scans.repository import ScanLogStore
from ..sessions.model import SessionDefinition
from ..sessions.repository import SessionStore
from ..sessions.resolver import is_scheduled_on, resolve
from ..students.model import RosterMember
from ..students.repository import RosterStore
from .classifier import classify
from .factory import AttendanceStrategyFactory
from .model import AttendanceVerdict

logger = logging.getLogger(__name__)


class AttendanceService:
    """Turns a session, a date and already-fetched snapshots into verdicts.

    The stores are only used by `get_attendance_for_kiosk`; `get_attendance`
    itself never performs I/O.
    """

    def __init__(
        self,
        sessions: SessionStore | None = None,
        students: RosterStore | None = None,
        scans: ScanLogStore | None = None,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        early_access_minutes: int = EARLY_ACCESS_MINUTES,
        first_scan_wins: bool = FIRST_SCAN_WINS,
        scan_log_limit: int = DEFAULT_SCAN_LOG_LIMIT,
    ):
        self._sessions = sessions
        self._students = students
        self._scans = scans
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._early_access_minutes = int(early_access_minutes)
        self._first_scan_wins = bool(first_scan_wins)
        self._scan_log_limit = int(scan_log_limit)

    def is_scheduled(self, session: SessionDefinition, target_date: date) -> bool:
        return is_scheduled_on(session, target_date)

    def get_attendance(
        self,
        session: SessionDefinition,
        target_date: date,
        roster: Sequence[RosterMember],
        scans: Iterable[ScanEvent],
    ) -> List[AttendanceVerdict]:
        boundaries = resolve(session, target_date, early_access_minutes=self._early_access_minutes)
        return classify(
            boundaries,
            roster,
            scans,
            target_date,
            first_scan_wins=self._first_scan_wins,
            strategy_factory=self._factory,
        )

    def get_attendance_for_kiosk(
        self,
        *,
        kiosk_id: int,
        schedule_id: int,
        target_date: date,
        limit: Optional[int] = None,
    ) -> tuple[SessionDefinition, List[AttendanceVerdict]]:
        if self._sessions is None or self._students is None or self._scans is None:
            raise RuntimeError("AttendanceService was built without stores")

        session = self._sessions.get_by_id(int(schedule_id))
        if not session:
            raise ValidationError(f"Schedule {schedule_id} not found")

        roster = self._students.list_students()
        logs = self._scans.get_logs(int(kiosk_id), int(limit or self._scan_log_limit))
        logger.debug(
            "Classifying %s on %s: %d students, %d scans from kiosk %s",
            session.subject_code,
            target_date,
            len(roster),
            len(logs),
            kiosk_id,
        )
        return session, self.get_attendance(session, target_date, roster, logs)

    @staticmethod
    def summarize(verdicts: Iterable[AttendanceVerdict]) -> dict[str, int]:
        counts = {status.value: 0 for status in AttendanceStatus}
        for v in verdicts:
            counts[v.status.value] += 1
        return counts

    @staticmethod
    def to_rows(verdicts: Iterable[AttendanceVerdict]) -> list[dict]:
        return [
            {
                "student_id": v.student_id,
                "full_name": v.full_name,
                "status": v.status.value,
                "time_in": v.time_in_display,
            }
            for v in verdicts
        ]
