from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SCAN_LOG_LIMIT, EARLY_ACCESS_MINUTES, FIRST_SCAN_WINS
from .database.connection import DBConfig, DatabaseConnection
from .scans.mysql_scan_repository import MySQLScanLogRepository
from .sessions.mysql_session_repository import MySQLSessionRepository
from .students.mysql_student_repository import MySQLStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    sessions_repo: MySQLSessionRepository
    students_repo: MySQLStudentRepository
    scans_repo: MySQLScanLogRepository

    attendance_service: AttendanceService
    scan_log_limit: int = DEFAULT_SCAN_LOG_LIMIT


def build_container(
    *,
    db_config: dict,
    early_access_minutes: int = EARLY_ACCESS_MINUTES,
    first_scan_wins: bool = FIRST_SCAN_WINS,
    scan_log_limit: int = DEFAULT_SCAN_LOG_LIMIT,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    sessions_repo = MySQLSessionRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    scans_repo = MySQLScanLogRepository(conn)

    attendance_service = AttendanceService(
        sessions_repo,
        students_repo,
        scans_repo,
        strategy_factory=AttendanceStrategyFactory(),
        early_access_minutes=early_access_minutes,
        first_scan_wins=first_scan_wins,
        scan_log_limit=scan_log_limit,
    )

    return Container(
        conn=conn,
        sessions_repo=sessions_repo,
        students_repo=students_repo,
        scans_repo=scans_repo,
        attendance_service=attendance_service,
        scan_log_limit=int(scan_log_limit),
    )
