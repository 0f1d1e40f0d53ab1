from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ScanEvent
from .repository import ScanLogStore


class MySQLScanLogRepository(ScanLogStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_logs(self, kiosk_id: int, limit: int) -> Sequence[ScanEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, kiosk_id, student_id, timestamp
                FROM attendance_logs
                WHERE kiosk_id=%s
                ORDER BY id DESC
                LIMIT %s
                """,
                (int(kiosk_id), int(limit)),
            )
            return [
                ScanEvent(
                    student_id=str(r["student_id"]),
                    timestamp=r["timestamp"],
                    kiosk_id=int(r["kiosk_id"]),
                    log_id=int(r["id"]),
                )
                for r in fetchall(cur)
            ]
