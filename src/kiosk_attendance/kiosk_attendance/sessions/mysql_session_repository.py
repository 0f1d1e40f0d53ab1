from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, time_or_raw
from .model import SessionDefinition, parse_recurrence_days
from .repository import SessionStore

_SELECT = """
    SELECT
        sc.id,
        sc.subject_code,
        sc.subject_name,
        sc.time_start,
        sc.time_end,
        sc.days,
        sc.grace_period,
        sc.teacher_id,
        t.full_name AS teacher_name
    FROM schedules sc
    LEFT JOIN teachers t ON t.id = sc.teacher_id
"""


def _to_session(r: Dict[str, Any]) -> SessionDefinition:
    return SessionDefinition(
        schedule_id=int(r["id"]),
        subject_code=r["subject_code"],
        subject_name=r["subject_name"],
        time_start=time_or_raw(r["time_start"]),
        time_end=time_or_raw(r["time_end"]),
        recurrence_days=parse_recurrence_days(r.get("days")),
        grace_period_minutes=int(r.get("grace_period") or 0),
        teacher_id=int(r["teacher_id"]) if r.get("teacher_id") is not None else None,
        teacher_name=r.get("teacher_name"),
    )


class MySQLSessionRepository(SessionStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_sessions(self, teacher_id: Optional[int] = None) -> Sequence[SessionDefinition]:
        clauses: list[str] = []
        params: list[object] = []
        if teacher_id is not None:
            clauses.append("sc.teacher_id=%s")
            params.append(int(teacher_id))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT}
                {where}
                ORDER BY sc.time_start ASC, sc.id ASC
                """,
                tuple(params),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def get_by_id(self, schedule_id: int) -> Optional[SessionDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                {_SELECT}
                WHERE sc.id=%s
                """,
                (int(schedule_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_session(r)
