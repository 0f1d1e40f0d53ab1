from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import RosterMember
from .repository import RosterStore


class MySQLStudentRepository(RosterStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_students(self) -> Sequence[RosterMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, full_name, rfid_uid
                FROM students
                ORDER BY full_name ASC, student_id ASC
                """
            )
            return [
                RosterMember(
                    student_id=str(r["student_id"]),
                    full_name=r["full_name"],
                    rfid_uid=str(r["rfid_uid"]) if r.get("rfid_uid") else None,
                )
                for r in fetchall(cur)
            ]
