from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RosterMember:
    """Domain entity: a student eligible for a session.

    `student_id` is the natural key printed on the card and written to scan
    logs, not the database surrogate id. `rfid_uid` is the card UID a kiosk
    reads and maps back to `student_id`.
    """

    student_id: str
    full_name: str
    rfid_uid: Optional[str] = None
