from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_hhmm
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceVerdict:
    """Derived (never stored): one student's status for one session on one date."""

    student_id: str
    full_name: str
    status: AttendanceStatus
    time_in: Optional[datetime] = None

    @property
    def time_in_display(self) -> str:
        return format_hhmm(self.time_in)
