from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...sessions.resolver import ResolvedBoundaries
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """No qualifying scan on the target date."""

    def decide(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ABSENT)
