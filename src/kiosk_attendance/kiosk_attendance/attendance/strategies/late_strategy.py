from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...sessions.resolver import ResolvedBoundaries
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Scan after the grace period, up to the session end."""

    def decide(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, time_in=scan_time)
