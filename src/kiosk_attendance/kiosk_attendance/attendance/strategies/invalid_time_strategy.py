from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...sessions.resolver import ResolvedBoundaries
from .base import AttendanceStrategy, StatusDecision


class InvalidTimeStrategy(AttendanceStrategy):
    """Scan outside the accepted window; the tap time is still surfaced for audit."""

    def decide(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.INVALID_TIME, time_in=scan_time)
