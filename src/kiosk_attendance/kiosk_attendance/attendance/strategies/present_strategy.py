from __future__ import annotations

from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...sessions.resolver import ResolvedBoundaries
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """Scan between early access and the end of the grace period."""

    def decide(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, time_in=scan_time)
