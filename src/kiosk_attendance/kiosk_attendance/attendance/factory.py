from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError
from ..sessions.resolver import ResolvedBoundaries
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.invalid_time_strategy import InvalidTimeStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy for the band a scan falls into.

    Bands are closed at both thresholds:
    [early_access_open, late_threshold] -> Present,
    (late_threshold, session_end] -> Late, anything else -> Invalid Time.
    """

    def for_scan(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> AttendanceStrategy:
        if not boundaries.scheduled:
            raise ValidationError("Cannot classify a scan for an unscheduled date")

        if scan_time is None:
            return AbsentStrategy()

        if boundaries.early_access_open <= scan_time <= boundaries.late_threshold:
            return PresentStrategy()
        if boundaries.late_threshold < scan_time <= boundaries.session_end:
            return LateStrategy()
        return InvalidTimeStrategy()
