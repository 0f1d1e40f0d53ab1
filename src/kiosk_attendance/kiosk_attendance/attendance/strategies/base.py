from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...sessions.resolver import ResolvedBoundaries


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    time_in: Optional[datetime] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide(self, *, scan_time: Optional[datetime], boundaries: ResolvedBoundaries) -> StatusDecision:
        raise NotImplementedError
