from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import FrozenSet, Iterable, Optional, Union

from ..core.constants import DEFAULT_GRACE_PERIOD_MINUTES, WEEKDAY_TAGS


@dataclass(frozen=True)
class SessionDefinition:
    """Domain entity: a recurring class meeting (schedule).

    `time_start`/`time_end` are normally `datetime.time`; a raw string from
    storage is kept as-is and only rejected when the session is resolved.
    """

    schedule_id: int
    subject_code: str
    subject_name: str
    time_start: Union[time, str]
    time_end: Union[time, str]
    recurrence_days: FrozenSet[str] = field(default_factory=frozenset)
    grace_period_minutes: int = DEFAULT_GRACE_PERIOD_MINUTES
    teacher_id: Optional[int] = None
    teacher_name: Optional[str] = None

    @property
    def days_csv(self) -> str:
        return ",".join(sorted(self.recurrence_days, key=_day_order))


def parse_recurrence_days(value: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """Turn "Mon,Wed" (or an iterable of tags) into a set of weekday tags."""
    if not value:
        return frozenset()
    parts = value.split(",") if isinstance(value, str) else value
    return frozenset(p.strip() for p in parts if p and p.strip())


def _day_order(tag: str) -> tuple[int, str]:
    return (WEEKDAY_TAGS.index(tag) if tag in WEEKDAY_TAGS else len(WEEKDAY_TAGS), tag)
