from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import combine_local, parse_time_of_day, weekday_tag
from ..core.constants import EARLY_ACCESS_MINUTES
from ..core.exceptions import MalformedSession
from .model import SessionDefinition


@dataclass(frozen=True)
class ResolvedBoundaries:
    """Absolute time boundaries of one session on one calendar date.

    All instants are naive local wall-clock values; they are only set when
    `scheduled` is true.
    """

    scheduled: bool
    session_start: Optional[datetime] = None
    early_access_open: Optional[datetime] = None
    late_threshold: Optional[datetime] = None
    session_end: Optional[datetime] = None


UNSCHEDULED = ResolvedBoundaries(scheduled=False)


def is_scheduled_on(session: SessionDefinition, target_date: date) -> bool:
    return weekday_tag(target_date) in session.recurrence_days


def resolve(
    session: SessionDefinition,
    target_date: date,
    *,
    early_access_minutes: int = EARLY_ACCESS_MINUTES,
) -> ResolvedBoundaries:
    """Decide whether `session` meets on `target_date` and compute its boundaries.

    The session itself is validated first, whatever the weekday. An
    unscheduled weekday is a normal outcome (`scheduled=False`), not an
    error. Raises MalformedSession when the start/end times cannot be parsed,
    start is not before end, or the grace period is negative.
    """
    try:
        start_time = parse_time_of_day(session.time_start)
        end_time = parse_time_of_day(session.time_end)
    except ValueError as e:
        raise MalformedSession(f"Session {session.subject_code!r}: {e}") from e

    if start_time >= end_time:
        raise MalformedSession(
            f"Session {session.subject_code!r}: start {start_time:%H:%M} must be before end {end_time:%H:%M}"
        )

    try:
        grace = int(session.grace_period_minutes or 0)
    except (TypeError, ValueError) as e:
        raise MalformedSession(f"Session {session.subject_code!r}: invalid grace period") from e
    if grace < 0:
        raise MalformedSession(f"Session {session.subject_code!r}: negative grace period {grace}")

    if not is_scheduled_on(session, target_date):
        return UNSCHEDULED

    session_start = combine_local(target_date, start_time)
    return ResolvedBoundaries(
        scheduled=True,
        session_start=session_start,
        early_access_open=session_start - timedelta(minutes=int(early_access_minutes)),
        late_threshold=session_start + timedelta(minutes=grace),
        session_end=combine_local(target_date, end_time),
    )
