from __future__ import annotations

import re
from datetime import date, datetime, time

from ..core.constants import ABSENT_TIME_IN, WEEKDAY_TAGS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time_of_day(value: object) -> time:
    """Parse a wall-clock time of day ("09:00" or "09:00:00").

    Raises ValueError for anything that is not a valid time.
    """
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid time of day: {value!r}")

    text = value.strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: {value!r}")


_TIMESTAMP_RE = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[T ](?P<clock>\d{2}:\d{2}(?::\d{2})?)"
    r"(?:[.,](?P<fraction>\d+))?"
    r"(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def parse_local_timestamp(value: object) -> datetime:
    """Parse a scan timestamp as a naive local wall-clock datetime.

    Accepts "YYYY-MM-DD HH:MM[:SS[.f...]]" and the ISO "T" form, with any
    number of fraction digits. A trailing UTC offset ("Z", "+08", "+0800",
    "+08:00") is dropped, not converted: the written wall-clock time is kept.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value.strip()
    match = _TIMESTAMP_RE.match(text)
    if not match:
        return datetime.fromisoformat(text.replace(" ", "T", 1)).replace(tzinfo=None)

    clock = match.group("clock")
    if clock.count(":") == 1:
        clock += ":00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    fraction = (match.group("fraction") or "").ljust(6, "0")[:6]
    return datetime.fromisoformat(f"{match.group('date')}T{clock}.{fraction}")


def combine_local(day: date, time_of_day: time) -> datetime:
    """Compose a calendar date and a time of day into a naive local instant."""
    return datetime.combine(day, time_of_day.replace(tzinfo=None))


def weekday_tag(day: date) -> str:
    """Locale-independent 3-letter weekday tag ("Mon" ... "Sun")."""
    return WEEKDAY_TAGS[day.weekday()]


def format_hhmm(value: datetime | None) -> str:
    return value.strftime("%H:%M") if value else ABSENT_TIME_IN
