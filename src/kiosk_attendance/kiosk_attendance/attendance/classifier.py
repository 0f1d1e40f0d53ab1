from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence

from ..common.datetime_utils import parse_local_timestamp
from ..core.constants import FIRST_SCAN_WINS
from ..scans.model import ScanEvent
from ..sessions.resolver import ResolvedBoundaries
from ..students.model import RosterMember
from .factory import AttendanceStrategyFactory
from .model import AttendanceVerdict

logger = logging.getLogger(__name__)


def select_scan_times(
    scans: Iterable[ScanEvent],
    target_date: date,
    *,
    first_scan_wins: bool = FIRST_SCAN_WINS,
) -> Dict[str, datetime]:
    """Pick one qualifying scan time per student on `target_date`.

    Rows with an unparsable timestamp are skipped. With `first_scan_wins` the
    earliest tap is kept, otherwise the latest; on equal timestamps the row
    seen first wins.
    """
    selected: Dict[str, datetime] = {}
    for position, scan in enumerate(scans):
        try:
            scan_time = parse_local_timestamp(scan.timestamp)
        except (TypeError, ValueError):
            logger.warning(
                "Skipping scan #%d (log_id=%s, student=%s): bad timestamp %r",
                position,
                scan.log_id,
                scan.student_id,
                scan.timestamp,
            )
            continue

        if scan_time.date() != target_date:
            continue

        key = str(scan.student_id)
        current = selected.get(key)
        if current is None:
            selected[key] = scan_time
        elif first_scan_wins and scan_time < current:
            selected[key] = scan_time
        elif not first_scan_wins and scan_time > current:
            selected[key] = scan_time
    return selected


def classify(
    boundaries: ResolvedBoundaries,
    roster: Sequence[RosterMember],
    scans: Iterable[ScanEvent],
    target_date: date,
    *,
    first_scan_wins: bool = FIRST_SCAN_WINS,
    strategy_factory: Optional[AttendanceStrategyFactory] = None,
) -> List[AttendanceVerdict]:
    """One verdict per roster member, in roster order.

    Returns an empty list when the session does not meet on `target_date`.
    Pure: the result depends only on the arguments, never on scan order.
    """
    if not boundaries.scheduled:
        return []

    factory = strategy_factory or AttendanceStrategyFactory()
    scan_times = select_scan_times(scans, target_date, first_scan_wins=first_scan_wins)

    verdicts: List[AttendanceVerdict] = []
    for member in roster:
        scan_time = scan_times.get(str(member.student_id))
        strategy = factory.for_scan(scan_time=scan_time, boundaries=boundaries)
        decision = strategy.decide(scan_time=scan_time, boundaries=boundaries)
        verdicts.append(
            AttendanceVerdict(
                student_id=member.student_id,
                full_name=member.full_name,
                status=decision.status,
                time_in=decision.time_in,
            )
        )
    return verdicts
