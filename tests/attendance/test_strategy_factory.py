from datetime import datetime

import pytest

from src.kiosk_attendance.kiosk_attendance.attendance.factory import AttendanceStrategyFactory
from src.kiosk_attendance.kiosk_attendance.attendance.strategies.absent_strategy import AbsentStrategy
from src.kiosk_attendance.kiosk_attendance.attendance.strategies.invalid_time_strategy import InvalidTimeStrategy
from src.kiosk_attendance.kiosk_attendance.attendance.strategies.late_strategy import LateStrategy
from src.kiosk_attendance.kiosk_attendance.attendance.strategies.present_strategy import PresentStrategy
from src.kiosk_attendance.kiosk_attendance.core.enums import AttendanceStatus
from src.kiosk_attendance.kiosk_attendance.core.exceptions import ValidationError
from src.kiosk_attendance.kiosk_attendance.sessions.resolver import UNSCHEDULED, resolve


@pytest.mark.parametrize(
    "hour, minute, second, expected",
    [
        (7, 59, 59, InvalidTimeStrategy),
        (8, 0, 0, PresentStrategy),
        (9, 15, 0, PresentStrategy),
        (9, 15, 1, LateStrategy),
        (10, 0, 0, LateStrategy),
        (10, 0, 1, InvalidTimeStrategy),
    ],
)
def test_factory_bands_are_closed_at_thresholds(cs101, monday, hour, minute, second, expected):
    boundaries = resolve(cs101, monday)
    scan_time = datetime(2026, 10, 19, hour, minute, second)

    strategy = AttendanceStrategyFactory().for_scan(scan_time=scan_time, boundaries=boundaries)

    assert isinstance(strategy, expected)


def test_factory_no_scan_is_absent(cs101, monday):
    strategy = AttendanceStrategyFactory().for_scan(scan_time=None, boundaries=resolve(cs101, monday))

    assert isinstance(strategy, AbsentStrategy)
    decision = strategy.decide(scan_time=None, boundaries=resolve(cs101, monday))
    assert decision.status == AttendanceStatus.ABSENT
    assert decision.time_in is None


def test_invalid_time_keeps_the_tap_time(cs101, monday):
    scan_time = datetime(2026, 10, 19, 10, 30)
    decision = InvalidTimeStrategy().decide(scan_time=scan_time, boundaries=resolve(cs101, monday))

    assert decision.status == AttendanceStatus.INVALID_TIME
    assert decision.time_in == scan_time


def test_factory_refuses_unscheduled_boundaries():
    with pytest.raises(ValidationError):
        AttendanceStrategyFactory().for_scan(scan_time=datetime(2026, 10, 20, 9, 0), boundaries=UNSCHEDULED)
