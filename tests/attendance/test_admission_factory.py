from datetime import time

from checkin_system.attendance.factory import AdmissionStrategyFactory, can_attend_class
from checkin_system.attendance.strategies.late_strategy import LateStrategy
from checkin_system.attendance.strategies.on_time_strategy import OnTimeStrategy
from checkin_system.attendance.strategies.rejected_strategy import (
    ClassEndedStrategy,
    TooEarlyStrategy,
    WrongDayStrategy,
)
from checkin_system.core.enums import ClassType, DayType
from checkin_system.schedules.model import ScheduleEntry

WEEKDAY = ScheduleEntry(start_time=time(17, 30), end_time=time(19, 30), late_threshold_minutes=15, early_login_minutes=60)


def _pick(class_type, day_type, hh, mm):
    return AdmissionStrategyFactory().for_checkin(
        class_type=class_type,
        day_type=day_type,
        now_minutes=hh * 60 + mm,
        entry=WEEKDAY,
    )


def test_factory_checkin_on_time_within_threshold():
    assert isinstance(_pick(ClassType.WEEKDAY, DayType.WEEKDAY, 17, 45), OnTimeStrategy)


def test_factory_checkin_late_after_threshold():
    strategy = _pick(ClassType.WEEKDAY, DayType.WEEKDAY, 17, 46)

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide(now_minutes=17 * 60 + 46, entry=WEEKDAY).minutes_late == 16


def test_factory_wrong_day_wins_over_time_checks():
    # Would be "too early" on a matching day.
    assert isinstance(_pick(ClassType.WEEKEND, DayType.WEEKDAY, 3, 0), WrongDayStrategy)


def test_factory_too_early_and_class_ended():
    assert isinstance(_pick(ClassType.BOTH, DayType.WEEKDAY, 16, 29), TooEarlyStrategy)
    assert isinstance(_pick(ClassType.BOTH, DayType.WEEKDAY, 19, 31), ClassEndedStrategy)


def test_too_early_reports_minutes_until_open():
    decision = TooEarlyStrategy().decide(now_minutes=16 * 60, entry=WEEKDAY)

    assert decision.allowed is False
    assert decision.minutes_until_open == 30


def test_can_attend_class():
    assert can_attend_class(ClassType.BOTH, DayType.WEEKEND)
    assert can_attend_class(ClassType.WEEKDAY, DayType.WEEKDAY)
    assert not can_attend_class(ClassType.WEEKDAY, DayType.WEEKEND)
