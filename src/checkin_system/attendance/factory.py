from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ClassType, DayType
from ..schedules.model import ScheduleEntry
from .strategies.base import AdmissionStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy
from .strategies.rejected_strategy import ClassEndedStrategy, TooEarlyStrategy, WrongDayStrategy


def can_attend_class(class_type: ClassType, day_type: DayType) -> bool:
    if class_type == ClassType.BOTH:
        return True
    return class_type.value == day_type.value


@dataclass
class AdmissionStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    Boundaries are strict: exactly at the early-open minute is admitted,
    exactly at the end minute is admitted, exactly at the late threshold is
    on time.
    """

    def for_checkin(
        self,
        *,
        class_type: ClassType,
        day_type: DayType,
        now_minutes: int,
        entry: ScheduleEntry,
    ) -> AdmissionStrategy:
        if not can_attend_class(class_type, day_type):
            return WrongDayStrategy()
        if now_minutes < entry.early_open_minutes:
            return TooEarlyStrategy()
        if now_minutes > entry.end_minutes:
            return ClassEndedStrategy()
        if now_minutes > entry.late_threshold_at:
            return LateStrategy()
        return OnTimeStrategy()
