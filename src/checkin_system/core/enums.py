from __future__ import annotations

from enum import Enum


class ClassType(str, Enum):
    """Loại lớp học mà học viên đăng ký."""

    WEEKEND = "weekend"
    WEEKDAY = "weekday"
    BOTH = "both"


class DayType(str, Enum):
    """Loại ngày học, suy ra từ thứ trong tuần theo giờ địa phương."""

    WEEKEND = "weekend"
    WEEKDAY = "weekday"


class CheckInStatus(str, Enum):
    ON_TIME = "on_time"
    LATE = "late"


class RejectionReason(str, Enum):
    """Why a check-in was refused. Never raised, always returned."""

    WRONG_DAY = "wrong_day"
    TOO_EARLY = "too_early"
    CLASS_ENDED = "class_ended"


class CheckInAction(str, Enum):
    CHECK_IN = "checkin"
    CHECK_OUT = "checkout"

    @classmethod
    def parse(cls, value: str) -> "CheckInAction":
        normalized = (value or "").strip()
        if normalized in {"checkin", "IN"}:
            return cls.CHECK_IN
        if normalized in {"checkout", "OUT"}:
            return cls.CHECK_OUT
        raise ValueError(value)
