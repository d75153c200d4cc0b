from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from zoneinfo import ZoneInfo

from ..common.datetime_utils import minutes_since_midnight
from ..core.enums import DayType


@dataclass(frozen=True)
class ScheduleEntry:
    """Thực thể miền (domain): Lịch học cho một loại ngày."""

    start_time: time
    end_time: time
    late_threshold_minutes: int
    early_login_minutes: int

    @property
    def start_minutes(self) -> int:
        return minutes_since_midnight(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_since_midnight(self.end_time)

    @property
    def early_open_minutes(self) -> int:
        return self.start_minutes - self.early_login_minutes

    @property
    def late_threshold_at(self) -> int:
        """Last minute of the day (since midnight) still counted on time."""
        return self.start_minutes + self.late_threshold_minutes


@dataclass(frozen=True)
class ScheduleTable:
    weekend: ScheduleEntry
    weekday: ScheduleEntry

    def for_day_type(self, day_type: DayType) -> ScheduleEntry:
        if day_type == DayType.WEEKEND:
            return self.weekend
        return self.weekday


@dataclass(frozen=True)
class CheckInSettings:
    """Everything the eligibility rules and week numbering read.

    Built once at startup and injected; nothing here is re-read per request.
    """

    schedules: ScheduleTable
    tz: ZoneInfo
    epoch_date: date
