"""Check-in eligibility and late-status rules.

Every function here is a pure function of its arguments: the caller supplies
the instant, the schedule table and the zone. Nothing reads the clock or the
environment, so the evaluator is safe to share across requests.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..common.datetime_utils import minutes_since_midnight
from ..core.enums import CheckInStatus, ClassType, DayType, RejectionReason
from ..schedules.model import ScheduleEntry, ScheduleTable
from .factory import AdmissionStrategyFactory


def resolve_local_time(instant: datetime, tz: ZoneInfo) -> datetime:
    """Wall-clock time in ``tz`` for an absolute instant, truncated to the second.

    Naive datetimes are taken as UTC instants.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(tz).replace(microsecond=0)


def classify_day_type(local_day: date) -> DayType:
    # Monday=0 ... Saturday=5, Sunday=6
    return DayType.WEEKEND if local_day.weekday() >= 5 else DayType.WEEKDAY


@dataclass(frozen=True)
class EvaluationResult:
    allowed: bool
    class_type: ClassType
    day_type: DayType
    local_time: datetime
    status: Optional[CheckInStatus] = None
    minutes_late: Optional[int] = None
    reason: Optional[RejectionReason] = None
    minutes_until_open: Optional[int] = None

    @property
    def is_late(self) -> bool:
        return self.status == CheckInStatus.LATE

    def to_dict(self) -> dict:
        out: dict = {
            "allowed": self.allowed,
            "classType": self.class_type.value,
            "dayType": self.day_type.value,
            "localTime": self.local_time.isoformat(),
        }
        if self.allowed:
            out["status"] = self.status.value if self.status else None
            out["minutesLate"] = self.minutes_late
        else:
            out["reason"] = self.reason.value if self.reason else None
            if self.minutes_until_open is not None:
                out["minutesUntilOpen"] = self.minutes_until_open
        return out


class EligibilityEvaluator:
    def __init__(
        self,
        schedules: ScheduleTable,
        tz: ZoneInfo,
        *,
        strategy_factory: AdmissionStrategyFactory | None = None,
    ):
        self._schedules = schedules
        self._tz = tz
        self._factory = strategy_factory or AdmissionStrategyFactory()

    @property
    def schedules(self) -> ScheduleTable:
        return self._schedules

    @property
    def tz(self) -> ZoneInfo:
        return self._tz

    def local_time(self, instant: datetime) -> datetime:
        return resolve_local_time(instant, self._tz)

    def schedule_for(self, day_type: DayType) -> ScheduleEntry:
        return self._schedules.for_day_type(day_type)

    def evaluate(self, class_type: ClassType, instant: datetime) -> EvaluationResult:
        return self.evaluate_local(class_type, self.local_time(instant))

    def evaluate_local(self, class_type: ClassType, local_time: datetime) -> EvaluationResult:
        """Evaluate an already-resolved local time.

        Lets a request resolve "now" once and reuse it for week numbering.
        """
        day_type = classify_day_type(local_time.date())
        entry = self.schedule_for(day_type)
        now_minutes = minutes_since_midnight(local_time)

        strategy = self._factory.for_checkin(
            class_type=class_type,
            day_type=day_type,
            now_minutes=now_minutes,
            entry=entry,
        )
        decision = strategy.decide(now_minutes=now_minutes, entry=entry)

        return EvaluationResult(
            allowed=decision.allowed,
            class_type=class_type,
            day_type=day_type,
            local_time=local_time,
            status=decision.status,
            minutes_late=decision.minutes_late,
            reason=decision.reason,
            minutes_until_open=decision.minutes_until_open,
        )
