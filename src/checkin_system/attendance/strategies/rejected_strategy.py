from __future__ import annotations

from ...core.enums import RejectionReason
from ...schedules.model import ScheduleEntry
from .base import AdmissionDecision, AdmissionStrategy


class WrongDayStrategy(AdmissionStrategy):
    """Student's class type does not meet on today's day type."""

    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        return AdmissionDecision(allowed=False, reason=RejectionReason.WRONG_DAY)


class TooEarlyStrategy(AdmissionStrategy):
    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        return AdmissionDecision(
            allowed=False,
            reason=RejectionReason.TOO_EARLY,
            minutes_until_open=entry.early_open_minutes - now_minutes,
        )


class ClassEndedStrategy(AdmissionStrategy):
    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        return AdmissionDecision(allowed=False, reason=RejectionReason.CLASS_ENDED)
