from __future__ import annotations

from ...core.enums import CheckInStatus
from ...schedules.model import ScheduleEntry
from .base import AdmissionDecision, AdmissionStrategy


class OnTimeStrategy(AdmissionStrategy):
    """Inside the window, at or before the late threshold."""

    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        return AdmissionDecision(allowed=True, status=CheckInStatus.ON_TIME, minutes_late=0)
