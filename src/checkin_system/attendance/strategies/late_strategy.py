from __future__ import annotations

from ...core.enums import CheckInStatus
from ...schedules.model import ScheduleEntry
from .base import AdmissionDecision, AdmissionStrategy


class LateStrategy(AdmissionStrategy):
    """Admitted past the late threshold; lateness counts from class start."""

    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        return AdmissionDecision(
            allowed=True,
            status=CheckInStatus.LATE,
            minutes_late=now_minutes - entry.start_minutes,
        )
