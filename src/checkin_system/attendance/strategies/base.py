from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import CheckInStatus, RejectionReason
from ...schedules.model import ScheduleEntry


@dataclass(frozen=True)
class AdmissionDecision:
    allowed: bool
    status: Optional[CheckInStatus] = None
    minutes_late: Optional[int] = None
    reason: Optional[RejectionReason] = None
    minutes_until_open: Optional[int] = None


class AdmissionStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in admission."""

    @abstractmethod
    def decide(self, *, now_minutes: int, entry: ScheduleEntry) -> AdmissionDecision:
        raise NotImplementedError
