from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import DayType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, student_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        student_id: int,
        student_name: str,
        class_type: DayType,
        work_date: date,
        check_in_time: datetime,
        week_number: int,
        is_late: bool,
        late_minutes: Optional[int] = None,
    ) -> int:
        raise NotImplementedError

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime) -> bool:
        raise NotImplementedError

    def list_by_week(self, week_number: int) -> Sequence[AttendanceRecord]:
        """Ordered by date, then check-in time."""

        raise NotImplementedError

    def list_by_date_range(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Inclusive range, ordered by date, then check-in time."""

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        """Most recent first."""

        raise NotImplementedError

    def list_by_student_name(self, fragment: str) -> Sequence[AttendanceRecord]:
        """Case-insensitive substring match on the stored name, most recent first."""

        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
