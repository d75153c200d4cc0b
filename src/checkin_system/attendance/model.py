from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayType


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh.

    Times are organization-local wall-clock times; ``class_type`` is the day
    type of the session attended, not the student's enrollment.
    """

    attendance_id: int
    student_id: int
    student_name: str
    class_type: DayType
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    week_number: int
    is_late: bool
    late_minutes: Optional[int] = None

    @property
    def status(self) -> str:
        return "late" if self.is_late else "present"

    def to_dict(self) -> dict:
        return {
            "attendanceId": self.attendance_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "classType": self.class_type.value,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "checkInTime": self.check_in_time.isoformat(),
            "checkOutTime": self.check_out_time.isoformat() if self.check_out_time else None,
            "weekNumber": self.week_number,
            "isLate": self.is_late,
            "lateMinutes": self.late_minutes,
            "status": self.status,
        }
