from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..attendance.weeks import DEFAULT_EPOCH, week_date_range, week_number
from ..core.enums import DayType
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyReport:
    week_number: int
    start_date: date
    end_date: date
    summary: list[dict]
    weekday_rows: list[dict]
    weekend_rows: list[dict]

    @property
    def total_sessions(self) -> int:
        return len(self.weekday_rows) + len(self.weekend_rows)

    def to_dict(self) -> dict:
        return {
            "weekNumber": self.week_number,
            "startDate": self.start_date.strftime("%Y-%m-%d"),
            "endDate": self.end_date.strftime("%Y-%m-%d"),
            "totalSessions": self.total_sessions,
            "studentReports": self.summary,
            "weekdayAttendance": self.weekday_rows,
            "weekendAttendance": self.weekend_rows,
        }


@dataclass(frozen=True)
class StudentReport:
    student_id: int
    student_name: str
    summary: dict
    weekly_breakdown: dict[int, int]
    records: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "summary": self.summary,
            "weeklyBreakdown": self.weekly_breakdown,
            "records": self.records,
        }


def _row(r: AttendanceRecord) -> dict:
    return {
        "date": r.work_date.strftime("%Y-%m-%d"),
        "student_name": r.student_name,
        "check_in": r.check_in_time.strftime("%H:%M"),
        "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "Not checked out",
        "status": "Late" if r.is_late else "On Time",
        "late_minutes": r.late_minutes or 0,
        "week_number": r.week_number,
    }


class AttendanceReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        epoch_date: date = DEFAULT_EPOCH,
    ):
        self._attendance = attendance
        self._students = students
        self._epoch_date = epoch_date

    def weekly_report(self, number: int) -> WeeklyReport:
        week = week_date_range(number, self._epoch_date)
        records = self._attendance.list_by_week(week.week_number)
        return self._build(records, week.week_number, week.start_date, week.end_date)

    def date_range_report(self, *, start: date, end: date) -> WeeklyReport:
        if start > end:
            raise ValidationError("Start date must be on or before end date")
        records = self._attendance.list_by_date_range(start_date=start, end_date=end)
        number = records[0].week_number if records else week_number(start, self._epoch_date)
        return self._build(records, number, start, end)

    def _build(self, records: Sequence[AttendanceRecord], number: int, start: date, end: date) -> WeeklyReport:
        class_types = {s.student_id: s.class_type.value for s in self._students.list_active()}

        per_student: "OrderedDict[int, dict]" = OrderedDict()
        for r in records:
            s = per_student.get(r.student_id)
            if not s:
                s = {
                    "student_id": r.student_id,
                    "student_name": r.student_name,
                    "class_type": class_types.get(r.student_id, "unknown"),
                    "total_classes": 0,
                    "times_late": 0,
                    "total_late_minutes": 0,
                    "weekday_classes": 0,
                    "weekend_classes": 0,
                }
                per_student[r.student_id] = s
            s["total_classes"] += 1
            s["times_late"] += 1 if r.is_late else 0
            s["total_late_minutes"] += r.late_minutes or 0
            if r.class_type == DayType.WEEKDAY:
                s["weekday_classes"] += 1
            else:
                s["weekend_classes"] += 1

        summary = sorted(per_student.values(), key=lambda x: x["student_name"].lower())
        logger.info("Built attendance report for week %s (%s to %s): %d records", number, start, end, len(records))

        return WeeklyReport(
            week_number=number,
            start_date=start,
            end_date=end,
            summary=summary,
            weekday_rows=[_row(r) for r in records if r.class_type == DayType.WEEKDAY],
            weekend_rows=[_row(r) for r in records if r.class_type == DayType.WEEKEND],
        )

    def student_report(self, *, student_id: Optional[int] = None, student_name: Optional[str] = None) -> Optional[StudentReport]:
        """Statistics for one student, or None when they have no records."""
        if student_id is None and not (student_name or "").strip():
            raise ValidationError("Student ID or name is required")

        if student_id is not None:
            records = list(self._attendance.list_for_student(int(student_id)))
        else:
            records = list(self._attendance.list_by_student_name(student_name or ""))
        if not records:
            return None

        records.sort(key=lambda r: r.check_in_time, reverse=True)
        late = [r for r in records if r.is_late]
        total_late_minutes = sum(r.late_minutes or 0 for r in records)

        breakdown: dict[int, int] = {}
        for r in records:
            breakdown[r.week_number] = breakdown.get(r.week_number, 0) + 1

        summary = {
            "totalCheckins": len(records),
            "totalCheckouts": sum(1 for r in records if r.check_out_time),
            "lateCheckins": len(late),
            "onTimeCheckins": len(records) - len(late),
            "totalLateMinutes": total_late_minutes,
            "totalLateHours": round(total_late_minutes / 60, 2),
            "weekendCheckins": sum(1 for r in records if r.class_type == DayType.WEEKEND),
            "weekdayCheckins": sum(1 for r in records if r.class_type == DayType.WEEKDAY),
            "averageLateMinutes": round(total_late_minutes / len(late)) if late else 0,
        }

        return StudentReport(
            student_id=records[0].student_id,
            student_name=records[0].student_name,
            summary=summary,
            weekly_breakdown=breakdown,
            records=[r.to_dict() for r in records],
        )
