from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.time_format import format_clock_12h
from ..core.constants import DEFAULT_RECENT_LIMIT
from ..core.enums import CheckInAction
from ..core.exceptions import CheckInRejectedError, ValidationError
from ..students.model import Student
from ..students.service import RosterService
from .eligibility import EligibilityEvaluator, EvaluationResult
from .messages import describe_admission, describe_rejection
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .weeks import DEFAULT_EPOCH, week_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInOutcome:
    status: str
    message: str
    student: Student
    record: Optional[AttendanceRecord] = None
    evaluation: Optional[EvaluationResult] = None

    def to_dict(self) -> dict:
        data: dict = {"studentName": self.student.name, "studentId": self.student.student_id}
        if self.record:
            data.update(self.record.to_dict())
        if self.evaluation:
            data["evaluation"] = self.evaluation.to_dict()
        return {"status": self.status, "message": self.message, "data": data}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterService,
        evaluator: EligibilityEvaluator,
        *,
        epoch_date: date = DEFAULT_EPOCH,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._attendance = attendance
        self._roster = roster
        self._evaluator = evaluator
        self._epoch_date = epoch_date
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    def submit(self, name: str, action: str, *, now: datetime | None = None) -> CheckInOutcome:
        try:
            parsed = CheckInAction.parse(action)
        except ValueError:
            raise ValidationError("Invalid action. Use 'checkin' or 'checkout'")

        if parsed == CheckInAction.CHECK_IN:
            return self.check_in(name, now=now)
        return self.check_out(name, now=now)

    def check_in(self, name: str, *, now: datetime | None = None) -> CheckInOutcome:
        student = self._roster.find_for_checkin(name)

        # Resolve "now" once; eligibility, the duplicate check and the week
        # number must all see the same local time.
        local_now = self._evaluator.local_time(now or self._clock())
        today = local_now.date()

        existing = self._attendance.get_for_student_and_date(student.student_id, today)
        if existing:
            logger.info("Student %s already checked in on %s", student.student_id, today)
            return CheckInOutcome(
                status="warning",
                message=f"{student.name} has already checked in today at {format_clock_12h(existing.check_in_time.time())}",
                student=student,
                record=existing,
            )

        evaluation = self._evaluator.evaluate_local(student.class_type, local_now)
        if not evaluation.allowed:
            message = describe_rejection(evaluation, self._evaluator.schedules)
            logger.info(
                "Check-in rejected for student %s: %s at %s",
                student.student_id,
                evaluation.reason.value if evaluation.reason else "unknown",
                local_now.isoformat(),
            )
            raise CheckInRejectedError(message, evaluation)

        week = week_number(local_now, self._epoch_date)
        late_minutes = evaluation.minutes_late if evaluation.is_late else None
        attendance_id = self._attendance.create_checkin(
            student_id=student.student_id,
            student_name=student.name,
            class_type=evaluation.day_type,
            work_date=today,
            check_in_time=local_now.replace(tzinfo=None),
            week_number=week,
            is_late=evaluation.is_late,
            late_minutes=late_minutes,
        )
        logger.info(
            "Checked in student %s (attendance %s, week %s, %s)",
            student.student_id,
            attendance_id,
            week,
            evaluation.status.value if evaluation.status else "-",
        )

        record = AttendanceRecord(
            attendance_id=attendance_id,
            student_id=student.student_id,
            student_name=student.name,
            class_type=evaluation.day_type,
            work_date=today,
            check_in_time=local_now.replace(tzinfo=None),
            check_out_time=None,
            week_number=week,
            is_late=evaluation.is_late,
            late_minutes=late_minutes,
        )
        return CheckInOutcome(
            status="success",
            message=describe_admission(student.name, evaluation),
            student=student,
            record=record,
            evaluation=evaluation,
        )

    def check_out(self, name: str, *, now: datetime | None = None) -> CheckInOutcome:
        student = self._roster.find_for_checkin(name)
        local_now = self._evaluator.local_time(now or self._clock())

        existing = self._attendance.get_for_student_and_date(student.student_id, local_now.date())
        if not existing:
            raise ValidationError(f"{student.name} has not checked in today. Please check in first.")

        if existing.check_out_time is not None:
            return CheckInOutcome(
                status="warning",
                message=f"{student.name} has already checked out today at {format_clock_12h(existing.check_out_time.time())}",
                student=student,
                record=existing,
            )

        check_out_time = local_now.replace(tzinfo=None)
        if not self._attendance.update_checkout(attendance_id=existing.attendance_id, check_out_time=check_out_time):
            raise ValidationError("Check-out failed")
        logger.info("Checked out student %s (attendance %s)", student.student_id, existing.attendance_id)

        record = replace(existing, check_out_time=check_out_time)
        return CheckInOutcome(
            status="success",
            message=f"{student.name} checked out successfully",
            student=student,
            record=record,
        )

    def recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.list_recent(int(limit))
