from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.eligibility import EligibilityEvaluator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AdminAuthService
from .common.datetime_utils import now_utc
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import AttendanceReportService
from .schedules.model import CheckInSettings
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import RosterService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    checkin: CheckInSettings

    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    evaluator: EligibilityEvaluator
    roster_service: RosterService
    attendance_service: AttendanceService
    report_service: AttendanceReportService
    admin_auth_service: AdminAuthService


def build_container(
    *,
    db_config: dict,
    checkin: CheckInSettings,
    admin_password: Optional[str] = None,
    students_repo: Optional[StudentRepository] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
    clock: Callable[[], datetime] = now_utc,
) -> Container:
    """Wire repositories and services.

    Repositories default to MySQL; tests pass in-memory ones instead.
    """
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    students_repo = students_repo or MySQLStudentRepository(conn)
    attendance_repo = attendance_repo or MySQLAttendanceRepository(conn)

    evaluator = EligibilityEvaluator(checkin.schedules, checkin.tz)
    roster_service = RosterService(students_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        roster_service,
        evaluator,
        epoch_date=checkin.epoch_date,
        clock=clock,
    )
    report_service = AttendanceReportService(attendance_repo, students_repo, epoch_date=checkin.epoch_date)

    return Container(
        conn=conn,
        checkin=checkin,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        evaluator=evaluator,
        roster_service=roster_service,
        attendance_service=attendance_service,
        report_service=report_service,
        admin_auth_service=AdminAuthService.from_plain_password(admin_password),
    )
