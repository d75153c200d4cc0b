from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from checkin_system.attendance.eligibility import EligibilityEvaluator
from checkin_system.attendance.model import AttendanceRecord
from checkin_system.attendance.service import AttendanceService
from checkin_system.attendance.weeks import DEFAULT_EPOCH
from checkin_system.container import build_container
from checkin_system.core.enums import ClassType, DayType
from checkin_system.main import create_app
from checkin_system.reports.service import AttendanceReportService
from checkin_system.schedules.loader import build_schedule_table
from checkin_system.schedules.model import CheckInSettings
from checkin_system.students.model import Student
from checkin_system.students.service import RosterService

EASTERN = ZoneInfo("America/New_York")


class InMemoryStudents:
    def __init__(self):
        self._by_id: dict[int, Student] = {}
        self._id = 0

    def add(self, name: str, class_type: ClassType) -> Student:
        student_id = self.create(name=name, class_type=class_type)
        return self._by_id[student_id]

    def list_active(self):
        items = [s for s in self._by_id.values() if s.active]
        items.sort(key=lambda s: s.name)
        return items

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._by_id.get(student_id)

    def create(self, *, name: str, class_type: ClassType) -> int:
        self._id += 1
        self._by_id[self._id] = Student(student_id=self._id, name=name, class_type=class_type)
        return self._id

    def deactivate(self, student_id: int) -> bool:
        s = self._by_id.get(student_id)
        if not s or not s.active:
            return False
        self._by_id[student_id] = replace(s, active=False)
        return True


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_for_student_and_date(self, student_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.student_id == student_id and r.work_date == work_date:
                return r
        return None

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
        self._id += 1
        self._by_id[self._id] = AttendanceRecord(
            attendance_id=self._id,
            student_id=student_id,
            student_name=student_name,
            class_type=class_type,
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=None,
            week_number=week_number,
            is_late=is_late,
            late_minutes=late_minutes,
        )
        return self._id

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime) -> bool:
        r = self._by_id.get(attendance_id)
        if not r:
            return False
        self._by_id[attendance_id] = replace(r, check_out_time=check_out_time)
        return True

    def _ordered(self, items):
        return sorted(items, key=lambda r: (r.work_date, r.check_in_time))

    def list_by_week(self, week_number: int):
        return self._ordered(r for r in self._by_id.values() if r.week_number == week_number)

    def list_by_date_range(self, *, start_date: date, end_date: date):
        return self._ordered(r for r in self._by_id.values() if start_date <= r.work_date <= end_date)

    def list_for_student(self, student_id: int):
        items = [r for r in self._by_id.values() if r.student_id == student_id]
        return sorted(items, key=lambda r: r.check_in_time, reverse=True)

    def list_by_student_name(self, fragment: str):
        items = [r for r in self._by_id.values() if fragment.lower() in r.student_name.lower()]
        return sorted(items, key=lambda r: r.check_in_time, reverse=True)

    def list_recent(self, limit: int):
        items = sorted(self._by_id.values(), key=lambda r: r.check_in_time, reverse=True)
        return items[:limit]


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def at():
    """Build an aware Eastern wall-clock instant."""

    def _at(y: int, m: int, d: int, hh: int, mm: int = 0) -> datetime:
        return datetime(y, m, d, hh, mm, tzinfo=EASTERN)

    return _at


@pytest.fixture
def schedules():
    return build_schedule_table()


@pytest.fixture
def evaluator(schedules):
    return EligibilityEvaluator(schedules, EASTERN)


@pytest.fixture
def students_repo():
    repo = InMemoryStudents()
    repo.add("Ahmad Noori", ClassType.WEEKDAY)
    repo.add("Abdirahman Osman", ClassType.WEEKEND)
    repo.add("Fatima Hassan", ClassType.BOTH)
    return repo


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def roster_service(students_repo):
    return RosterService(students_repo)


@pytest.fixture
def clock():
    # Monday 2026-02-16 17:00 Eastern
    return FrozenClock(datetime(2026, 2, 16, 17, 0, tzinfo=EASTERN))


@pytest.fixture
def attendance_service(attendance_repo, roster_service, evaluator, clock):
    return AttendanceService(attendance_repo, roster_service, evaluator, epoch_date=DEFAULT_EPOCH, clock=clock)


@pytest.fixture
def report_service(attendance_repo, students_repo):
    return AttendanceReportService(attendance_repo, students_repo, epoch_date=DEFAULT_EPOCH)


@pytest.fixture
def app(schedules, students_repo, attendance_repo, clock):
    container = build_container(
        db_config={},
        checkin=CheckInSettings(schedules=schedules, tz=EASTERN, epoch_date=DEFAULT_EPOCH),
        admin_password="test-admin",
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        clock=clock,
    )
    return create_app(settings_module="checkin_system.settings.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/admin/login", json={"password": "test-admin"})
    assert resp.status_code == 200
    return client
