from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all, query_one
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT attendance_id, student_id, student_name, class_type, work_date,
           check_in_time, check_out_time, week_number, is_late, late_minutes
    FROM attendance_records
"""

_BY_DAY = "ORDER BY work_date ASC, check_in_time ASC"
_NEWEST_FIRST = "ORDER BY check_in_time DESC"


def _to_record(r: dict) -> AttendanceRecord:
    late_minutes = r.get("late_minutes")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        student_name=r["student_name"],
        class_type=DayType(r["class_type"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        week_number=int(r["week_number"]),
        is_late=bool(r["is_late"]),
        late_minutes=int(late_minutes) if late_minutes is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, where: str, order: str, params=()) -> Sequence[AttendanceRecord]:
        rows = query_all(self._conn_factory, f"{_SELECT} {where} {order}", params)
        return [_to_record(r) for r in rows]

    def get_for_student_and_date(self, student_id: int, work_date: date) -> Optional[AttendanceRecord]:
        r = query_one(
            self._conn_factory,
            f"{_SELECT} WHERE student_id=%s AND work_date=%s LIMIT 1",
            (int(student_id), work_date),
        )
        return _to_record(r) if r else None

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
        attendance_id, _ = execute(
            self._conn_factory,
            """
            INSERT INTO attendance_records(
                student_id, student_name, class_type, work_date,
                check_in_time, week_number, is_late, late_minutes
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                int(student_id),
                student_name,
                class_type.value,
                work_date,
                check_in_time,
                int(week_number),
                1 if is_late else 0,
                late_minutes,
            ),
        )
        return attendance_id

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime) -> bool:
        _, changed = execute(
            self._conn_factory,
            "UPDATE attendance_records SET check_out_time=%s WHERE attendance_id=%s",
            (check_out_time, int(attendance_id)),
        )
        return changed > 0

    def list_by_week(self, week_number: int) -> Sequence[AttendanceRecord]:
        return self._select("WHERE week_number=%s", _BY_DAY, (int(week_number),))

    def list_by_date_range(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return self._select("WHERE work_date BETWEEN %s AND %s", _BY_DAY, (start_date, end_date))

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._select("WHERE student_id=%s", _NEWEST_FIRST, (int(student_id),))

    def list_by_student_name(self, fragment: str) -> Sequence[AttendanceRecord]:
        return self._select("WHERE LOWER(student_name) LIKE %s", _NEWEST_FIRST, (f"%{fragment.strip().lower()}%",))

    def list_recent(self, limit: int) -> Sequence[AttendanceRecord]:
        return self._select("", f"{_NEWEST_FIRST} LIMIT %s", (int(limit),))
