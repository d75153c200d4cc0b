from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ClassType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, query_all, query_one
from .model import Student
from .repository import StudentRepository

_SELECT = "SELECT student_id, name, class_type, active, added_at FROM students"


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        class_type=ClassType(r["class_type"]),
        active=bool(r.get("active", True)),
        added_at=r.get("added_at"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Student]:
        rows = query_all(self._conn_factory, f"{_SELECT} WHERE active=1 ORDER BY name ASC")
        return [_to_student(r) for r in rows]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        r = query_one(self._conn_factory, f"{_SELECT} WHERE student_id=%s", (int(student_id),))
        return _to_student(r) if r else None

    def create(self, *, name: str, class_type: ClassType) -> int:
        student_id, _ = execute(
            self._conn_factory,
            "INSERT INTO students(name, class_type, active) VALUES(%s,%s,1)",
            (name, class_type.value),
        )
        return student_id

    def deactivate(self, student_id: int) -> bool:
        # Soft delete: attendance history keeps pointing at the row.
        _, changed = execute(
            self._conn_factory,
            "UPDATE students SET active=0 WHERE student_id=%s AND active=1",
            (int(student_id),),
        )
        return changed > 0
