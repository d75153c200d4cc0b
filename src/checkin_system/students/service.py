from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..common.validators import require_class_type, require_non_empty, require_positive_int
from ..core.enums import ClassType
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository
from .roster_parser import ParsedStudent

logger = logging.getLogger(__name__)

CLASS_TYPE_LABELS = {
    ClassType.WEEKEND: "Weekend",
    ClassType.WEEKDAY: "Weekday",
    ClassType.BOTH: "Weekend & Weekday",
}


@dataclass
class ImportSummary:
    success: int = 0
    failed: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"success": self.success, "failed": self.failed, "skipped": self.skipped, "errors": self.errors}


def matches_search(student_name: str, term: str) -> bool:
    """Roster search rule.

    A term with a space matches full names starting with it; any term also
    matches when the first name starts with it. "AH" finds "Ahmad Noori" but
    not "Abdirahman Osman".
    """
    full_name = student_name.lower()
    if " " in term and full_name.startswith(term):
        return True
    return student_name.split(" ")[0].lower().startswith(term)


class RosterService:
    """Use case: manage and search the student roster."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def list_active(self) -> Sequence[Student]:
        return self._students.list_active()

    def search(self, term: str, *, limit: Optional[int] = None) -> list[Student]:
        students = [s for s in self._students.list_active() if s.active]
        needle = (term or "").strip().lower()
        if needle:
            students = [s for s in students if matches_search(s.name, needle)]
        return students[:limit] if limit else students

    def find_for_checkin(self, name: str) -> Student:
        name = require_non_empty(name, "Student name")
        matches = self.search(name)
        if not matches:
            raise NotFoundError(
                f'Student "{name}" not found. Please check the spelling or add them to the roster first.'
            )
        return matches[0]

    def _find_by_name(self, name: str) -> Optional[Student]:
        key = name.strip().lower()
        for s in self._students.list_active():
            if s.name.strip().lower() == key:
                return s
        return None

    def add_student(self, *, first_name: str, last_name: str, class_type: str) -> Student:
        if not (first_name or "").strip() or not (last_name or "").strip():
            raise ValidationError("First name and last name are required")
        ct = require_class_type(class_type)

        full_name = f"{first_name.strip()} {last_name.strip()}"
        duplicate = self._find_by_name(full_name)
        if duplicate:
            raise ConflictError(
                f'Student "{duplicate.name}" already exists in {CLASS_TYPE_LABELS[duplicate.class_type]} class. '
                "Cannot add duplicate names regardless of class type."
            )

        student_id = self._students.create(name=full_name, class_type=ct)
        logger.info("Added student %s (%s) as %s", full_name, student_id, ct.value)
        return Student(student_id=student_id, name=full_name, class_type=ct)

    def delete_student(self, student_id) -> None:
        if student_id in (None, ""):
            raise ValidationError("Student ID is required")
        if not self._students.deactivate(require_positive_int(student_id, "student ID")):
            raise NotFoundError("Student not found")
        logger.info("Deactivated student %s", student_id)

    def bulk_import(self, students: Sequence[ParsedStudent]) -> ImportSummary:
        summary = ImportSummary()
        existing = {s.name.strip().lower() for s in self._students.list_active()}
        imported: set[str] = set()

        for student in students:
            key = student.name.strip().lower()
            if key in imported:
                summary.skipped += 1
                summary.errors.append(f'Skipped "{student.name}": Duplicate in upload file')
                continue
            if key in existing:
                summary.skipped += 1
                summary.errors.append(f'Skipped "{student.name}": Already exists in the system')
                continue

            try:
                self._students.create(name=student.name.strip(), class_type=student.class_type)
            except Exception as e:
                logger.exception("Failed to import %s", student.name)
                summary.failed += 1
                summary.errors.append(f"Failed to import {student.name}: {e}")
                continue

            imported.add(key)
            existing.add(key)
            summary.success += 1

        logger.info(
            "Roster import finished: %d added, %d skipped, %d failed",
            summary.success,
            summary.skipped,
            summary.failed,
        )
        return summary
