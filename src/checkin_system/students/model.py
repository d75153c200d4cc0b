from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ClassType


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học viên trong danh sách lớp."""

    student_id: int
    name: str
    class_type: ClassType
    active: bool = True
    added_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {"id": self.student_id, "name": self.name, "classType": self.class_type.value}
