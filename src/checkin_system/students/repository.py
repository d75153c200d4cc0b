from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ClassType
from .model import Student


class StudentRepository(Protocol):
    """Giao diện repository cho Student.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def list_active(self) -> Sequence[Student]:
        """Active students ordered by name."""

        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, *, name: str, class_type: ClassType) -> int:
        raise NotImplementedError

    def deactivate(self, student_id: int) -> bool:
        raise NotImplementedError
