from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ClassYear
from .model import Student, StudentChanges


class StudentRepository(Protocol):
    """Giao diện repository cho Student.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        raise NotImplementedError

    def get_many(self, student_ids: Sequence[str]) -> dict[str, Student]:
        """Batch lookup used to resolve attendance references."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        roll_number: str,
        department: str,
        year: ClassYear,
    ) -> Student:
        raise NotImplementedError

    def update(self, student_id: str, changes: StudentChanges) -> Optional[Student]:
        """Apply changes; returns None when the student does not exist."""

        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
