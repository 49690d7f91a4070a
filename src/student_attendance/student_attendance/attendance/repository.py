from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceChanges, AttendanceRecord


class AttendanceRepository(Protocol):
    """Records returned here carry ``Unresolved`` student references.

    Resolution (populate) is done by the service with the student repository.
    """

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_for_student_and_date(self, student_id: str, on: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_by_date(self, on: date) -> int:
        raise NotImplementedError

    def count_by_status(self) -> dict[AttendanceStatus, int]:
        raise NotImplementedError

    def create(self, *, student_id: str, on: date, status: AttendanceStatus) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, attendance_id: str, changes: AttendanceChanges) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, attendance_id: str) -> bool:
        raise NotImplementedError
