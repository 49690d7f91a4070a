from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from ..common.datetime_utils import format_iso_date, format_timestamp
from ..core.enums import AttendanceStatus
from ..students.model import Student


@dataclass(frozen=True)
class Unresolved:
    """Tham chiếu chưa được populate: chỉ có id."""

    student_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "unresolved"}


@dataclass(frozen=True)
class Resolved:
    """Tham chiếu đã populate với Student đầy đủ."""

    student: Student

    @property
    def student_id(self) -> str:
        return self.student.student_id

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "resolved", "data": self.student.to_dict()}


@dataclass(frozen=True)
class Dangling:
    """Đã populate nhưng Student không còn tồn tại."""

    student_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "dangling", "data": None}


StudentRef = Union[Unresolved, Resolved, Dangling]


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi điểm danh."""

    attendance_id: str
    student: StudentRef
    date: date
    status: AttendanceStatus
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def student_id(self) -> str:
        return self.student.student_id

    def with_student(self, student: Optional[Student]) -> "AttendanceRecord":
        ref: StudentRef = Resolved(student) if student else Dangling(self.student_id)
        return replace(self, student=ref)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "studentId": self.student_id,
            "date": format_iso_date(self.date),
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
            "student": self.student.to_dict(),
        }


@dataclass(frozen=True)
class AttendanceChanges:
    """Validated partial update; ``None`` means "leave unchanged"."""

    student_id: Optional[str] = None
    date: Optional[date] = None
    status: Optional[AttendanceStatus] = None

    def is_empty(self) -> bool:
        return self.student_id is None and self.date is None and self.status is None
