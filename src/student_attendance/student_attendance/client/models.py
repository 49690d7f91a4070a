from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    roll_number: str
    department: str
    year: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Student":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            roll_number=data.get("rollNumber") or "",
            department=data.get("department") or "",
            year=str(data.get("year") or ""),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass(frozen=True)
class Unresolved:
    student_id: str


@dataclass(frozen=True)
class Resolved:
    student: Student

    @property
    def student_id(self) -> str:
        return self.student.id


@dataclass(frozen=True)
class Dangling:
    student_id: str


StudentRef = Union[Unresolved, Resolved, Dangling]


def parse_student_ref(student_id: str, payload: Optional[Mapping[str, Any]]) -> StudentRef:
    kind = (payload or {}).get("kind", "unresolved")
    if kind == "resolved" and payload and payload.get("data"):
        return Resolved(Student.from_json(payload["data"]))
    if kind == "dangling" or kind == "resolved":
        return Dangling(student_id)
    return Unresolved(student_id)


@dataclass(frozen=True)
class AttendanceRecord:
    id: str
    student: StudentRef
    date: date
    status: AttendanceStatus
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def student_id(self) -> str:
        return self.student.student_id

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        student_id = str(data["studentId"])
        return cls(
            id=str(data["id"]),
            student=parse_student_ref(student_id, data.get("student")),
            date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )
