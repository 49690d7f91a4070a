from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_timestamp
from ..core.enums import ClassYear


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Student.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    student_id: str
    name: str
    roll_number: str
    department: str
    year: ClassYear
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "rollNumber": self.roll_number,
            "department": self.department,
            "year": self.year.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }


@dataclass(frozen=True)
class StudentChanges:
    """Validated partial update; ``None`` means "leave unchanged"."""

    name: Optional[str] = None
    roll_number: Optional[str] = None
    department: Optional[str] = None
    year: Optional[ClassYear] = None

    def is_empty(self) -> bool:
        return all(v is None for v in (self.name, self.roll_number, self.department, self.year))
