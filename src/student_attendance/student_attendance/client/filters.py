from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

from ..core.enums import AttendanceStatus, StatusFilter
from ..stats.service import attendance_rate
from .models import AttendanceRecord, Resolved, Student


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    present: int
    absent: int
    rate: int


def _matches(query: str, *values: str) -> bool:
    q = query.lower()
    return any(q in (v or "").lower() for v in values)


def resolve_student(record: AttendanceRecord, students_by_id: Mapping[str, Student]) -> Optional[Student]:
    """Student embedded in the record, else looked up among fetched students."""
    if isinstance(record.student, Resolved):
        return record.student.student
    return students_by_id.get(record.student_id)


def sort_by_date_desc(records: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
    # sorted() is stable, also with reverse=True
    return sorted(records, key=lambda r: r.date, reverse=True)


def filter_attendance(
    records: Sequence[AttendanceRecord],
    students: Sequence[Student] = (),
    query: str = "",
    status: Union[StatusFilter, str] = StatusFilter.ALL,
) -> list[AttendanceRecord]:
    status = StatusFilter(status)
    filtered = list(records)

    if query:
        by_id = {s.id: s for s in students}
        kept = []
        for record in filtered:
            student = resolve_student(record, by_id)
            if student and _matches(query, student.name, student.roll_number):
                kept.append(record)
        filtered = kept

    if status is not StatusFilter.ALL:
        wanted = AttendanceStatus(status.value)
        filtered = [r for r in filtered if r.status is wanted]

    return sort_by_date_desc(filtered)


def filter_students(students: Sequence[Student], query: str = "") -> list[Student]:
    if not query:
        return list(students)
    return [s for s in students if _matches(query, s.name, s.roll_number, s.department)]


def attendance_stats(records: Sequence[AttendanceRecord]) -> AttendanceStats:
    present = sum(1 for r in records if r.status is AttendanceStatus.PRESENT)
    absent = sum(1 for r in records if r.status is AttendanceStatus.ABSENT)
    total = len(records)
    return AttendanceStats(total=total, present=present, absent=absent, rate=attendance_rate(present, total))
