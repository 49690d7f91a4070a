from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_utc
from ..core.enums import AttendanceStatus
from ..students.repository import StudentRepository


def attendance_rate(present: int, total: int) -> int:
    """Percentage of present records, rounded half-up; 0 when there are none."""
    if total <= 0:
        return 0
    return int(math.floor(present / total * 100 + 0.5))


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    today_records: int
    total_records: int
    present_count: int
    absent_count: int
    attendance_rate: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalStudents": self.total_students,
            "todayRecords": self.today_records,
            "totalRecords": self.total_records,
            "presentCount": self.present_count,
            "absentCount": self.absent_count,
            "attendanceRate": self.attendance_rate,
        }


class StatsService:
    """Read-only figures for the home page."""

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance

    def summary(self, today: Optional[date] = None) -> DashboardSummary:
        today = today or now_utc().date()
        counts = self._attendance.count_by_status()
        present = counts.get(AttendanceStatus.PRESENT, 0)
        absent = counts.get(AttendanceStatus.ABSENT, 0)
        total = present + absent
        return DashboardSummary(
            total_students=self._students.count(),
            today_records=self._attendance.count_by_date(today),
            total_records=total,
            present_count=present,
            absent_count=absent,
            attendance_rate=attendance_rate(present, total),
        )
