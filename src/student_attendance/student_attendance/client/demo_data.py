"""Placeholder data shown when the first fetch fails (offline demo)."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..core.enums import AttendanceStatus
from .models import AttendanceRecord, Student, Unresolved


def demo_students() -> list[Student]:
    return [
        Student(id="1", name="John Doe", roll_number="CS2024001", department="Computer Science", year="2nd Year"),
        Student(id="2", name="Jane Smith", roll_number="EE2024002", department="Electrical Engineering", year="3rd Year"),
        Student(id="3", name="Mike Johnson", roll_number="ME2024003", department="Mechanical Engineering", year="1st Year"),
    ]


def demo_attendance(today: Optional[date] = None) -> list[AttendanceRecord]:
    today = today or date.today()
    return [
        AttendanceRecord(id="1", student=Unresolved("1"), date=today, status=AttendanceStatus.PRESENT),
        AttendanceRecord(id="2", student=Unresolved("2"), date=today, status=AttendanceStatus.ABSENT),
        AttendanceRecord(
            id="3", student=Unresolved("3"), date=today - timedelta(days=1), status=AttendanceStatus.PRESENT
        ),
    ]
