from datetime import date

import pytest

from src.student_attendance.student_attendance.core.enums import AttendanceStatus, ClassYear
from src.student_attendance.student_attendance.stats.service import StatsService, attendance_rate
from tests.fakes import InMemoryAttendance, InMemoryStudents


@pytest.mark.parametrize(
    "present,total,expected",
    [(0, 0, 0), (3, 4, 75), (1, 3, 33), (2, 3, 67), (1, 8, 13), (4, 4, 100)],
)
def test_attendance_rate(present, total, expected):
    assert attendance_rate(present, total) == expected


def test_summary_counts_today_and_rate():
    students, attendance = InMemoryStudents(), InMemoryAttendance()
    ann = students.create(name="Ann", roll_number="R1", department="CS", year=ClassYear.FIRST)
    today = date(2024, 5, 2)
    attendance.create(student_id=ann.student_id, on=today, status=AttendanceStatus.PRESENT)
    attendance.create(student_id=ann.student_id, on=date(2024, 5, 1), status=AttendanceStatus.ABSENT)

    summary = StatsService(students, attendance).summary(today)

    assert summary.total_students == 1
    assert summary.today_records == 1
    assert summary.total_records == 2
    assert summary.attendance_rate == 50
    assert summary.to_dict()["attendanceRate"] == 50
