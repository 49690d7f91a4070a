from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh lưu trong CSDL."""

    PRESENT = "present"
    ABSENT = "absent"


class ClassYear(str, Enum):
    """Năm học của sinh viên (nhãn hiển thị cũng là giá trị lưu trữ)."""

    FIRST = "1st Year"
    SECOND = "2nd Year"
    THIRD = "3rd Year"
    FOURTH = "4th Year"


class StatusFilter(str, Enum):
    """Bộ lọc trạng thái ở phía client."""

    ALL = "all"
    PRESENT = "present"
    ABSENT = "absent"
