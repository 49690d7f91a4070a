from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable

from pymongo import ASCENDING

from ..common.datetime_utils import date_to_datetime, now_utc
from ..core.constants import ATTENDANCE_COLLECTION, STUDENTS_COLLECTION
from ..core.enums import AttendanceStatus, ClassYear
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

DEMO_STUDENTS = (
    ("John Doe", "CS2024001", "Computer Science", ClassYear.SECOND),
    ("Jane Smith", "EE2024002", "Electrical Engineering", ClassYear.THIRD),
    ("Mike Johnson", "ME2024003", "Mechanical Engineering", ClassYear.FIRST),
)


def ensure_indexes(conn: DatabaseConnection) -> list[str]:
    """Create indexes (idempotent). Returns index names."""
    db = conn.database()
    names = [
        db[STUDENTS_COLLECTION].create_index([("rollNumber", ASCENDING)], unique=True, name="uniq_roll_number"),
        db[ATTENDANCE_COLLECTION].create_index(
            [("studentId", ASCENDING), ("date", ASCENDING)], name="student_date"
        ),
        db[ATTENDANCE_COLLECTION].create_index([("date", ASCENDING)], name="date"),
    ]
    logger.info("Indexes ready: %s", ", ".join(names))
    return names


def list_collections(conn: DatabaseConnection) -> list[str]:
    return sorted(conn.database().list_collection_names())


def seed_demo_data(conn: DatabaseConnection, students: Iterable[tuple] = DEMO_STUDENTS) -> int:
    """Insert demo students (skipping existing roll numbers) and today's attendance.

    Returns the number of students inserted.
    """

    db = conn.database()
    now = now_utc()
    today = now.date()
    inserted = 0

    for index, (name, roll_number, department, year) in enumerate(students):
        if db[STUDENTS_COLLECTION].find_one({"rollNumber": roll_number}):
            continue
        student_id = db[STUDENTS_COLLECTION].insert_one(
            {
                "name": name,
                "rollNumber": roll_number,
                "department": department,
                "year": year.value,
                "createdAt": now,
                "updatedAt": now,
            }
        ).inserted_id
        on = today - timedelta(days=1) if index == 2 else today
        status = AttendanceStatus.ABSENT if index == 1 else AttendanceStatus.PRESENT
        db[ATTENDANCE_COLLECTION].insert_one(
            {
                "studentId": student_id,
                "date": date_to_datetime(on),
                "status": status.value,
                "createdAt": now,
                "updatedAt": now,
            }
        )
        inserted += 1

    logger.info("Seeded %d demo students", inserted)
    return inserted
