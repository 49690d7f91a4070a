from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .stats.service import StatsService
from .students.mongo_student_repository import MongoStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MongoStudentRepository
    attendance_repo: MongoAttendanceRepository

    student_service: StudentService
    attendance_service: AttendanceService
    stats_service: StatsService


def build_container(
    *,
    db_config: dict,
    strict_student_reference: bool = False,
    unique_daily_attendance: bool = False,
    client_factory: Optional[Callable[..., Any]] = None,
) -> Container:
    config = DBConfig(
        uri=str(db_config.get("uri", "mongodb://localhost:27017")),
        database=str(db_config.get("database", "student_attendance")),
    )
    if client_factory is None:
        conn = DatabaseConnection.get_instance(config)
    else:
        conn = DatabaseConnection(config, client_factory=client_factory)

    students_repo = MongoStudentRepository(conn)
    attendance_repo = MongoAttendanceRepository(conn)

    student_service = StudentService(students_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        students_repo,
        strict_student_reference=strict_student_reference,
        unique_daily_attendance=unique_daily_attendance,
    )
    stats_service = StatsService(students_repo, attendance_repo)

    return Container(
        conn=conn,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        student_service=student_service,
        attendance_service=attendance_service,
        stats_service=stats_service,
    )
