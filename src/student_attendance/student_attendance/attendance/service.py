from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..database.connection import to_object_id
from ..students.repository import StudentRepository
from .model import AttendanceChanges, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark and maintain attendance records.

    Two policies are opt-in and off by default:

    - ``strict_student_reference``: reject writes whose studentId does not
      refer to an existing student (NotFoundError).
    - ``unique_daily_attendance``: at most one record per (studentId, date)
      (ConflictError).
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        strict_student_reference: bool = False,
        unique_daily_attendance: bool = False,
    ):
        self._attendance = attendance
        self._students = students
        self._strict_student_reference = bool(strict_student_reference)
        self._unique_daily_attendance = bool(unique_daily_attendance)

    def mark_attendance(self, data: Mapping[str, Any]) -> AttendanceRecord:
        student_id = self._require_student_id(data.get("studentId"))
        on = parse_iso_date(require_non_empty(data.get("date"), "date"))
        status = require_choice(data.get("status"), "status", AttendanceStatus)

        self._check_student(student_id)
        self._check_unique_day(student_id, on)

        record = self._attendance.create(student_id=student_id, on=on, status=status)
        logger.info("Marked %s for student %s on %s", status.value, student_id, on)
        return record

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        return self._resolve(self._attendance.list_all())

    def list_attendance_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return self._resolve(self._attendance.list_by_student(student_id))

    def get_attendance(self, attendance_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return self._resolve([record])[0]

    def update_attendance(self, attendance_id: str, data: Mapping[str, Any]) -> AttendanceRecord:
        current = self._attendance.get_by_id(attendance_id)
        if not current:
            raise NotFoundError("Attendance record not found")

        changes = AttendanceChanges(
            student_id=self._require_student_id(data["studentId"]) if "studentId" in data else None,
            date=parse_iso_date(require_non_empty(data["date"], "date")) if "date" in data else None,
            status=require_choice(data["status"], "status", AttendanceStatus) if "status" in data else None,
        )
        if changes.is_empty():
            return current

        if changes.student_id is not None:
            self._check_student(changes.student_id)
        self._check_unique_day(
            changes.student_id or current.student_id,
            changes.date or current.date,
            exclude_id=current.attendance_id,
        )

        updated = self._attendance.update(attendance_id, changes)
        if not updated:
            raise NotFoundError("Attendance record not found")
        logger.info("Updated attendance %s", attendance_id)
        return updated

    def delete_attendance(self, attendance_id: str) -> None:
        """Delete a record. Missing ids are a successful no-op."""
        if self._attendance.delete_by_id(attendance_id):
            logger.info("Deleted attendance %s", attendance_id)
        else:
            logger.debug("Delete of missing attendance %s ignored", attendance_id)

    def _resolve(self, records: Sequence[AttendanceRecord]) -> list[AttendanceRecord]:
        """Populate student references; missing students become Dangling."""
        students = self._students.get_many([r.student_id for r in records])
        return [r.with_student(students.get(r.student_id)) for r in records]

    @staticmethod
    def _require_student_id(value: Any) -> str:
        student_id = require_non_empty(value, "studentId")
        if to_object_id(student_id) is None:
            raise ValidationError("studentId is not a valid identifier")
        return student_id

    def _check_student(self, student_id: str) -> None:
        if self._strict_student_reference and not self._students.get_by_id(student_id):
            raise NotFoundError("Student not found")

    def _check_unique_day(self, student_id: str, on, *, exclude_id: Optional[str] = None) -> None:
        if not self._unique_daily_attendance:
            return
        existing = [
            r for r in self._attendance.find_for_student_and_date(student_id, on) if r.attendance_id != exclude_id
        ]
        if existing:
            raise ConflictError(f"Attendance already marked for this student on {on.isoformat()}")
