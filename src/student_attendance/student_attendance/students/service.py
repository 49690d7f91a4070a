from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import require_choice, require_non_empty
from ..core.enums import ClassYear
from ..core.exceptions import ConflictError, NotFoundError
from .model import Student, StudentChanges
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the student roster."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def create_student(self, data: Mapping[str, Any]) -> Student:
        name = require_non_empty(data.get("name"), "name")
        roll_number = require_non_empty(data.get("rollNumber"), "rollNumber")
        department = require_non_empty(data.get("department"), "department")
        year = require_choice(data.get("year"), "year", ClassYear)

        if self._students.get_by_roll_number(roll_number):
            raise ConflictError(f"Roll number {roll_number} already exists")

        student = self._students.create(name=name, roll_number=roll_number, department=department, year=year)
        logger.info("Created student %s (%s)", student.student_id, student.roll_number)
        return student

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: str) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def update_student(self, student_id: str, data: Mapping[str, Any]) -> Student:
        current = self.get_student(student_id)
        changes = self._parse_changes(data)
        if changes.is_empty():
            return current

        if changes.roll_number is not None and changes.roll_number != current.roll_number:
            other = self._students.get_by_roll_number(changes.roll_number)
            if other and other.student_id != current.student_id:
                raise ConflictError(f"Roll number {changes.roll_number} already exists")

        updated = self._students.update(student_id, changes)
        if not updated:
            # deleted between the read and the write
            raise NotFoundError("Student not found")
        logger.info("Updated student %s", student_id)
        return updated

    def delete_student(self, student_id: str) -> None:
        """Delete a student. Missing ids are a successful no-op; records are kept."""
        if self._students.delete_by_id(student_id):
            logger.info("Deleted student %s", student_id)
        else:
            logger.debug("Delete of missing student %s ignored", student_id)

    @staticmethod
    def _parse_changes(data: Mapping[str, Any]) -> StudentChanges:
        return StudentChanges(
            name=require_non_empty(data["name"], "name") if "name" in data else None,
            roll_number=require_non_empty(data["rollNumber"], "rollNumber") if "rollNumber" in data else None,
            department=require_non_empty(data["department"], "department") if "department" in data else None,
            year=require_choice(data["year"], "year", ClassYear) if "year" in data else None,
        )
