from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..common.datetime_utils import now_utc
from ..core.constants import STUDENTS_COLLECTION
from ..core.enums import ClassYear
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection, to_object_id
from .model import Student, StudentChanges
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def _to_student(doc: Dict[str, Any]) -> Student:
    return Student(
        student_id=str(doc["_id"]),
        name=doc["name"],
        roll_number=doc["rollNumber"],
        department=doc.get("department") or "",
        year=ClassYear(doc["year"]),
        created_at=doc["createdAt"],
        updated_at=doc.get("updatedAt"),
    )


def _valid_students(docs) -> list[Student]:
    """Convert documents, skipping ones whose year is outside ClassYear."""
    out: list[Student] = []
    for doc in docs:
        try:
            out.append(_to_student(doc))
        except (KeyError, ValueError) as e:
            logger.warning("Skipping malformed student document %s: %r", doc.get("_id"), e)
    return out


def _duplicate_roll_number(roll_number: str) -> ConflictError:
    return ConflictError(f"Roll number {roll_number} already exists")


class MongoStudentRepository(StudentRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _collection(self):
        return self._conn.database()[STUDENTS_COLLECTION]

    def get_by_id(self, student_id: str) -> Optional[Student]:
        oid = to_object_id(student_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return _to_student(doc) if doc else None

    def get_by_roll_number(self, roll_number: str) -> Optional[Student]:
        doc = self._collection.find_one({"rollNumber": roll_number})
        return _to_student(doc) if doc else None

    def get_many(self, student_ids: Sequence[str]) -> dict[str, Student]:
        oids = [oid for oid in (to_object_id(s) for s in set(student_ids)) if oid is not None]
        if not oids:
            return {}
        return {s.student_id: s for s in _valid_students(self._collection.find({"_id": {"$in": oids}}))}

    def list_all(self) -> Sequence[Student]:
        # natural order == insertion order for a plain collection
        return _valid_students(self._collection.find())

    def count(self) -> int:
        return int(self._collection.count_documents({}))

    def create(self, *, name: str, roll_number: str, department: str, year: ClassYear) -> Student:
        now = now_utc()
        doc = {
            "name": name,
            "rollNumber": roll_number,
            "department": department,
            "year": year.value,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            result = self._collection.insert_one(doc)
        except DuplicateKeyError:
            raise _duplicate_roll_number(roll_number)
        doc["_id"] = result.inserted_id
        return _to_student(doc)

    def update(self, student_id: str, changes: StudentChanges) -> Optional[Student]:
        oid = to_object_id(student_id)
        if oid is None:
            return None

        fields: Dict[str, Any] = {"updatedAt": now_utc()}
        if changes.name is not None:
            fields["name"] = changes.name
        if changes.roll_number is not None:
            fields["rollNumber"] = changes.roll_number
        if changes.department is not None:
            fields["department"] = changes.department
        if changes.year is not None:
            fields["year"] = changes.year.value

        try:
            doc = self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise _duplicate_roll_number(changes.roll_number or "")
        return _to_student(doc) if doc else None

    def delete_by_id(self, student_id: str) -> bool:
        oid = to_object_id(student_id)
        if oid is None:
            return False
        return self._collection.delete_one({"_id": oid}).deleted_count > 0
