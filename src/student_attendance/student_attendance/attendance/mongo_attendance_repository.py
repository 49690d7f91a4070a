from __future__ import annotations

from datetime import date
import logging
from typing import Any, Dict, Optional, Sequence

from pymongo import ReturnDocument

from ..common.datetime_utils import date_to_datetime, datetime_to_date, now_utc
from ..core.constants import ATTENDANCE_COLLECTION
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection, to_object_id
from .model import AttendanceChanges, AttendanceRecord, Unresolved
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _to_record(doc: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(doc["_id"]),
        student=Unresolved(str(doc["studentId"])),
        date=datetime_to_date(doc["date"]),
        status=AttendanceStatus(doc["status"]),
        created_at=doc["createdAt"],
        updated_at=doc.get("updatedAt"),
    )


def _valid_records(docs) -> list[AttendanceRecord]:
    """Convert documents, skipping ones with an unknown status or missing fields."""
    out: list[AttendanceRecord] = []
    for doc in docs:
        try:
            out.append(_to_record(doc))
        except (KeyError, ValueError) as e:
            logger.warning("Skipping malformed attendance document %s: %r", doc.get("_id"), e)
    return out


class MongoAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _collection(self):
        return self._conn.database()[ATTENDANCE_COLLECTION]

    def get_by_id(self, attendance_id: str) -> Optional[AttendanceRecord]:
        oid = to_object_id(attendance_id)
        if oid is None:
            return None
        doc = self._collection.find_one({"_id": oid})
        return _to_record(doc) if doc else None

    def list_all(self) -> Sequence[AttendanceRecord]:
        return _valid_records(self._collection.find())

    def list_by_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        oid = to_object_id(student_id)
        if oid is None:
            return []
        return _valid_records(self._collection.find({"studentId": oid}))

    def find_for_student_and_date(self, student_id: str, on: date) -> Sequence[AttendanceRecord]:
        oid = to_object_id(student_id)
        if oid is None:
            return []
        cursor = self._collection.find({"studentId": oid, "date": date_to_datetime(on)})
        return _valid_records(cursor)

    def count_by_date(self, on: date) -> int:
        return int(self._collection.count_documents({"date": date_to_datetime(on)}))

    def count_by_status(self) -> dict[AttendanceStatus, int]:
        return {status: int(self._collection.count_documents({"status": status.value})) for status in AttendanceStatus}

    def create(self, *, student_id: str, on: date, status: AttendanceStatus) -> AttendanceRecord:
        now = now_utc()
        doc = {
            "studentId": to_object_id(student_id),
            "date": date_to_datetime(on),
            "status": status.value,
            "createdAt": now,
            "updatedAt": now,
        }
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return _to_record(doc)

    def update(self, attendance_id: str, changes: AttendanceChanges) -> Optional[AttendanceRecord]:
        oid = to_object_id(attendance_id)
        if oid is None:
            return None

        fields: Dict[str, Any] = {"updatedAt": now_utc()}
        if changes.student_id is not None:
            fields["studentId"] = to_object_id(changes.student_id)
        if changes.date is not None:
            fields["date"] = date_to_datetime(changes.date)
        if changes.status is not None:
            fields["status"] = changes.status.value

        doc = self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        return _to_record(doc) if doc else None

    def delete_by_id(self, attendance_id: str) -> bool:
        oid = to_object_id(attendance_id)
        if oid is None:
            return False
        return self._collection.delete_one({"_id": oid}).deleted_count > 0
