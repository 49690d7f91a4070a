from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from ..core.enums import StatusFilter
from .api import ApiError, AttendanceApiClient
from .demo_data import demo_attendance, demo_students
from .filters import AttendanceStats, attendance_stats, filter_attendance, filter_students
from .models import AttendanceRecord, Student

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection(str, Enum):
    STUDENTS = "students"
    ATTENDANCE = "attendance"


# Attendance records embed resolved students, so student writes stale both.
AFFECTED_BY = {
    Collection.STUDENTS: (Collection.STUDENTS, Collection.ATTENDANCE),
    Collection.ATTENDANCE: (Collection.ATTENDANCE,),
}


class AttendanceStore:
    """Client-side cache of both collections.

    Rule: every successful mutation invalidates the collections it affects
    and refetches them wholesale. Views are derived from the cached data
    without extra requests.
    """

    def __init__(self, api: AttendanceApiClient, *, use_demo_fallback: bool = False):
        self._api = api
        self._use_demo_fallback = use_demo_fallback
        self._students: Optional[list[Student]] = None
        self._attendance: Optional[list[AttendanceRecord]] = None
        self.is_demo = False

    @property
    def students(self) -> list[Student]:
        if self._students is None:
            self._refetch((Collection.STUDENTS,))
        return list(self._students or [])

    @property
    def attendance(self) -> list[AttendanceRecord]:
        if self._attendance is None:
            self._refetch((Collection.ATTENDANCE,))
        return list(self._attendance or [])

    def load(self) -> None:
        """Fetch both collections in parallel."""
        try:
            self._refetch((Collection.STUDENTS, Collection.ATTENDANCE))
            self.is_demo = False
        except ApiError:
            if not self._use_demo_fallback:
                raise
            logger.warning("Could not load data from %s, showing demo data", self._api.base_url)
            self._students = demo_students()
            self._attendance = demo_attendance()
            self.is_demo = True

    def invalidate(self, collection: Collection) -> None:
        for affected in AFFECTED_BY[collection]:
            if affected is Collection.STUDENTS:
                self._students = None
            else:
                self._attendance = None

    # Mutations
    def create_student(self, data: Mapping[str, Any]) -> Student:
        return self._mutate(Collection.STUDENTS, lambda: self._api.create_student(data))

    def update_student(self, student_id: str, data: Mapping[str, Any]) -> Student:
        return self._mutate(Collection.STUDENTS, lambda: self._api.update_student(student_id, data))

    def delete_student(self, student_id: str) -> str:
        return self._mutate(Collection.STUDENTS, lambda: self._api.delete_student(student_id))

    def mark_attendance(self, data: Mapping[str, Any]) -> AttendanceRecord:
        return self._mutate(Collection.ATTENDANCE, lambda: self._api.mark_attendance(data))

    def update_attendance(self, attendance_id: str, data: Mapping[str, Any]) -> AttendanceRecord:
        return self._mutate(Collection.ATTENDANCE, lambda: self._api.update_attendance(attendance_id, data))

    def delete_attendance(self, attendance_id: str) -> str:
        return self._mutate(Collection.ATTENDANCE, lambda: self._api.delete_attendance(attendance_id))

    # Views
    def attendance_view(self, query: str = "", status: StatusFilter | str = StatusFilter.ALL) -> list[AttendanceRecord]:
        return filter_attendance(self.attendance, self.students, query, status)

    def student_view(self, query: str = "") -> list[Student]:
        return filter_students(self.students, query)

    def stats(self) -> AttendanceStats:
        return attendance_stats(self.attendance)

    def _mutate(self, collection: Collection, call: Callable[[], T]) -> T:
        result = call()
        self.invalidate(collection)
        self._refetch(AFFECTED_BY[collection])
        return result

    def _refetch(self, collections: Iterable[Collection]) -> None:
        fetchers = {
            Collection.STUDENTS: self._api.list_students,
            Collection.ATTENDANCE: self._api.list_attendance,
        }
        wanted = list(collections)
        with ThreadPoolExecutor(max_workers=len(wanted)) as pool:
            futures = {c: pool.submit(fetchers[c]) for c in wanted}
            results = {c: f.result() for c, f in futures.items()}

        if Collection.STUDENTS in results:
            self._students = results[Collection.STUDENTS]
        if Collection.ATTENDANCE in results:
            self._attendance = results[Collection.ATTENDANCE]
