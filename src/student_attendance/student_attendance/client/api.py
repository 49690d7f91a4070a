from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..core.constants import DEFAULT_API_URL
from .models import AttendanceRecord, Student

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for non-2xx responses and transport failures."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class AttendanceApiClient:
    """Thin wrapper over the REST endpoints."""

    def __init__(self, base_url: Optional[str] = None, *, session=None, timeout: float = 10.0):
        self._base_url = (base_url or os.getenv("ATTENDANCE_API_URL") or DEFAULT_API_URL).rstrip("/")
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(self, method: str, path: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = self._session.request(
                method,
                url,
                json=dict(payload) if payload is not None else None,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(f"Could not reach API at {self._base_url}: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not 200 <= resp.status_code < 300:
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(message or f"HTTP {resp.status_code}", status=resp.status_code)
        return body

    # Students
    def list_students(self) -> List[Student]:
        return [Student.from_json(s) for s in self._request("GET", "/students")]

    def get_student(self, student_id: str) -> Student:
        return Student.from_json(self._request("GET", f"/students/{student_id}"))

    def create_student(self, data: Mapping[str, Any]) -> Student:
        return Student.from_json(self._request("POST", "/students", data))

    def update_student(self, student_id: str, data: Mapping[str, Any]) -> Student:
        return Student.from_json(self._request("PUT", f"/students/{student_id}", data))

    def delete_student(self, student_id: str) -> str:
        return self._request("DELETE", f"/students/{student_id}")["message"]

    # Attendance
    def list_attendance(self) -> List[AttendanceRecord]:
        return [AttendanceRecord.from_json(r) for r in self._request("GET", "/attendance")]

    def get_attendance(self, attendance_id: str) -> AttendanceRecord:
        return AttendanceRecord.from_json(self._request("GET", f"/attendance/{attendance_id}"))

    def list_attendance_by_student(self, student_id: str) -> List[AttendanceRecord]:
        return [AttendanceRecord.from_json(r) for r in self._request("GET", f"/attendance/student/{student_id}")]

    def mark_attendance(self, data: Mapping[str, Any]) -> AttendanceRecord:
        return AttendanceRecord.from_json(self._request("POST", "/attendance", data))

    def update_attendance(self, attendance_id: str, data: Mapping[str, Any]) -> AttendanceRecord:
        return AttendanceRecord.from_json(self._request("PUT", f"/attendance/{attendance_id}", data))

    def delete_attendance(self, attendance_id: str) -> str:
        return self._request("DELETE", f"/attendance/{attendance_id}")["message"]

    def stats(self) -> Dict[str, int]:
        return dict(self._request("GET", "/stats"))
