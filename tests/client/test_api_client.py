from __future__ import annotations

from datetime import date

import pytest
import requests

from src.student_attendance.student_attendance.client.api import ApiError, AttendanceApiClient
from src.student_attendance.student_attendance.client.models import Dangling, Resolved, Unresolved

STUDENT_JSON = {
    "id": "s1",
    "name": "Ann",
    "rollNumber": "R1",
    "department": "CS",
    "year": "1st Year",
    "createdAt": "2024-01-01T00:00:00+00:00",
    "updatedAt": None,
}


class FakeResponse:
    def __init__(self, status_code, body):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeSession:
    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs.get("json")))
        result = self._responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_parses_reference_variants():
    body = [
        {"id": "a", "studentId": "s1", "date": "2024-01-01", "status": "present", "student": {"kind": "resolved", "data": STUDENT_JSON}},
        {"id": "b", "studentId": "s2", "date": "2024-01-02", "status": "absent", "student": {"kind": "dangling", "data": None}},
        {"id": "c", "studentId": "s3", "date": "2024-01-03", "status": "absent", "student": {"kind": "unresolved"}},
    ]
    session = FakeSession([FakeResponse(200, body)])
    api = AttendanceApiClient("http://api.test/api/", session=session)

    a, b, c = api.list_attendance()

    assert session.calls == [("GET", "http://api.test/api/attendance", None)]
    assert isinstance(a.student, Resolved)
    assert a.student.student.roll_number == "R1"
    assert a.date == date(2024, 1, 1)
    assert b.student == Dangling("s2")
    assert c.student == Unresolved("s3")


def test_create_student_posts_payload():
    session = FakeSession([FakeResponse(201, STUDENT_JSON)])
    api = AttendanceApiClient("http://api.test/api", session=session)

    student = api.create_student({"name": "Ann"})

    assert student.id == "s1"
    assert session.calls == [("POST", "http://api.test/api/students", {"name": "Ann"})]


def test_error_response_raises_api_error_with_message():
    session = FakeSession([FakeResponse(409, {"message": "Roll number R1 already exists"})])
    api = AttendanceApiClient("http://api.test/api", session=session)

    with pytest.raises(ApiError) as exc:
        api.create_student({"name": "Ann"})

    assert exc.value.status == 409
    assert "R1" in str(exc.value)


def test_transport_error_raises_api_error():
    session = FakeSession([requests.ConnectionError("refused")])
    api = AttendanceApiClient("http://api.test/api", session=session)

    with pytest.raises(ApiError) as exc:
        api.list_students()

    assert exc.value.status is None


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("ATTENDANCE_API_URL", "http://env.test/api/")
    assert AttendanceApiClient(session=FakeSession([])).base_url == "http://env.test/api"
