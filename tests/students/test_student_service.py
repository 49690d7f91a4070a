from __future__ import annotations

import pytest
from bson import ObjectId

from src.student_attendance.student_attendance.core.enums import ClassYear
from src.student_attendance.student_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.student_attendance.student_attendance.students.service import StudentService
from tests.fakes import InMemoryStudents


ANN = {"name": "Ann", "rollNumber": "R1", "department": "CS", "year": "1st Year"}


@pytest.fixture
def service():
    return StudentService(InMemoryStudents())


def test_create_then_get_returns_supplied_fields(service):
    created = service.create_student(ANN)
    fetched = service.get_student(created.student_id)

    assert fetched == created
    assert fetched.name == "Ann"
    assert fetched.roll_number == "R1"
    assert fetched.department == "CS"
    assert fetched.year == ClassYear.FIRST
    assert fetched.created_at is not None


def test_create_strips_whitespace(service):
    created = service.create_student({**ANN, "name": "  Ann  "})
    assert created.name == "Ann"


@pytest.mark.parametrize("field", ["name", "rollNumber", "department", "year"])
def test_create_requires_every_field(service, field):
    data = dict(ANN)
    data.pop(field)
    with pytest.raises(ValidationError):
        service.create_student(data)


def test_create_rejects_blank_and_unknown_year(service):
    with pytest.raises(ValidationError):
        service.create_student({**ANN, "name": "   "})
    with pytest.raises(ValidationError):
        service.create_student({**ANN, "year": "5th Year"})


def test_duplicate_roll_number_conflicts_and_keeps_first(service):
    first = service.create_student(ANN)

    with pytest.raises(ConflictError):
        service.create_student({**ANN, "name": "Other"})

    assert service.get_student(first.student_id) == first
    assert len(service.list_students()) == 1


def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.get_student(str(ObjectId()))


def test_update_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_student(str(ObjectId()), {"name": "X"})


def test_update_changes_only_supplied_fields(service):
    created = service.create_student(ANN)

    updated = service.update_student(created.student_id, {"department": "Math", "createdAt": "ignored"})

    assert updated.department == "Math"
    assert updated.name == created.name
    assert updated.roll_number == created.roll_number
    assert updated.year == created.year
    assert updated.created_at == created.created_at


def test_update_to_other_students_roll_number_conflicts(service):
    service.create_student(ANN)
    bob = service.create_student({**ANN, "name": "Bob", "rollNumber": "R2"})

    with pytest.raises(ConflictError):
        service.update_student(bob.student_id, {"rollNumber": "R1"})


def test_update_keeping_own_roll_number_is_fine(service):
    ann = service.create_student(ANN)
    updated = service.update_student(ann.student_id, {"rollNumber": "R1", "name": "Annie"})
    assert updated.name == "Annie"


def test_update_rejects_blank_supplied_field(service):
    ann = service.create_student(ANN)
    with pytest.raises(ValidationError):
        service.update_student(ann.student_id, {"name": ""})


def test_delete_is_idempotent(service):
    ann = service.create_student(ANN)

    service.delete_student(ann.student_id)
    service.delete_student(ann.student_id)

    assert service.list_students() == []
