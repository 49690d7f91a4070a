from __future__ import annotations

import uuid

import mongomock
import pytest

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.database.bootstrap import ensure_indexes
from src.student_attendance.student_attendance.database.connection import DBConfig, DatabaseConnection


@pytest.fixture
def mongo_conn():
    conn = DatabaseConnection(
        DBConfig(uri="mongodb://localhost:27017", database=f"test_{uuid.uuid4().hex}"),
        client_factory=mongomock.MongoClient,
    )
    ensure_indexes(conn)
    yield conn
    conn.close()


@pytest.fixture
def container():
    return build_container(
        db_config={"uri": "mongodb://localhost:27017", "database": f"test_{uuid.uuid4().hex}"},
        client_factory=mongomock.MongoClient,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.student_attendance.student_attendance.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
