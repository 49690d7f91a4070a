from __future__ import annotations

from bson import ObjectId

from src.student_attendance.student_attendance.common.logging_config import configure_logging


ANN = {"name": "Ann", "rollNumber": "R1", "department": "CS", "year": "1st Year"}


def _create_ann(client):
    resp = client.post("/api/students", json=ANN)
    assert resp.status_code == 201
    return resp.get_json()


def test_create_and_fetch_student(client):
    ann = _create_ann(client)

    resp = client.get(f"/api/students/{ann['id']}")

    assert resp.status_code == 200
    body = resp.get_json()
    assert {k: body[k] for k in ANN} == ANN
    assert body["createdAt"]


def test_student_errors_map_to_status_codes(client):
    _create_ann(client)

    assert client.post("/api/students", json={**ANN, "name": ""}).status_code == 400
    dup = client.post("/api/students", json=ANN)
    assert dup.status_code == 409
    assert "R1" in dup.get_json()["message"]
    assert client.get(f"/api/students/{ObjectId()}").status_code == 404
    assert client.get("/api/students/not-an-id").status_code == 404
    assert client.put(f"/api/students/{ObjectId()}", json={"name": "X"}).status_code == 404


def test_non_json_body_is_rejected(client):
    resp = client.post("/api/students", data="name=Ann", content_type="text/plain")
    assert resp.status_code == 400
    assert client.post("/api/students", json=["Ann"]).status_code == 400


def test_update_and_delete_student(client):
    ann = _create_ann(client)

    resp = client.put(f"/api/students/{ann['id']}", json={"year": "2nd Year"})
    assert resp.status_code == 200
    assert resp.get_json()["year"] == "2nd Year"
    assert resp.get_json()["name"] == "Ann"

    assert client.delete(f"/api/students/{ann['id']}").get_json() == {"message": "Student deleted"}
    # deleting again still succeeds
    assert client.delete(f"/api/students/{ann['id']}").status_code == 200
    assert client.get("/api/students").get_json() == []


def test_attendance_validation_and_not_found(client):
    assert client.post("/api/attendance", json={"date": "2024-01-01", "status": "present"}).status_code == 400
    assert client.put(f"/api/attendance/{ObjectId()}", json={"status": "absent"}).status_code == 404
    assert client.get(f"/api/attendance/{ObjectId()}").status_code == 404
    assert client.delete(f"/api/attendance/{ObjectId()}").get_json() == {"message": "Attendance deleted"}


def test_end_to_end_delete_student_keeps_attendance(client):
    ann = _create_ann(client)

    resp = client.post("/api/attendance", json={"studentId": ann["id"], "date": "2024-01-01", "status": "present"})
    assert resp.status_code == 201
    marked = resp.get_json()
    assert marked["student"] == {"kind": "unresolved"}

    records = client.get(f"/api/attendance/student/{ann['id']}").get_json()
    assert len(records) == 1
    assert records[0]["status"] == "present"
    assert records[0]["date"] == "2024-01-01"
    assert records[0]["student"]["kind"] == "resolved"
    assert records[0]["student"]["data"]["rollNumber"] == "R1"

    client.delete(f"/api/students/{ann['id']}")

    records = client.get(f"/api/attendance/student/{ann['id']}").get_json()
    assert len(records) == 1
    assert records[0]["id"] == marked["id"]
    assert records[0]["studentId"] == ann["id"]
    assert records[0]["student"] == {"kind": "dangling", "data": None}


def test_list_all_attendance_and_update(client):
    ann = _create_ann(client)
    created = client.post(
        "/api/attendance", json={"studentId": ann["id"], "date": "2024-01-01", "status": "present"}
    ).get_json()

    resp = client.put(f"/api/attendance/{created['id']}", json={"status": "absent"})
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "absent"

    listed = client.get("/api/attendance").get_json()
    assert [r["status"] for r in listed] == ["absent"]
    assert client.get(f"/api/attendance/{created['id']}").get_json()["student"]["kind"] == "resolved"


def test_stats_and_health(client):
    ann = _create_ann(client)
    for d, status in (("2024-01-01", "present"), ("2024-01-02", "present"), ("2024-01-03", "present"), ("2024-01-04", "absent")):
        client.post("/api/attendance", json={"studentId": ann["id"], "date": d, "status": status})

    stats = client.get("/api/stats").get_json()

    assert stats["totalStudents"] == 1
    assert stats["totalRecords"] == 4
    assert stats["presentCount"] == 3
    assert stats["absentCount"] == 1
    assert stats["attendanceRate"] == 75
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "message" in resp.get_json()


def test_malformed_date_is_rejected(client):
    ann = _create_ann(client)

    resp = client.post("/api/attendance", json={"studentId": ann["id"], "date": "2024-01-01 not a date", "status": "present"})

    assert resp.status_code == 400
    assert client.get("/api/attendance").get_json() == []


def test_service_logs_reach_configured_log_file(client, tmp_path):
    log_file = tmp_path / "app.log"
    configure_logging("INFO", str(log_file))
    try:
        _create_ann(client)
    finally:
        # closes the file handler
        configure_logging("WARNING")

    assert "Created student" in log_file.read_text(encoding="utf-8")
