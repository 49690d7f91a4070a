from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.constants import ATTENDANCE_DELETED_MESSAGE


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        record = container.attendance_service.mark_attendance(json_body())
        return jsonify(record.to_dict()), 201

    @app.route(f"{prefix}/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return jsonify([r.to_dict() for r in container.attendance_service.list_attendance()])

    @app.route(f"{prefix}/attendance/student/<student_id>", methods=["GET"], endpoint="list_attendance_by_student")
    def list_attendance_by_student(student_id: str):
        records = container.attendance_service.list_attendance_by_student(student_id)
        return jsonify([r.to_dict() for r in records])

    @app.route(f"{prefix}/attendance/<attendance_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(attendance_id: str):
        return jsonify(container.attendance_service.get_attendance(attendance_id).to_dict())

    @app.route(f"{prefix}/attendance/<attendance_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(attendance_id: str):
        record = container.attendance_service.update_attendance(attendance_id, json_body())
        return jsonify(record.to_dict())

    @app.route(f"{prefix}/attendance/<attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(attendance_id: str):
        container.attendance_service.delete_attendance(attendance_id)
        return jsonify({"message": ATTENDANCE_DELETED_MESSAGE})
