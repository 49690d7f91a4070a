from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.constants import STUDENT_DELETED_MESSAGE


def register(app: Flask, container: Container, *, prefix: str = "") -> None:
    @app.route(f"{prefix}/students", methods=["POST"], endpoint="create_student")
    def create_student():
        student = container.student_service.create_student(json_body())
        return jsonify(student.to_dict()), 201

    @app.route(f"{prefix}/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return jsonify([s.to_dict() for s in container.student_service.list_students()])

    @app.route(f"{prefix}/students/<student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: str):
        return jsonify(container.student_service.get_student(student_id).to_dict())

    @app.route(f"{prefix}/students/<student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: str):
        student = container.student_service.update_student(student_id, json_body())
        return jsonify(student.to_dict())

    @app.route(f"{prefix}/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: str):
        container.student_service.delete_student(student_id)
        return jsonify({"message": STUDENT_DELETED_MESSAGE})
