from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import admin_required, login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/students", methods=["GET"], endpoint="list_students")
    @login_required
    @json_errors("Failed to fetch students")
    def list_students():
        return jsonify(to_json_list(container.student_service.list_all()))

    @app.route(f"{prefix}/schools/<int:school_id>/students", methods=["GET"], endpoint="list_school_students")
    @login_required
    @json_errors("Failed to fetch students")
    def list_school_students(school_id: int):
        return jsonify(to_json_list(container.student_service.list_by_school(school_id)))

    @app.route(f"{prefix}/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    @login_required
    @json_errors("Failed to fetch student")
    def get_student(student_id: int):
        return jsonify(to_json(container.student_service.get(student_id)))

    @app.route(f"{prefix}/students", methods=["POST"], endpoint="create_student")
    @login_required
    @json_errors("Failed to create student")
    def create_student():
        student = container.student_service.create(json_body())
        return jsonify(to_json(student)), 201

    @app.route(f"{prefix}/students/<int:student_id>", methods=["PUT"], endpoint="update_student")
    @login_required
    @json_errors("Failed to update student")
    def update_student(student_id: int):
        return jsonify(to_json(container.student_service.update(student_id, json_body())))

    @app.route(f"{prefix}/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    @json_errors("Failed to delete student")
    def delete_student(student_id: int):
        container.student_service.delete(student_id)
        return jsonify({"message": "Student deleted successfully"})
