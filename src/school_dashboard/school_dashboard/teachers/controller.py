from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import admin_required, login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/teachers", methods=["GET"], endpoint="list_teachers")
    @login_required
    @json_errors("Failed to fetch teachers")
    def list_teachers():
        return jsonify(to_json_list(container.teacher_service.list_all()))

    @app.route(f"{prefix}/schools/<int:school_id>/teachers", methods=["GET"], endpoint="list_school_teachers")
    @login_required
    @json_errors("Failed to fetch teachers")
    def list_school_teachers(school_id: int):
        return jsonify(to_json_list(container.teacher_service.list_by_school(school_id)))

    @app.route(f"{prefix}/teachers/<int:teacher_id>", methods=["GET"], endpoint="get_teacher")
    @login_required
    @json_errors("Failed to fetch teacher")
    def get_teacher(teacher_id: int):
        return jsonify(to_json(container.teacher_service.get(teacher_id)))

    @app.route(f"{prefix}/teachers", methods=["POST"], endpoint="create_teacher")
    @admin_required
    @json_errors("Failed to create teacher")
    def create_teacher():
        teacher = container.teacher_service.create(json_body())
        return jsonify(to_json(teacher)), 201

    @app.route(f"{prefix}/teachers/<int:teacher_id>", methods=["PUT"], endpoint="update_teacher")
    @admin_required
    @json_errors("Failed to update teacher")
    def update_teacher(teacher_id: int):
        return jsonify(to_json(container.teacher_service.update(teacher_id, json_body())))

    @app.route(f"{prefix}/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    @admin_required
    @json_errors("Failed to delete teacher")
    def delete_teacher(teacher_id: int):
        container.teacher_service.delete(teacher_id)
        return jsonify({"message": "Teacher deleted successfully"})
