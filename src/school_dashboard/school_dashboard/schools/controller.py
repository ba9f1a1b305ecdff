from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import admin_required, login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/schools", methods=["GET"], endpoint="list_schools")
    @login_required
    @json_errors("Failed to fetch schools")
    def list_schools():
        return jsonify(to_json_list(container.school_service.list_all()))

    @app.route(f"{prefix}/schools/<int:school_id>", methods=["GET"], endpoint="get_school")
    @login_required
    @json_errors("Failed to fetch school")
    def get_school(school_id: int):
        return jsonify(to_json(container.school_service.get(school_id)))

    @app.route(f"{prefix}/schools", methods=["POST"], endpoint="create_school")
    @admin_required
    @json_errors("Failed to create school")
    def create_school():
        school = container.school_service.create(json_body())
        return jsonify(to_json(school)), 201

    @app.route(f"{prefix}/schools/<int:school_id>", methods=["PUT"], endpoint="update_school")
    @admin_required
    @json_errors("Failed to update school")
    def update_school(school_id: int):
        return jsonify(to_json(container.school_service.update(school_id, json_body())))

    @app.route(f"{prefix}/schools/<int:school_id>", methods=["DELETE"], endpoint="delete_school")
    @admin_required
    @json_errors("Failed to delete school")
    def delete_school(school_id: int):
        container.school_service.delete(school_id)
        return jsonify({"message": "School deleted successfully"})
