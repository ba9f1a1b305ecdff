from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.guards import login_required
from ..common.http import json_body, json_errors, query_int
from ..common.serialization import to_json, to_json_list
from ..common.validators import field_error
from ..container import Container
from ..core.constants import DEFAULT_RECENT_ACTIVITIES_LIMIT
from ..core.enums import ActivityType


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/activities", methods=["GET"], endpoint="list_activities")
    @login_required
    @json_errors("Failed to fetch activities")
    def list_activities():
        type_s = request.args.get("type")
        if type_s:
            try:
                activity_type = ActivityType(type_s)
            except ValueError:
                raise field_error("type", "Unknown activity type", "enum")
            return jsonify(to_json_list(container.activity_service.list_by_type(activity_type)))
        return jsonify(to_json_list(container.activity_service.list_all()))

    @app.route(f"{prefix}/activities/recent", methods=["GET"], endpoint="list_recent_activities")
    @login_required
    @json_errors("Failed to fetch recent activities")
    def list_recent_activities():
        limit = query_int("limit", DEFAULT_RECENT_ACTIVITIES_LIMIT)
        return jsonify(to_json_list(container.activity_service.list_recent(limit)))

    @app.route(f"{prefix}/schools/<int:school_id>/activities", methods=["GET"], endpoint="list_school_activities")
    @login_required
    @json_errors("Failed to fetch school activities")
    def list_school_activities(school_id: int):
        return jsonify(to_json_list(container.activity_service.list_by_school(school_id)))

    @app.route(f"{prefix}/activities/<int:activity_id>", methods=["GET"], endpoint="get_activity")
    @login_required
    @json_errors("Failed to fetch activity")
    def get_activity(activity_id: int):
        return jsonify(to_json(container.activity_service.get(activity_id)))

    @app.route(f"{prefix}/activities", methods=["POST"], endpoint="create_activity")
    @login_required
    @json_errors("Failed to create activity")
    def create_activity():
        activity = container.activity_service.create(json_body())
        return jsonify(to_json(activity)), 201

    @app.route(f"{prefix}/activities/<int:activity_id>", methods=["PUT"], endpoint="update_activity")
    @login_required
    @json_errors("Failed to update activity")
    def update_activity(activity_id: int):
        return jsonify(to_json(container.activity_service.update(activity_id, json_body())))
