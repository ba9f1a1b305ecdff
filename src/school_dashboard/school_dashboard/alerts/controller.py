from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/alerts", methods=["GET"], endpoint="list_alerts")
    @login_required
    @json_errors("Failed to fetch alerts")
    def list_alerts():
        return jsonify(to_json_list(container.alert_service.list_all()))

    @app.route(f"{prefix}/alerts/active", methods=["GET"], endpoint="list_active_alerts")
    @login_required
    @json_errors("Failed to fetch active alerts")
    def list_active_alerts():
        return jsonify(to_json_list(container.alert_service.list_active()))

    @app.route(f"{prefix}/schools/<int:school_id>/alerts", methods=["GET"], endpoint="list_school_alerts")
    @login_required
    @json_errors("Failed to fetch alerts")
    def list_school_alerts(school_id: int):
        return jsonify(to_json_list(container.alert_service.list_by_school(school_id)))

    @app.route(f"{prefix}/alerts/<int:alert_id>", methods=["GET"], endpoint="get_alert")
    @login_required
    @json_errors("Failed to fetch alert")
    def get_alert(alert_id: int):
        return jsonify(to_json(container.alert_service.get(alert_id)))

    @app.route(f"{prefix}/alerts", methods=["POST"], endpoint="create_alert")
    @login_required
    @json_errors("Failed to create alert")
    def create_alert():
        alert = container.alert_service.create(json_body())
        return jsonify(to_json(alert)), 201

    @app.route(f"{prefix}/alerts/<int:alert_id>", methods=["PUT"], endpoint="update_alert")
    @login_required
    @json_errors("Failed to update alert")
    def update_alert(alert_id: int):
        return jsonify(to_json(container.alert_service.update(alert_id, json_body())))
