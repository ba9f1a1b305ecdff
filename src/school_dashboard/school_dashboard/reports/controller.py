from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.guards import admin_required, login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..common.validators import field_error
from ..container import Container
from ..core.enums import ReportType


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/reports", methods=["GET"], endpoint="list_reports")
    @login_required
    @json_errors("Failed to fetch reports")
    def list_reports():
        type_s = request.args.get("type")
        if type_s:
            try:
                report_type = ReportType(type_s)
            except ValueError:
                raise field_error("type", "Unknown report type", "enum")
            return jsonify(to_json_list(container.report_service.list_by_type(report_type)))
        return jsonify(to_json_list(container.report_service.list_all()))

    @app.route(f"{prefix}/schools/<int:school_id>/reports", methods=["GET"], endpoint="list_school_reports")
    @login_required
    @json_errors("Failed to fetch reports")
    def list_school_reports(school_id: int):
        return jsonify(to_json_list(container.report_service.list_by_school(school_id)))

    @app.route(f"{prefix}/reports/<int:report_id>", methods=["GET"], endpoint="get_report")
    @login_required
    @json_errors("Failed to fetch report")
    def get_report(report_id: int):
        return jsonify(to_json(container.report_service.get(report_id)))

    @app.route(f"{prefix}/reports", methods=["POST"], endpoint="create_report")
    @login_required
    @json_errors("Failed to create report")
    def create_report():
        report = container.report_service.create(json_body())
        return jsonify(to_json(report)), 201

    @app.route(f"{prefix}/reports/<int:report_id>", methods=["PUT"], endpoint="update_report")
    @login_required
    @json_errors("Failed to update report")
    def update_report(report_id: int):
        return jsonify(to_json(container.report_service.update(report_id, json_body())))

    @app.route(f"{prefix}/reports/<int:report_id>", methods=["DELETE"], endpoint="delete_report")
    @admin_required
    @json_errors("Failed to delete report")
    def delete_report(report_id: int):
        container.report_service.delete(report_id)
        return jsonify({"message": "Report deleted successfully"})
