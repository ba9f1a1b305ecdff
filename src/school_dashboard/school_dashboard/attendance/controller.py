from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.guards import login_required
from ..common.http import json_body, json_errors, query_int
from ..common.serialization import to_json, to_json_list
from ..common.validators import field_error
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    def _parse_day(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            # Accept full timestamps too; only the calendar day matters
            try:
                return datetime.fromisoformat(value).date()
            except ValueError:
                raise field_error("date", "Expected a date in YYYY-MM-DD format", "date_parsing")

    @app.route(f"{prefix}/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    @json_errors("Failed to fetch attendance records")
    def list_attendance():
        day_s = request.args.get("date")
        if day_s:
            school_id = query_int("schoolId")
            if school_id is None:
                raise field_error("schoolId", "schoolId is required when filtering by date", "missing")
            records = container.attendance_service.list_by_date(_parse_day(day_s), school_id)
        elif request.args.get("teacherId"):
            records = container.attendance_service.list_for_teacher(query_int("teacherId"))
        elif request.args.get("studentId"):
            records = container.attendance_service.list_for_student(query_int("studentId"))
        else:
            records = container.attendance_service.list_all()
        return jsonify(to_json_list(records))

    @app.route(f"{prefix}/schools/<int:school_id>/attendance", methods=["GET"], endpoint="list_school_attendance")
    @login_required
    @json_errors("Failed to fetch attendance records")
    def list_school_attendance(school_id: int):
        return jsonify(to_json_list(container.attendance_service.list_by_school(school_id)))

    @app.route(f"{prefix}/attendance/<int:attendance_id>", methods=["GET"], endpoint="get_attendance")
    @login_required
    @json_errors("Failed to fetch attendance record")
    def get_attendance(attendance_id: int):
        return jsonify(to_json(container.attendance_service.get(attendance_id)))

    @app.route(f"{prefix}/attendance", methods=["POST"], endpoint="create_attendance")
    @login_required
    @json_errors("Failed to create attendance record")
    def create_attendance():
        record = container.attendance_service.create(json_body())
        return jsonify(to_json(record)), 201

    @app.route(f"{prefix}/attendance/<int:attendance_id>", methods=["PUT"], endpoint="update_attendance")
    @login_required
    @json_errors("Failed to update attendance record")
    def update_attendance(attendance_id: int):
        return jsonify(to_json(container.attendance_service.update(attendance_id, json_body())))
