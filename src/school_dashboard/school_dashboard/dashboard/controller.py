from __future__ import annotations

from flask import Flask, jsonify

from ..common.guards import login_required
from ..common.http import json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    @app.route(f"{prefix}/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @login_required
    @json_errors("Failed to fetch dashboard statistics")
    def dashboard_stats():
        return jsonify(to_json(container.dashboard_service.stats()))

    @app.route(f"{prefix}/dashboard/top-schools", methods=["GET"], endpoint="dashboard_top_schools")
    @login_required
    @json_errors("Failed to fetch top schools")
    def dashboard_top_schools():
        return jsonify(to_json_list(container.dashboard_service.top_schools()))
