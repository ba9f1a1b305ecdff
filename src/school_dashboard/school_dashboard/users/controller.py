from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.guards import current_identity, login_required
from ..common.http import json_body, json_errors
from ..common.serialization import to_json, to_json_list
from ..container import Container
from ..core.enums import Role

PRIVATE_FIELDS = ("password",)


def register(app: Flask, container: Container) -> None:
    prefix = app.config["API_PREFIX"]

    def _open_session(user_id: int, name: str, role: str) -> None:
        session.clear()
        session["user_id"] = user_id
        session["name"] = name
        session["role"] = role

    @app.route(f"{prefix}/register", methods=["POST"], endpoint="register")
    @json_errors("Registration failed")
    def register_user():
        identity = current_identity()
        by_admin = identity is not None and identity[1] == Role.ADMIN.value
        user = container.user_service.register(json_body(), allow_admin=by_admin)
        # an admin creating accounts keeps their own session
        if not by_admin:
            _open_session(user.id, user.name, user.role.value)
        return jsonify(to_json(user, exclude=PRIVATE_FIELDS)), 201

    @app.route(f"{prefix}/login", methods=["POST"], endpoint="login")
    @json_errors("Login failed")
    def login():
        s_user = container.auth_service.authenticate(json_body())
        _open_session(s_user.user_id, s_user.name, s_user.role.value)
        user = container.user_service.get(s_user.user_id)
        return jsonify(to_json(user, exclude=PRIVATE_FIELDS))

    @app.route(f"{prefix}/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route(f"{prefix}/user", methods=["GET"], endpoint="current_user")
    @login_required
    @json_errors("Failed to fetch user")
    def current_user():
        user_id, _ = current_identity()
        user = container.user_service.find(user_id)
        if not user:
            # Account was removed after the session was issued
            session.clear()
            return jsonify({"message": "Unauthorized"}), 401
        return jsonify(to_json(user, exclude=PRIVATE_FIELDS))

    @app.route(f"{prefix}/users", methods=["GET"], endpoint="list_users")
    @login_required
    @json_errors("Failed to fetch users")
    def list_users():
        return jsonify(to_json_list(container.user_service.list_all(), exclude=PRIVATE_FIELDS))
