from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def current_identity() -> tuple[int, str] | None:
    """(user_id, role) of the signed-in user, if the session carries one."""
    user_id = session.get("user_id")
    role = session.get("role")
    if user_id is None or role is None:
        return None
    return int(user_id), str(role)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_identity() is None:
            return jsonify({"message": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            return jsonify({"message": "Unauthorized"}), 401
        if identity[1] != Role.ADMIN.value:
            return jsonify({"message": "Forbidden: Admin access required"}), 403
        return view(*args, **kwargs)

    return wrapper
