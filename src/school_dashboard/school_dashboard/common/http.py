from __future__ import annotations

from functools import wraps

from flask import jsonify, request

from ..app_logger import get_logger
from ..core.exceptions import (
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

logger = get_logger("http")


def json_errors(failure_message: str):
    """Map domain errors raised by a view to JSON responses.

    Anything that is not a domain error is logged and answered with a generic
    500 carrying ``failure_message`` only.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"message": e.message, "errors": e.errors}), 400
            except NotFoundError as e:
                return jsonify({"message": str(e)}), 404
            except (AuthenticationError, UnauthenticatedError) as e:
                return jsonify({"message": str(e) or "Unauthorized"}), 401
            except ForbiddenError as e:
                return jsonify({"message": str(e) or "Forbidden"}), 403
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return jsonify({"message": failure_message}), 500

        return wrapper

    return decorator


def json_body() -> object:
    """Request body as parsed JSON; ``None`` when missing or malformed."""
    return request.get_json(silent=True)


def query_int(name: str, default: int | None = None) -> int | None:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(
            f'Validation error: Expected an integer at "{name}"',
            [{"path": [name], "message": "Expected an integer", "code": "int_parsing"}],
        )
