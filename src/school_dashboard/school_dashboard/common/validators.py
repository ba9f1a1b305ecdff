from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(
            f"{field_name} is required",
            [{"path": [field_name], "message": "Required", "code": "missing"}],
        )
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(
            f"{field_name} must contain at least {min_len} characters",
            [{"path": [field_name], "message": f"Must contain at least {min_len} characters", "code": "too_short"}],
        )
    return value


@dataclass(frozen=True)
class Valid(Generic[M]):
    value: M


@dataclass(frozen=True)
class Invalid:
    message: str
    errors: list[dict[str, Any]]


ValidationResult = Union[Valid[M], Invalid]


def _field_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def _summary(errors: list[dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        path = ".".join(str(p) for p in err["path"])
        parts.append(f'{err["message"]} at "{path}"' if path else err["message"])
    return "Validation error: " + "; ".join(parts)


def validate_payload(schema: type[M], payload: Any) -> ValidationResult:
    """Parse ``payload`` against ``schema`` without raising."""
    if not isinstance(payload, Mapping):
        errors = [{"path": [], "message": "Expected a JSON object", "code": "invalid_type"}]
        return Invalid(message=_summary(errors), errors=errors)
    try:
        return Valid(schema.model_validate(dict(payload)))
    except PydanticValidationError as e:
        errors = _field_errors(e)
        return Invalid(message=_summary(errors), errors=errors)


def parse_payload(schema: type[M], payload: Any) -> M:
    """Like :func:`validate_payload`, but raises ``ValidationError`` on failure."""
    result = validate_payload(schema, payload)
    if isinstance(result, Invalid):
        raise ValidationError(result.message, result.errors)
    return result.value


def field_error(field_name: str, message: str, code: str = "invalid") -> ValidationError:
    return ValidationError(
        f'Validation error: {message} at "{field_name}"',
        [{"path": [field_name], "message": message, "code": code}],
    )


def require_reference(found: object, field_name: str, entity: str) -> None:
    """Raise a field-level error when a referenced record does not exist."""
    if found is None:
        raise field_error(field_name, f"{entity} does not exist", "foreign_key")
