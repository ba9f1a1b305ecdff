from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` holds field-level violations as dicts with ``path``, ``message``
    and ``code`` keys.
    """

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class NotFoundError(DomainError):
    """Raised when an operation targets an id that does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a request lacks permission for an action."""


class UnauthenticatedError(AuthorizationError):
    """No valid session identity is attached to the request."""


class ForbiddenError(AuthorizationError):
    """Authenticated, but the role is not allowed to perform the action."""


class ConflictError(DomainError):
    """Raised when a write would duplicate a value that must stay unique."""
