from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..app_logger import get_logger
from ..common.validators import field_error, parse_payload, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError
from ..schools.repository import SchoolRepository
from .model import User
from .repository import UserRepository
from .schema import InsertUser, LoginPayload

logger = get_logger("users")


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    name: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, payload: Any) -> SessionUser:
        creds = parse_payload(LoginPayload, payload)
        user = self._users.get_by_username(creds.username)
        if not user:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password, creds.password)
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.id, name=user.name, role=user.role)


class UserService:
    """Use case: manage user accounts."""

    def __init__(
        self,
        users: UserRepository,
        schools: SchoolRepository,
        *,
        enforce_references: bool = True,
    ):
        self._users = users
        self._schools = schools
        self._enforce_references = enforce_references

    def register(self, payload: Any, *, allow_admin: bool = False) -> User:
        """Create an account.

        Admin accounts are only created when ``allow_admin`` is set, i.e. by an
        admin session or the demo seed; public sign-up cannot grant them.
        """
        data = parse_payload(InsertUser, payload)
        if data.role == Role.ADMIN and not allow_admin:
            raise field_error("role", "Only an administrator can create admin accounts", "forbidden")
        require_non_empty(data.username, "username")
        require_min_length(data.password, "password", MIN_PASSWORD_LENGTH)

        if self._enforce_references and data.school_id is not None and not self._schools.get_by_id(data.school_id):
            raise field_error("schoolId", "School does not exist", "foreign_key")

        try:
            user = self._users.create(data, password_hash=generate_password_hash(data.password))
        except ConflictError:
            raise field_error("username", "Username already exists", "unique")
        logger.info("created user id=%s username=%s role=%s", user.id, user.username, user.role.value)
        return user

    def get(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def find(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def list_all(self) -> Sequence[User]:
        return self._users.list_all()
