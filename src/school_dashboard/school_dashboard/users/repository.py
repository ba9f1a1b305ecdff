from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import User
from .schema import InsertUser


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, data: InsertUser, *, password_hash: str) -> User:
        """Raises ``ConflictError`` when the username is already taken."""
        raise NotImplementedError

    def update(self, user_id: int, **changes: Any) -> Optional[User]:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[User]:
        raise NotImplementedError
