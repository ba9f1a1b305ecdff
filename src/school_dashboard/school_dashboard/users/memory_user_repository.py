from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import User
from .repository import UserRepository
from .schema import InsertUser


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.users

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._table.find_first(lambda u: u.username == username)

    def create(self, data: InsertUser, *, password_hash: str) -> User:
        return self._table.insert(
            lambda new_id: User(
                id=new_id,
                username=data.username,
                password=password_hash,
                name=data.name,
                email=data.email,
                role=data.role,
                school_id=data.school_id,
            ),
            unique=lambda u: u.username,
        )

    def update(self, user_id: int, **changes: Any) -> Optional[User]:
        return self._table.update(user_id, changes)

    def delete_by_id(self, user_id: int) -> bool:
        return self._table.delete(user_id)

    def list_all(self) -> Sequence[User]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[User]:
        return self._table.filter(lambda u: u.school_id == school_id)
