from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Teacher
from .schema import InsertTeacher


class TeacherRepository(Protocol):
    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def create(self, data: InsertTeacher) -> Teacher:
        """Raises ``ConflictError`` when the user already has a teacher profile."""
        raise NotImplementedError

    def update(self, teacher_id: int, **changes: Any) -> Optional[Teacher]:
        raise NotImplementedError

    def delete_by_id(self, teacher_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[Teacher]:
        raise NotImplementedError
