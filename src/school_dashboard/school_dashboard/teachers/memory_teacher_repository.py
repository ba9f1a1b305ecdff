from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import Teacher
from .repository import TeacherRepository
from .schema import InsertTeacher


class MemoryTeacherRepository(TeacherRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.teachers

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._table.get(teacher_id)

    def get_by_user_id(self, user_id: int) -> Optional[Teacher]:
        return self._table.find_first(lambda t: t.user_id == user_id)

    def create(self, data: InsertTeacher) -> Teacher:
        return self._table.insert(
            lambda new_id: Teacher(
                id=new_id,
                user_id=data.user_id,
                school_id=data.school_id,
                subjects=tuple(data.subjects),
                qualification=data.qualification,
                joining_date=data.joining_date,
                performance_score=None,
            ),
            unique=lambda t: t.user_id,
        )

    def update(self, teacher_id: int, **changes: Any) -> Optional[Teacher]:
        if "subjects" in changes:
            changes["subjects"] = tuple(changes["subjects"])
        return self._table.update(teacher_id, changes)

    def delete_by_id(self, teacher_id: int) -> bool:
        return self._table.delete(teacher_id)

    def list_all(self) -> Sequence[Teacher]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Teacher]:
        return self._table.filter(lambda t: t.school_id == school_id)
