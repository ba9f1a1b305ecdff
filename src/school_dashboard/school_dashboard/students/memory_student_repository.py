from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import Student
from .repository import StudentRepository
from .schema import InsertStudent


class MemoryStudentRepository(StudentRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.students

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._table.get(student_id)

    def create(self, data: InsertStudent) -> Student:
        return self._table.insert(
            lambda new_id: Student(
                id=new_id,
                name=data.name,
                roll_number=data.roll_number,
                school_id=data.school_id,
                grade=data.grade,
                section=data.section,
                guardian_name=data.guardian_name,
                guardian_phone=data.guardian_phone,
                performance_score=None,
            )
        )

    def update(self, student_id: int, **changes: Any) -> Optional[Student]:
        return self._table.update(student_id, changes)

    def delete_by_id(self, student_id: int) -> bool:
        return self._table.delete(student_id)

    def list_all(self) -> Sequence[Student]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Student]:
        return self._table.filter(lambda s: s.school_id == school_id)
