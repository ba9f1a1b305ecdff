from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Student
from .schema import InsertStudent


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def create(self, data: InsertStudent) -> Student:
        raise NotImplementedError

    def update(self, student_id: int, **changes: Any) -> Optional[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[Student]:
        raise NotImplementedError
