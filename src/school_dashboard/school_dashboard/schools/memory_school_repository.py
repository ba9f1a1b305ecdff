from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.store import MemoryStore
from .model import School
from .repository import SchoolRepository
from .schema import InsertSchool


class MemorySchoolRepository(SchoolRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.schools

    def get_by_id(self, school_id: int) -> Optional[School]:
        return self._table.get(school_id)

    def get_by_code(self, code: str) -> Optional[School]:
        return self._table.find_first(lambda s: s.code == code)

    def create(self, data: InsertSchool) -> School:
        return self._table.insert(
            lambda new_id: School(
                id=new_id,
                name=data.name,
                code=data.code,
                address=data.address,
                phone=data.phone,
                email=data.email,
                type=data.type,
                status=data.status,
                principal_id=None,
            ),
            unique=lambda s: s.code,
        )

    def update(self, school_id: int, **changes: Any) -> Optional[School]:
        return self._table.update(school_id, changes, unique=lambda s: s.code)

    def delete_by_id(self, school_id: int) -> bool:
        return self._table.delete(school_id)

    def list_all(self) -> Sequence[School]:
        return self._table.list_all()
