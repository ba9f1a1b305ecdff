from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import School
from .schema import InsertSchool


class SchoolRepository(Protocol):
    def get_by_id(self, school_id: int) -> Optional[School]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[School]:
        raise NotImplementedError

    def create(self, data: InsertSchool) -> School:
        """Raises ``ConflictError`` when the code is already taken."""
        raise NotImplementedError

    def update(self, school_id: int, **changes: Any) -> Optional[School]:
        """Raises ``ConflictError`` when a changed code clashes with another school."""
        raise NotImplementedError

    def delete_by_id(self, school_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[School]:
        raise NotImplementedError
