from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import ActivityType
from .model import Activity
from .schema import InsertActivity


class ActivityRepository(Protocol):
    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        raise NotImplementedError

    def create(self, data: InsertActivity) -> Activity:
        raise NotImplementedError

    def update(self, activity_id: int, **changes: Any) -> Optional[Activity]:
        raise NotImplementedError

    def delete_by_id(self, activity_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Activity]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[Activity]:
        raise NotImplementedError

    def list_by_type(self, activity_type: ActivityType) -> Sequence[Activity]:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[Activity]:
        """Newest first by ``date``; order among equal dates is unspecified."""
        raise NotImplementedError
