from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.datetime_utils import as_naive_utc
from ..core.enums import ActivityType
from ..database.store import MemoryStore
from .model import Activity
from .repository import ActivityRepository
from .schema import InsertActivity


class MemoryActivityRepository(ActivityRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.activities

    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        return self._table.get(activity_id)

    def create(self, data: InsertActivity) -> Activity:
        return self._table.insert(
            lambda new_id: Activity(
                id=new_id,
                title=data.title,
                description=data.description,
                type=data.type,
                school_id=data.school_id,
                date=data.date,
                status=data.status,
                created_by=data.created_by,
            )
        )

    def update(self, activity_id: int, **changes: Any) -> Optional[Activity]:
        return self._table.update(activity_id, changes)

    def delete_by_id(self, activity_id: int) -> bool:
        return self._table.delete(activity_id)

    def list_all(self) -> Sequence[Activity]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Activity]:
        return self._table.filter(lambda a: a.school_id == school_id)

    def list_by_type(self, activity_type: ActivityType) -> Sequence[Activity]:
        return self._table.filter(lambda a: a.type == activity_type)

    def list_recent(self, limit: int) -> Sequence[Activity]:
        items = self._table.list_all()
        items.sort(key=lambda a: as_naive_utc(a.date), reverse=True)
        return items[: max(limit, 0)]
