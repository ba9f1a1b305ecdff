from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..core.enums import AlertStatus
from ..database.store import MemoryStore
from .model import Alert
from .repository import AlertRepository
from .schema import InsertAlert


class MemoryAlertRepository(AlertRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.alerts

    def get_by_id(self, alert_id: int) -> Optional[Alert]:
        return self._table.get(alert_id)

    def create(self, data: InsertAlert, *, created_at: datetime) -> Alert:
        return self._table.insert(
            lambda new_id: Alert(
                id=new_id,
                title=data.title,
                description=data.description,
                type=data.type,
                school_id=data.school_id,
                status=data.status,
                created_at=created_at,
            )
        )

    def update(self, alert_id: int, **changes: Any) -> Optional[Alert]:
        changes.pop("created_at", None)
        return self._table.update(alert_id, changes)

    def delete_by_id(self, alert_id: int) -> bool:
        return self._table.delete(alert_id)

    def list_all(self) -> Sequence[Alert]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Alert]:
        return self._table.filter(lambda a: a.school_id == school_id)

    def list_active(self) -> Sequence[Alert]:
        return self._table.filter(lambda a: a.status == AlertStatus.ACTIVE)
