from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Protocol, Sequence

from .model import Alert
from .schema import InsertAlert


class AlertRepository(Protocol):
    def get_by_id(self, alert_id: int) -> Optional[Alert]:
        raise NotImplementedError

    def create(self, data: InsertAlert, *, created_at: datetime) -> Alert:
        raise NotImplementedError

    def update(self, alert_id: int, **changes: Any) -> Optional[Alert]:
        raise NotImplementedError

    def delete_by_id(self, alert_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Alert]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[Alert]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Alert]:
        raise NotImplementedError
