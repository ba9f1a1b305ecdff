from __future__ import annotations

import copy
from typing import Any, Optional, Sequence

from ..core.enums import ReportType
from ..database.store import MemoryStore
from .model import Report
from .repository import ReportRepository
from .schema import InsertReport


class MemoryReportRepository(ReportRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.reports

    def get_by_id(self, report_id: int) -> Optional[Report]:
        return self._table.get(report_id)

    def create(self, data: InsertReport) -> Report:
        return self._table.insert(
            lambda new_id: Report(
                id=new_id,
                title=data.title,
                type=data.type,
                school_id=data.school_id,
                date=data.date,
                status=data.status,
                # payload is caller-owned; keep our own copy
                data=copy.deepcopy(data.data),
                generated_by=data.generated_by,
            )
        )

    def update(self, report_id: int, **changes: Any) -> Optional[Report]:
        if "data" in changes:
            changes["data"] = copy.deepcopy(changes["data"])
        return self._table.update(report_id, changes)

    def delete_by_id(self, report_id: int) -> bool:
        return self._table.delete(report_id)

    def list_all(self) -> Sequence[Report]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Report]:
        return self._table.filter(lambda r: r.school_id == school_id)

    def list_by_type(self, report_type: ReportType) -> Sequence[Report]:
        return self._table.filter(lambda r: r.type == report_type)
