from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import ReportType
from .model import Report
from .schema import InsertReport


class ReportRepository(Protocol):
    def get_by_id(self, report_id: int) -> Optional[Report]:
        raise NotImplementedError

    def create(self, data: InsertReport) -> Report:
        raise NotImplementedError

    def update(self, report_id: int, **changes: Any) -> Optional[Report]:
        raise NotImplementedError

    def delete_by_id(self, report_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Report]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[Report]:
        raise NotImplementedError

    def list_by_type(self, report_type: ReportType) -> Sequence[Report]:
        raise NotImplementedError
