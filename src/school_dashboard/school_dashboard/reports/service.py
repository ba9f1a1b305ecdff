from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.validators import parse_payload, require_reference
from ..core.enums import ReportType
from ..core.exceptions import NotFoundError
from ..schools.repository import SchoolRepository
from ..users.repository import UserRepository
from .model import Report
from .repository import ReportRepository
from .schema import InsertReport, ReportPatch

logger = get_logger("reports")


class ReportService:
    def __init__(
        self,
        reports: ReportRepository,
        schools: SchoolRepository,
        users: UserRepository,
        *,
        enforce_references: bool = True,
    ):
        self._reports = reports
        self._schools = schools
        self._users = users
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[Report]:
        return self._reports.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Report]:
        return self._reports.list_by_school(school_id)

    def list_by_type(self, report_type: ReportType) -> Sequence[Report]:
        return self._reports.list_by_type(report_type)

    def get(self, report_id: int) -> Report:
        report = self._reports.get_by_id(report_id)
        if not report:
            raise NotFoundError("Report not found")
        return report

    def create(self, payload: Any) -> Report:
        data = parse_payload(InsertReport, payload)
        if self._enforce_references:
            require_reference(self._schools.get_by_id(data.school_id), "schoolId", "School")
            require_reference(self._users.get_by_id(data.generated_by), "generatedBy", "User")

        report = self._reports.create(data)
        logger.info("created report id=%s type=%s school_id=%s", report.id, report.type.value, report.school_id)
        return report

    def update(self, report_id: int, payload: Any) -> Report:
        self.get(report_id)
        changes = parse_payload(ReportPatch, payload).changes()
        if self._enforce_references and "school_id" in changes:
            require_reference(self._schools.get_by_id(changes["school_id"]), "schoolId", "School")

        updated = self._reports.update(report_id, **changes)
        if not updated:
            raise NotFoundError("Report not found")
        logger.info("updated report id=%s fields=%s", report_id, sorted(changes))
        return updated

    def delete(self, report_id: int) -> None:
        if not self._reports.delete_by_id(report_id):
            raise NotFoundError("Report not found")
        logger.info("deleted report id=%s", report_id)
