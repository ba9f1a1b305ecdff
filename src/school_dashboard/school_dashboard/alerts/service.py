from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.datetime_utils import now_local
from ..common.validators import parse_payload, require_reference
from ..core.exceptions import NotFoundError
from ..schools.repository import SchoolRepository
from .model import Alert
from .repository import AlertRepository
from .schema import AlertPatch, InsertAlert

logger = get_logger("alerts")


class AlertService:
    def __init__(self, alerts: AlertRepository, schools: SchoolRepository, *, enforce_references: bool = True):
        self._alerts = alerts
        self._schools = schools
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[Alert]:
        return self._alerts.list_all()

    def list_active(self) -> Sequence[Alert]:
        return self._alerts.list_active()

    def list_by_school(self, school_id: int) -> Sequence[Alert]:
        return self._alerts.list_by_school(school_id)

    def get(self, alert_id: int) -> Alert:
        alert = self._alerts.get_by_id(alert_id)
        if not alert:
            raise NotFoundError("Alert not found")
        return alert

    def create(self, payload: Any) -> Alert:
        data = parse_payload(InsertAlert, payload)
        if self._enforce_references and data.school_id is not None:
            require_reference(self._schools.get_by_id(data.school_id), "schoolId", "School")

        alert = self._alerts.create(data, created_at=now_local())
        logger.info("created alert id=%s type=%s", alert.id, alert.type.value)
        return alert

    def update(self, alert_id: int, payload: Any) -> Alert:
        self.get(alert_id)
        changes = parse_payload(AlertPatch, payload).changes()
        if self._enforce_references and changes.get("school_id") is not None:
            require_reference(self._schools.get_by_id(changes["school_id"]), "schoolId", "School")

        updated = self._alerts.update(alert_id, **changes)
        if not updated:
            raise NotFoundError("Alert not found")
        logger.info("updated alert id=%s fields=%s", alert_id, sorted(changes))
        return updated
