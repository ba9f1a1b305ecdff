from __future__ import annotations

from typing import Any, Sequence

from ..activities.repository import ActivityRepository
from ..alerts.repository import AlertRepository
from ..app_logger import get_logger
from ..attendance.repository import AttendanceRepository
from ..common.validators import field_error, parse_payload
from ..core.enums import DeletePolicy
from ..core.exceptions import ConflictError, NotFoundError
from ..reports.repository import ReportRepository
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from ..users.repository import UserRepository
from .model import School
from .repository import SchoolRepository
from .schema import InsertSchool, SchoolPatch

logger = get_logger("schools")


class SchoolService:
    """Use case: manage schools.

    Deleting a school follows ``delete_policy``: ``ORPHAN`` removes only the
    school record, ``CASCADE`` also removes its teachers, students, attendance,
    reports, activities and alerts and detaches its users.
    """

    def __init__(
        self,
        schools: SchoolRepository,
        *,
        users: UserRepository,
        teachers: TeacherRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
        reports: ReportRepository,
        alerts: AlertRepository,
        activities: ActivityRepository,
        delete_policy: DeletePolicy = DeletePolicy.ORPHAN,
    ):
        self._schools = schools
        self._users = users
        self._teachers = teachers
        self._students = students
        self._attendance = attendance
        self._reports = reports
        self._alerts = alerts
        self._activities = activities
        self._delete_policy = delete_policy

    def list_all(self) -> Sequence[School]:
        return self._schools.list_all()

    def get(self, school_id: int) -> School:
        school = self._schools.get_by_id(school_id)
        if not school:
            raise NotFoundError("School not found")
        return school

    def create(self, payload: Any) -> School:
        data = parse_payload(InsertSchool, payload)
        try:
            school = self._schools.create(data)
        except ConflictError:
            raise field_error("code", "School code already exists", "unique")
        logger.info("created school id=%s code=%s", school.id, school.code)
        return school

    def update(self, school_id: int, payload: Any) -> School:
        self.get(school_id)
        changes = parse_payload(SchoolPatch, payload).changes()
        try:
            updated = self._schools.update(school_id, **changes)
        except ConflictError:
            raise field_error("code", "School code already exists", "unique")
        if not updated:
            raise NotFoundError("School not found")
        logger.info("updated school id=%s fields=%s", school_id, sorted(changes))
        return updated

    def assign_principal(self, school_id: int, principal_id: int | None) -> School:
        """``principal_id`` is server-owned; this is the only way to set it."""
        updated = self._schools.update(school_id, principal_id=principal_id)
        if not updated:
            raise NotFoundError("School not found")
        return updated

    def delete(self, school_id: int) -> None:
        if not self._schools.delete_by_id(school_id):
            raise NotFoundError("School not found")

        if self._delete_policy == DeletePolicy.CASCADE:
            removed = self._cascade(school_id)
            logger.info("deleted school id=%s with dependants %s", school_id, removed)
        else:
            logger.info("deleted school id=%s (dependants left in place)", school_id)

    def _cascade(self, school_id: int) -> dict[str, int]:
        removed: dict[str, int] = {}
        for name, repo in (
            ("attendance", self._attendance),
            ("teachers", self._teachers),
            ("students", self._students),
            ("reports", self._reports),
            ("activities", self._activities),
            ("alerts", self._alerts),
        ):
            dependants = repo.list_by_school(school_id)
            removed[name] = sum(1 for d in dependants if repo.delete_by_id(d.id))

        for user in self._users.list_by_school(school_id):
            self._users.update(user.id, school_id=None)
        return removed
