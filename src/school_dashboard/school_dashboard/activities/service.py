from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.validators import parse_payload, require_reference
from ..core.enums import ActivityType
from ..core.exceptions import NotFoundError
from ..schools.repository import SchoolRepository
from ..users.repository import UserRepository
from .model import Activity
from .repository import ActivityRepository
from .schema import ActivityPatch, InsertActivity

logger = get_logger("activities")


class ActivityService:
    def __init__(
        self,
        activities: ActivityRepository,
        schools: SchoolRepository,
        users: UserRepository,
        *,
        enforce_references: bool = True,
    ):
        self._activities = activities
        self._schools = schools
        self._users = users
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[Activity]:
        return self._activities.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Activity]:
        return self._activities.list_by_school(school_id)

    def list_by_type(self, activity_type: ActivityType) -> Sequence[Activity]:
        return self._activities.list_by_type(activity_type)

    def list_recent(self, limit: int) -> Sequence[Activity]:
        return self._activities.list_recent(limit)

    def get(self, activity_id: int) -> Activity:
        activity = self._activities.get_by_id(activity_id)
        if not activity:
            raise NotFoundError("Activity not found")
        return activity

    def create(self, payload: Any) -> Activity:
        data = parse_payload(InsertActivity, payload)
        if self._enforce_references:
            require_reference(self._schools.get_by_id(data.school_id), "schoolId", "School")
            require_reference(self._users.get_by_id(data.created_by), "createdBy", "User")

        activity = self._activities.create(data)
        logger.info("created activity id=%s type=%s school_id=%s", activity.id, activity.type.value, activity.school_id)
        return activity

    def update(self, activity_id: int, payload: Any) -> Activity:
        self.get(activity_id)
        changes = parse_payload(ActivityPatch, payload).changes()
        if self._enforce_references and "school_id" in changes:
            require_reference(self._schools.get_by_id(changes["school_id"]), "schoolId", "School")

        updated = self._activities.update(activity_id, **changes)
        if not updated:
            raise NotFoundError("Activity not found")
        logger.info("updated activity id=%s fields=%s", activity_id, sorted(changes))
        return updated
