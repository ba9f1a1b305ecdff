from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.validators import field_error, parse_payload, require_reference
from ..core.exceptions import ConflictError, NotFoundError
from ..schools.repository import SchoolRepository
from ..users.repository import UserRepository
from .model import Teacher
from .repository import TeacherRepository
from .schema import InsertTeacher, TeacherPatch

logger = get_logger("teachers")


class TeacherService:
    def __init__(
        self,
        teachers: TeacherRepository,
        users: UserRepository,
        schools: SchoolRepository,
        *,
        enforce_references: bool = True,
    ):
        self._teachers = teachers
        self._users = users
        self._schools = schools
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[Teacher]:
        return self._teachers.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Teacher]:
        return self._teachers.list_by_school(school_id)

    def get(self, teacher_id: int) -> Teacher:
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def get_by_user(self, user_id: int) -> Teacher:
        teacher = self._teachers.get_by_user_id(user_id)
        if not teacher:
            raise NotFoundError("Teacher not found")
        return teacher

    def create(self, payload: Any) -> Teacher:
        data = parse_payload(InsertTeacher, payload)
        if self._enforce_references:
            require_reference(self._users.get_by_id(data.user_id), "userId", "User")
            require_reference(self._schools.get_by_id(data.school_id), "schoolId", "School")

        try:
            teacher = self._teachers.create(data)
        except ConflictError:
            raise field_error("userId", "User already has a teacher profile", "unique")
        logger.info("created teacher id=%s user_id=%s school_id=%s", teacher.id, teacher.user_id, teacher.school_id)
        return teacher

    def update(self, teacher_id: int, payload: Any) -> Teacher:
        self.get(teacher_id)
        changes = parse_payload(TeacherPatch, payload).changes()
        if self._enforce_references and "school_id" in changes:
            require_reference(self._schools.get_by_id(changes["school_id"]), "schoolId", "School")

        updated = self._teachers.update(teacher_id, **changes)
        if not updated:
            raise NotFoundError("Teacher not found")
        logger.info("updated teacher id=%s fields=%s", teacher_id, sorted(changes))
        return updated

    def delete(self, teacher_id: int) -> None:
        if not self._teachers.delete_by_id(teacher_id):
            raise NotFoundError("Teacher not found")
        logger.info("deleted teacher id=%s", teacher_id)
