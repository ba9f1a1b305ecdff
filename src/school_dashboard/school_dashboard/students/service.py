from __future__ import annotations

from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.validators import parse_payload, require_reference
from ..core.exceptions import NotFoundError
from ..schools.repository import SchoolRepository
from .model import Student
from .repository import StudentRepository
from .schema import InsertStudent, StudentPatch

logger = get_logger("students")


class StudentService:
    def __init__(self, students: StudentRepository, schools: SchoolRepository, *, enforce_references: bool = True):
        self._students = students
        self._schools = schools
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def list_by_school(self, school_id: int) -> Sequence[Student]:
        return self._students.list_by_school(school_id)

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def create(self, payload: Any) -> Student:
        data = parse_payload(InsertStudent, payload)
        if self._enforce_references:
            require_reference(self._schools.get_by_id(data.school_id), "schoolId", "School")

        student = self._students.create(data)
        logger.info("created student id=%s school_id=%s", student.id, student.school_id)
        return student

    def update(self, student_id: int, payload: Any) -> Student:
        self.get(student_id)
        changes = parse_payload(StudentPatch, payload).changes()
        if self._enforce_references and "school_id" in changes:
            require_reference(self._schools.get_by_id(changes["school_id"]), "schoolId", "School")

        updated = self._students.update(student_id, **changes)
        if not updated:
            raise NotFoundError("Student not found")
        logger.info("updated student id=%s fields=%s", student_id, sorted(changes))
        return updated

    def delete(self, student_id: int) -> None:
        if not self._students.delete_by_id(student_id):
            raise NotFoundError("Student not found")
        logger.info("deleted student id=%s", student_id)
