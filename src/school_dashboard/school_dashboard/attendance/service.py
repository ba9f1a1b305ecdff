from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Sequence

from ..app_logger import get_logger
from ..common.validators import parse_payload, require_reference
from ..core.enums import AttendanceType
from ..core.exceptions import NotFoundError, ValidationError
from ..schools.repository import SchoolRepository
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schema import AttendancePatch, InsertAttendance, subject_mismatch

logger = get_logger("attendance")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        schools: SchoolRepository,
        teachers: TeacherRepository,
        students: StudentRepository,
        *,
        enforce_references: bool = True,
    ):
        self._attendance = attendance
        self._schools = schools
        self._teachers = teachers
        self._students = students
        self._enforce_references = enforce_references

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_by_school(self, school_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_school(school_id)

    def list_by_date(self, day: date, school_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_by_date(day, school_id)

    def list_for_teacher(self, teacher_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_teacher(teacher_id)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_student(student_id)

    def get(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def create(self, payload: Any) -> AttendanceRecord:
        data = parse_payload(InsertAttendance, payload)
        if self._enforce_references:
            self._check_references(data.school_id, data.type, data.teacher_id, data.student_id)

        record = self._attendance.create(data)
        logger.info(
            "created attendance id=%s type=%s subject=%s status=%s",
            record.id, record.type.value, record.subject_id, record.status.value,
        )
        return record

    def update(self, attendance_id: int, payload: Any) -> AttendanceRecord:
        current = self.get(attendance_id)
        changes = parse_payload(AttendancePatch, payload).changes()

        merged = replace(current, **changes)
        problem = subject_mismatch(merged.type, merged.teacher_id, merged.student_id)
        if problem:
            raise ValidationError(
                f"Validation error: {problem}",
                [{"path": [], "message": problem, "code": "value_error"}],
            )
        if self._enforce_references:
            # only re-check the links this patch touches
            if "school_id" in changes:
                require_reference(self._schools.get_by_id(merged.school_id), "schoolId", "School")
            if changes.get("teacher_id") is not None:
                require_reference(self._teachers.get_by_id(merged.teacher_id), "teacherId", "Teacher")
            if changes.get("student_id") is not None:
                require_reference(self._students.get_by_id(merged.student_id), "studentId", "Student")

        updated = self._attendance.update(attendance_id, **changes)
        if not updated:
            raise NotFoundError("Attendance record not found")
        logger.info("updated attendance id=%s fields=%s", attendance_id, sorted(changes))
        return updated

    def _check_references(self, school_id: int, type_: AttendanceType, teacher_id, student_id) -> None:
        require_reference(self._schools.get_by_id(school_id), "schoolId", "School")
        if type_ == AttendanceType.TEACHER:
            require_reference(self._teachers.get_by_id(teacher_id), "teacherId", "Teacher")
        else:
            require_reference(self._students.get_by_id(student_id), "studentId", "Student")
