from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import model_validator

from ..common.schema import InsertModel, PatchModel
from ..core.enums import AttendanceStatus, AttendanceType


def subject_mismatch(type_: AttendanceType, teacher_id: Optional[int], student_id: Optional[int]) -> Optional[str]:
    """Why the (type, teacherId, studentId) triple is inconsistent, or None."""
    if type_ == AttendanceType.TEACHER:
        if teacher_id is None:
            return "teacherId is required for teacher attendance"
        if student_id is not None:
            return "studentId must be empty for teacher attendance"
    else:
        if student_id is None:
            return "studentId is required for student attendance"
        if teacher_id is not None:
            return "teacherId must be empty for student attendance"
    return None


class InsertAttendance(InsertModel):
    date: datetime
    school_id: int
    teacher_id: Optional[int] = None
    student_id: Optional[int] = None
    type: AttendanceType
    status: AttendanceStatus

    @model_validator(mode="after")
    def check_subject(self) -> "InsertAttendance":
        problem = subject_mismatch(self.type, self.teacher_id, self.student_id)
        if problem:
            raise ValueError(problem)
        return self


class AttendancePatch(PatchModel):
    NULLABLE: ClassVar[frozenset[str]] = frozenset({"teacher_id", "student_id"})

    date: Optional[datetime] = None
    school_id: Optional[int] = None
    teacher_id: Optional[int] = None
    student_id: Optional[int] = None
    type: Optional[AttendanceType] = None
    status: Optional[AttendanceStatus] = None
