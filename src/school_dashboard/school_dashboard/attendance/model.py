from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark.

    Exactly one of ``teacher_id`` / ``student_id`` is set, matching ``type``.
    """

    id: int
    date: datetime
    school_id: int
    type: AttendanceType
    status: AttendanceStatus
    teacher_id: Optional[int] = None
    student_id: Optional[int] = None

    @property
    def subject_id(self) -> Optional[int]:
        return self.teacher_id if self.type == AttendanceType.TEACHER else self.student_id
