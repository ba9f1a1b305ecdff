from __future__ import annotations

from datetime import date
from typing import Any, Optional, Protocol, Sequence

from .model import AttendanceRecord
from .schema import InsertAttendance


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, data: InsertAttendance) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, attendance_id: int, **changes: Any) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_school(self, school_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_date(self, day: date, school_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_teacher(self, teacher_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
