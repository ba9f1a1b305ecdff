from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import calendar_date
from ..core.enums import AttendanceType
from ..database.store import MemoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .schema import InsertAttendance


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.attendance

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._table.get(attendance_id)

    def create(self, data: InsertAttendance) -> AttendanceRecord:
        return self._table.insert(
            lambda new_id: AttendanceRecord(
                id=new_id,
                date=data.date,
                school_id=data.school_id,
                type=data.type,
                status=data.status,
                teacher_id=data.teacher_id,
                student_id=data.student_id,
            )
        )

    def update(self, attendance_id: int, **changes: Any) -> Optional[AttendanceRecord]:
        return self._table.update(attendance_id, changes)

    def delete_by_id(self, attendance_id: int) -> bool:
        return self._table.delete(attendance_id)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._table.list_all()

    def list_by_school(self, school_id: int) -> Sequence[AttendanceRecord]:
        return self._table.filter(lambda a: a.school_id == school_id)

    def list_by_date(self, day: date, school_id: int) -> Sequence[AttendanceRecord]:
        return self._table.filter(lambda a: a.school_id == school_id and calendar_date(a.date) == day)

    def list_for_teacher(self, teacher_id: int) -> Sequence[AttendanceRecord]:
        return self._table.filter(lambda a: a.type == AttendanceType.TEACHER and a.teacher_id == teacher_id)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return self._table.filter(lambda a: a.type == AttendanceType.STUDENT and a.student_id == student_id)
