from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import TOP_SCHOOLS_LIMIT
from ..core.enums import AttendanceStatus, AttendanceType
from ..schools.repository import SchoolRepository
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository


@dataclass(frozen=True)
class DashboardStats:
    total_schools: int
    total_teachers: int
    total_students: int
    avg_attendance: str


@dataclass(frozen=True)
class SchoolRanking:
    id: int
    name: str
    score: str
    change: str
    student_count: int


def attendance_rate(records: Iterable[AttendanceRecord]) -> Optional[float]:
    """Percentage of student-type records marked present; None when there are none."""
    total = 0
    present = 0
    for r in records:
        if r.type != AttendanceType.STUDENT:
            continue
        total += 1
        if r.status == AttendanceStatus.PRESENT:
            present += 1
    if total == 0:
        return None
    return present / total * 100


def format_percentage(rate: Optional[float]) -> str:
    return f"{(rate or 0.0):.1f}%"


class DashboardService:
    """Aggregates for the dashboard landing page."""

    def __init__(
        self,
        schools: SchoolRepository,
        teachers: TeacherRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
    ):
        self._schools = schools
        self._teachers = teachers
        self._students = students
        self._attendance = attendance

    def stats(self) -> DashboardStats:
        return DashboardStats(
            total_schools=len(self._schools.list_all()),
            total_teachers=len(self._teachers.list_all()),
            total_students=len(self._students.list_all()),
            avg_attendance=format_percentage(attendance_rate(self._attendance.list_all())),
        )

    def top_schools(self, limit: int = TOP_SCHOOLS_LIMIT) -> list[SchoolRanking]:
        """Schools ranked by student attendance rate, best first.

        ``change`` is the signed gap between the school's rate and the rate
        across all schools. Equal scores fall back to ascending id.
        """
        overall = attendance_rate(self._attendance.list_all()) or 0.0

        ranked: list[tuple[float, SchoolRanking]] = []
        for school in self._schools.list_all():
            rate = attendance_rate(self._attendance.list_by_school(school.id)) or 0.0
            ranked.append(
                (
                    rate,
                    SchoolRanking(
                        id=school.id,
                        name=school.name,
                        score=format_percentage(rate),
                        change=f"{rate - overall:+.1f}",
                        student_count=len(self._students.list_by_school(school.id)),
                    ),
                )
            )

        ranked.sort(key=lambda item: (-round(item[0], 1), item[1].id))
        return [row for _, row in ranked[: min(limit, TOP_SCHOOLS_LIMIT)]]
