from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.school_dashboard.school_dashboard.attendance.model import AttendanceRecord
from src.school_dashboard.school_dashboard.core.enums import AttendanceStatus, AttendanceType
from src.school_dashboard.school_dashboard.dashboard.service import (
    DashboardService,
    attendance_rate,
    format_percentage,
)


@dataclass
class _School:
    id: int
    name: str


@dataclass
class _Student:
    id: int
    school_id: int


class InMemoryRows:
    def __init__(self, rows):
        self._rows = list(rows)

    def list_all(self):
        return list(self._rows)

    def list_by_school(self, school_id: int):
        return [r for r in self._rows if r.school_id == school_id]


_day = datetime(2024, 3, 10, 8, 0)


def _student_mark(rid: int, school_id: int, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        id=rid, date=_day, school_id=school_id, type=AttendanceType.STUDENT, status=status, student_id=rid
    )


def _teacher_mark(rid: int, school_id: int, status: AttendanceStatus) -> AttendanceRecord:
    return AttendanceRecord(
        id=rid, date=_day, school_id=school_id, type=AttendanceType.TEACHER, status=status, teacher_id=rid
    )


def _service(schools, students=(), attendance=(), teachers=()):
    return DashboardService(
        InMemoryRows(schools), InMemoryRows(teachers), InMemoryRows(students), InMemoryRows(attendance)
    )


def test_rate_counts_student_marks_only():
    records = [
        _student_mark(1, 1, AttendanceStatus.PRESENT),
        _student_mark(2, 1, AttendanceStatus.LATE),
        _teacher_mark(3, 1, AttendanceStatus.ABSENT),
    ]
    assert attendance_rate(records) == 50.0
    assert attendance_rate([_teacher_mark(1, 1, AttendanceStatus.PRESENT)]) is None


def test_format_percentage():
    assert format_percentage(None) == "0.0%"
    assert format_percentage(200 / 3) == "66.7%"


def test_stats_without_attendance():
    stats = _service([_School(1, "A")]).stats()

    assert stats.total_schools == 1
    assert stats.total_teachers == 0
    assert stats.avg_attendance == "0.0%"


def test_top_schools_ranks_by_rate_with_change():
    schools = [_School(1, "A"), _School(2, "B"), _School(3, "C")]
    attendance = [
        _student_mark(1, 1, AttendanceStatus.PRESENT),
        _student_mark(2, 1, AttendanceStatus.PRESENT),
        _student_mark(3, 1, AttendanceStatus.PRESENT),
        _student_mark(4, 1, AttendanceStatus.ABSENT),
        _student_mark(5, 2, AttendanceStatus.PRESENT),
    ]
    students = [_Student(1, 1), _Student(2, 1), _Student(3, 2)]

    ranked = _service(schools, students, attendance).top_schools()

    assert [(r.id, r.score, r.change, r.student_count) for r in ranked] == [
        (2, "100.0%", "+20.0", 1),
        (1, "75.0%", "-5.0", 2),
        (3, "0.0%", "-80.0", 0),
    ]


def test_top_schools_caps_at_five_and_breaks_ties_by_id():
    schools = [_School(i, f"S{i}") for i in range(7, 0, -1)]

    ranked = _service(schools).top_schools(limit=10)

    assert [r.id for r in ranked] == [1, 2, 3, 4, 5]


def test_api_shapes(teacher_client, make_school, make_student, container):
    school = make_school()
    student = make_student(school.id)
    container.attendance_service.create(
        {"date": "2024-03-10T08:00:00", "schoolId": school.id, "type": "student", "studentId": student.id, "status": "present"}
    )

    stats = teacher_client.get("/api/dashboard/stats").get_json()
    assert stats == {"totalSchools": 1, "totalTeachers": 0, "totalStudents": 1, "avgAttendance": "100.0%"}

    top = teacher_client.get("/api/dashboard/top-schools").get_json()
    assert top == [
        {"id": school.id, "name": school.name, "score": "100.0%", "change": "+0.0", "studentCount": 1}
    ]


def test_api_requires_session(client):
    assert client.get("/api/dashboard/stats").status_code == 401
