from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .activities.memory_activity_repository import MemoryActivityRepository
from .activities.service import ActivityService
from .alerts.memory_alert_repository import MemoryAlertRepository
from .alerts.service import AlertService
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import DeletePolicy
from .dashboard.service import DashboardService
from .database.store import MemoryStore
from .reports.memory_report_repository import MemoryReportRepository
from .reports.service import ReportService
from .schools.memory_school_repository import MemorySchoolRepository
from .schools.service import SchoolService
from .students.memory_student_repository import MemoryStudentRepository
from .students.service import StudentService
from .teachers.memory_teacher_repository import MemoryTeacherRepository
from .teachers.service import TeacherService
from .users.memory_user_repository import MemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    users_repo: MemoryUserRepository
    schools_repo: MemorySchoolRepository
    teachers_repo: MemoryTeacherRepository
    students_repo: MemoryStudentRepository
    attendance_repo: MemoryAttendanceRepository
    reports_repo: MemoryReportRepository
    alerts_repo: MemoryAlertRepository
    activities_repo: MemoryActivityRepository

    auth_service: AuthService
    user_service: UserService
    school_service: SchoolService
    teacher_service: TeacherService
    student_service: StudentService
    attendance_service: AttendanceService
    report_service: ReportService
    alert_service: AlertService
    activity_service: ActivityService
    dashboard_service: DashboardService


def build_container(
    *,
    store: Optional[MemoryStore] = None,
    delete_policy: DeletePolicy = DeletePolicy.ORPHAN,
    enforce_references: bool = True,
) -> Container:
    store = store if store is not None else MemoryStore()

    users_repo = MemoryUserRepository(store)
    schools_repo = MemorySchoolRepository(store)
    teachers_repo = MemoryTeacherRepository(store)
    students_repo = MemoryStudentRepository(store)
    attendance_repo = MemoryAttendanceRepository(store)
    reports_repo = MemoryReportRepository(store)
    alerts_repo = MemoryAlertRepository(store)
    activities_repo = MemoryActivityRepository(store)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, schools_repo, enforce_references=enforce_references)
    school_service = SchoolService(
        schools_repo,
        users=users_repo,
        teachers=teachers_repo,
        students=students_repo,
        attendance=attendance_repo,
        reports=reports_repo,
        alerts=alerts_repo,
        activities=activities_repo,
        delete_policy=delete_policy,
    )
    teacher_service = TeacherService(teachers_repo, users_repo, schools_repo, enforce_references=enforce_references)
    student_service = StudentService(students_repo, schools_repo, enforce_references=enforce_references)
    attendance_service = AttendanceService(
        attendance_repo,
        schools_repo,
        teachers_repo,
        students_repo,
        enforce_references=enforce_references,
    )
    report_service = ReportService(reports_repo, schools_repo, users_repo, enforce_references=enforce_references)
    alert_service = AlertService(alerts_repo, schools_repo, enforce_references=enforce_references)
    activity_service = ActivityService(activities_repo, schools_repo, users_repo, enforce_references=enforce_references)
    dashboard_service = DashboardService(schools_repo, teachers_repo, students_repo, attendance_repo)

    return Container(
        store=store,
        users_repo=users_repo,
        schools_repo=schools_repo,
        teachers_repo=teachers_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        reports_repo=reports_repo,
        alerts_repo=alerts_repo,
        activities_repo=activities_repo,
        auth_service=auth_service,
        user_service=user_service,
        school_service=school_service,
        teacher_service=teacher_service,
        student_service=student_service,
        attendance_service=attendance_service,
        report_service=report_service,
        alert_service=alert_service,
        activity_service=activity_service,
        dashboard_service=dashboard_service,
    )
