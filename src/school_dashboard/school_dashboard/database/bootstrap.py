from __future__ import annotations

from datetime import datetime, timedelta

from ..app_logger import get_logger
from ..container import Container

logger = get_logger("bootstrap")

DEMO_ADMIN_USERNAME = "admin"
DEMO_ADMIN_PASSWORD = "admin123"


def seed_demo_data(container: Container, *, today: datetime | None = None) -> None:
    """Populate an empty store with a small demo district.

    Goes through the services, so the same validation applies as for API
    clients. Does nothing if any school already exists.
    """
    if container.schools_repo.list_all():
        return

    today = today or datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)

    admin = container.user_service.register(
        {
            "username": DEMO_ADMIN_USERNAME,
            "password": DEMO_ADMIN_PASSWORD,
            "name": "Admin User",
            "email": "admin@district.example",
            "role": "admin",
        },
        allow_admin=True,
    )

    schools = [
        container.school_service.create(
            {"name": name, "code": code, "address": address, "phone": phone, "type": type_}
        )
        for name, code, address, phone, type_ in (
            ("Government Primary School", "GPS001", "Station Road", "0278-2420001", "primary"),
            ("Municipal Secondary School", "MSS002", "Crescent Circle", "0278-2420002", "secondary"),
            ("City Higher Secondary School", "CHS003", "Waghawadi Road", "0278-2420003", "higher-secondary"),
        )
    ]

    for idx, school in enumerate(schools, start=1):
        principal = container.user_service.register(
            {
                "username": f"principal{idx}",
                "password": "principal123",
                "name": f"Principal {idx}",
                "email": f"principal{idx}@district.example",
                "role": "principal",
                "schoolId": school.id,
            }
        )
        container.school_service.assign_principal(school.id, principal.id)

        teacher_user = container.user_service.register(
            {
                "username": f"teacher{idx}",
                "password": "teacher123",
                "name": f"Teacher {idx}",
                "email": f"teacher{idx}@district.example",
                "role": "teacher",
                "schoolId": school.id,
            }
        )
        teacher = container.teacher_service.create(
            {
                "userId": teacher_user.id,
                "schoolId": school.id,
                "subjects": ["Mathematics", "Science"],
                "qualification": "B.Ed",
                "joiningDate": (today - timedelta(days=365 * idx)).isoformat(),
            }
        )

        for n in range(1, 4):
            student = container.student_service.create(
                {
                    "name": f"Student {idx}-{n}",
                    "rollNumber": f"{school.code}-{n:03d}",
                    "schoolId": school.id,
                    "grade": str(4 + idx),
                    "section": "A",
                    "guardianName": f"Guardian {idx}-{n}",
                    "guardianPhone": f"98250{idx:02d}{n:03d}",
                }
            )
            container.attendance_service.create(
                {
                    "date": today.isoformat(),
                    "schoolId": school.id,
                    "studentId": student.id,
                    "type": "student",
                    "status": "present" if n <= idx else "absent",
                }
            )

        container.attendance_service.create(
            {
                "date": today.isoformat(),
                "schoolId": school.id,
                "teacherId": teacher.id,
                "type": "teacher",
                "status": "present",
            }
        )
        container.report_service.create(
            {
                "title": f"Quarterly inspection: {school.name}",
                "type": "inspection",
                "schoolId": school.id,
                "date": (today - timedelta(days=idx)).isoformat(),
                "data": {"infrastructure": "good", "observations": []},
                "generatedBy": admin.id,
            }
        )
        container.activity_service.create(
            {
                "title": f"Inspection visit at {school.name}",
                "description": "Routine inspection by district officer",
                "type": "inspection",
                "schoolId": school.id,
                "date": (today - timedelta(days=idx)).isoformat(),
                "status": "completed",
                "createdBy": admin.id,
            }
        )

    container.alert_service.create(
        {
            "title": "Low attendance",
            "description": f"Student attendance at {schools[0].name} dropped this week",
            "type": "warning",
            "schoolId": schools[0].id,
        }
    )
    logger.info("demo data seeded: %s schools", len(schools))
