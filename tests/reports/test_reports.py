from __future__ import annotations

import pytest

from src.school_dashboard.school_dashboard.core.enums import ReportStatus, ReportType
from src.school_dashboard.school_dashboard.core.exceptions import ValidationError


@pytest.fixture
def report_payload(make_school, make_user):
    school = make_school()
    author = make_user(role="admin")
    return {
        "title": "Annual inspection",
        "type": "inspection",
        "schoolId": school.id,
        "date": "2024-02-01T10:00:00",
        "data": {"score": 8, "notes": ["roof leak"]},
        "generatedBy": author.id,
    }


def test_create_defaults_to_draft(container, report_payload):
    report = container.report_service.create(report_payload)

    assert report.status == ReportStatus.DRAFT
    assert report.data == {"score": 8, "notes": ["roof leak"]}


def test_payload_is_copied(container, report_payload):
    report = container.report_service.create(report_payload)
    report_payload["data"]["notes"].append("broken fan")

    assert container.report_service.get(report.id).data["notes"] == ["roof leak"]


def test_filter_by_type(container, report_payload):
    container.report_service.create(report_payload)
    perf = container.report_service.create({**report_payload, "type": "performance"})

    assert container.report_service.list_by_type(ReportType.PERFORMANCE) == [perf]
    assert container.report_service.list_by_type(ReportType.ATTENDANCE) == []


def test_generated_by_cannot_be_patched(container, report_payload):
    report = container.report_service.create(report_payload)
    with pytest.raises(ValidationError) as exc:
        container.report_service.update(report.id, {"generatedBy": 5})
    assert exc.value.errors[0]["code"] == "extra_forbidden"


def test_api_publish_and_admin_delete(teacher_client, admin_client, report_payload):
    created = teacher_client.post("/api/reports", json=report_payload)
    assert created.status_code == 201
    report_id = created.get_json()["id"]

    published = teacher_client.put(f"/api/reports/{report_id}", json={"status": "published"})
    assert published.get_json()["status"] == "published"
    assert published.get_json()["title"] == "Annual inspection"

    assert teacher_client.delete(f"/api/reports/{report_id}").status_code == 403
    assert admin_client.delete(f"/api/reports/{report_id}").status_code == 200
    assert admin_client.get(f"/api/reports/{report_id}").status_code == 404


def test_api_type_query(teacher_client, report_payload):
    teacher_client.post("/api/reports", json=report_payload)

    assert len(teacher_client.get("/api/reports?type=inspection").get_json()) == 1
    assert teacher_client.get("/api/reports?type=attendance").get_json() == []
    assert teacher_client.get("/api/reports?type=gossip").status_code == 400
