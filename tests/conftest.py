from __future__ import annotations

from datetime import datetime

import pytest

from src.school_dashboard.school_dashboard.container import build_container
from src.school_dashboard.school_dashboard.database.store import MemoryStore
from src.school_dashboard.school_dashboard.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 10, 8, 30, 0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def app(store):
    return create_app("config.testing", store=store)


@pytest.fixture
def api(app):
    """The container the app was built with."""
    return app.extensions["school_dashboard"]


@pytest.fixture
def client(app):
    return app.test_client()


def _signed_in(app, *, user_id: int, role: str):
    c = app.test_client()
    with c.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = f"{role} user"
        sess["role"] = role
    return c


@pytest.fixture
def admin_client(app):
    return _signed_in(app, user_id=1, role="admin")


@pytest.fixture
def teacher_client(app):
    return _signed_in(app, user_id=2, role="teacher")


@pytest.fixture
def school_payload():
    return {"name": "X", "code": "X1", "address": "A", "phone": "1", "type": "primary"}


@pytest.fixture
def make_school(container):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"School {counter['n']}",
            "code": f"SC{counter['n']:03d}",
            "address": "Main Road",
            "phone": "0278-000000",
            "type": "secondary",
        }
        payload.update(overrides)
        return container.school_service.create(payload)

    return _make


@pytest.fixture
def make_user(container):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "username": f"user{counter['n']}",
            "password": "secret123",
            "name": f"User {counter['n']}",
            "email": f"user{counter['n']}@example.org",
            "role": "teacher",
        }
        payload.update(overrides)
        return container.user_service.register(payload, allow_admin=True)

    return _make


@pytest.fixture
def make_student(container):
    counter = {"n": 0}

    def _make(school_id: int, **overrides):
        counter["n"] += 1
        payload = {
            "name": f"Student {counter['n']}",
            "rollNumber": f"R{counter['n']:03d}",
            "schoolId": school_id,
            "grade": "8",
            "section": "B",
            "guardianName": "Guardian",
            "guardianPhone": "9825000000",
        }
        payload.update(overrides)
        return container.student_service.create(payload)

    return _make
