from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.school_dashboard.school_dashboard.core.enums import Role
from src.school_dashboard.school_dashboard.core.exceptions import AuthenticationError, ValidationError
from src.school_dashboard.school_dashboard.users.model import User
from src.school_dashboard.school_dashboard.users.service import AuthService


@dataclass
class InMemoryUsers:
    users_by_username: dict[str, User]

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users_by_username.get(username)


def _user(password_hash: str) -> User:
    return User(
        id=1,
        username="admin",
        password=password_hash,
        name="Admin",
        email="admin@example.org",
        role=Role.ADMIN,
        school_id=None,
    )


def test_authenticate_ok():
    repo = InMemoryUsers({"admin": _user(generate_password_hash("admin123"))})

    s_user = AuthService(repo).authenticate({"username": "admin", "password": "admin123"})

    assert s_user.user_id == 1
    assert s_user.role == Role.ADMIN


@pytest.mark.parametrize("username,password", [("admin", "wrong"), ("ghost", "admin123")])
def test_authenticate_rejects_bad_credentials(username, password):
    repo = InMemoryUsers({"admin": _user(generate_password_hash("admin123"))})

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate({"username": username, "password": password})


def test_authenticate_treats_corrupt_hash_as_mismatch():
    repo = InMemoryUsers({"admin": _user("not-a-hash")})

    with pytest.raises(AuthenticationError):
        AuthService(repo).authenticate({"username": "admin", "password": "admin123"})


def test_register_rules(container, make_school):
    container.user_service.register({"username": "jo", "password": "secret123", "name": "Jo", "email": "j@x.org"})

    with pytest.raises(ValidationError) as dup:
        container.user_service.register({"username": "jo", "password": "secret123", "name": "J", "email": "j@x.org"})
    assert dup.value.errors[0]["path"] == ["username"]

    with pytest.raises(ValidationError) as short:
        container.user_service.register({"username": "kim", "password": "abc", "name": "K", "email": "k@x.org"})
    assert short.value.errors[0]["path"] == ["password"]

    with pytest.raises(ValidationError):
        container.user_service.register(
            {"username": "lee", "password": "secret123", "name": "L", "email": "l@x.org", "schoolId": 99}
        )


def test_stored_password_is_hashed(container):
    user = container.user_service.register({"username": "jo", "password": "secret123", "name": "Jo", "email": "j@x.org"})

    assert user.password != "secret123"
    assert user.role == Role.TEACHER


def test_session_flow(client):
    resp = client.post(
        "/api/register",
        json={"username": "amy", "password": "secret123", "name": "Amy", "email": "amy@example.org", "role": "principal"},
    )
    assert resp.status_code == 201
    assert "password" not in resp.get_json()

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.get_json()["username"] == "amy"

    users = client.get("/api/users").get_json()
    assert [u["username"] for u in users] == ["amy"]
    assert all("password" not in u for u in users)

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user").status_code == 401

    assert client.post("/api/login", json={"username": "amy", "password": "nope"}).status_code == 401
    login = client.post("/api/login", json={"username": "amy", "password": "secret123"})
    assert login.status_code == 200
    assert login.get_json()["role"] == "principal"
    assert client.get("/api/user").status_code == 200


def test_register_duplicate_is_400(client):
    payload = {"username": "amy", "password": "secret123", "name": "Amy", "email": "amy@example.org"}
    assert client.post("/api/register", json=payload).status_code == 201

    resp = client.post("/api/register", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["path"] == ["username"]


def test_login_with_malformed_body_is_400(client):
    assert client.post("/api/login", data="nope", content_type="text/plain").status_code == 400


def test_public_sign_up_cannot_claim_admin(client):
    resp = client.post(
        "/api/register",
        json={"username": "mallory", "password": "secret123", "name": "M", "email": "m@example.org", "role": "admin"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["path"] == ["role"]
    assert client.get("/api/user").status_code == 401
    assert client.post("/api/schools", json={"name": "X", "code": "X1", "address": "A", "phone": "1", "type": "primary"}).status_code == 401


def test_non_admin_session_cannot_create_admin(teacher_client):
    resp = teacher_client.post(
        "/api/register",
        json={"username": "mallory", "password": "secret123", "name": "M", "email": "m@example.org", "role": "admin"},
    )

    assert resp.status_code == 400


def test_admin_session_creates_admin_and_keeps_its_session(app, container):
    root = container.user_service.register(
        {"username": "root", "password": "secret123", "name": "Root", "email": "r@example.org", "role": "admin"},
        allow_admin=True,
    )
    c = app.test_client()
    assert c.post("/api/login", json={"username": "root", "password": "secret123"}).status_code == 200

    resp = c.post(
        "/api/register",
        json={"username": "second", "password": "secret123", "name": "Second", "email": "s@example.org", "role": "admin"},
    )

    assert resp.status_code == 201
    assert resp.get_json()["role"] == "admin"
    assert c.get("/api/user").get_json()["id"] == root.id


def test_service_rejects_admin_role_by_default(container):
    with pytest.raises(ValidationError) as exc:
        container.user_service.register(
            {"username": "eve", "password": "secret123", "name": "Eve", "email": "e@example.org", "role": "admin"}
        )
    assert exc.value.errors[0]["path"] == ["role"]
    assert container.user_service.list_all() == []


def test_concurrent_sign_up_keeps_usernames_unique(container):
    start = threading.Barrier(6)
    failures: list[ValidationError] = []

    def sign_up():
        start.wait()
        try:
            container.user_service.register({"username": "dup", "password": "secret123", "name": "D", "email": "d@x.org"})
        except ValidationError as e:
            failures.append(e)

    threads = [threading.Thread(target=sign_up) for _ in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [u.username for u in container.user_service.list_all()] == ["dup"]
    assert len(failures) == 5
    assert all(e.errors[0]["path"] == ["username"] for e in failures)
