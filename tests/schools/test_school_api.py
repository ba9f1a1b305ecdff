from __future__ import annotations


def test_admin_creates_school(admin_client, school_payload):
    resp = admin_client.post("/api/schools", json=school_payload)

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["id"] == 1
    assert body["status"] == "active"
    assert body["principalId"] is None
    assert body["code"] == "X1"


def test_non_admin_cannot_create_school(teacher_client, school_payload, api):
    resp = teacher_client.post("/api/schools", json=school_payload)

    assert resp.status_code == 403
    assert api.schools_repo.list_all() == []


def test_anonymous_gets_401_and_store_is_untouched(client, school_payload, api):
    assert client.post("/api/schools", json=school_payload).status_code == 401
    assert client.get("/api/schools").status_code == 401
    assert api.schools_repo.list_all() == []


def test_duplicate_code_is_rejected(admin_client, school_payload):
    assert admin_client.post("/api/schools", json=school_payload).status_code == 201

    resp = admin_client.post("/api/schools", json={**school_payload, "name": "Other"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["errors"][0]["path"] == ["code"]


def test_invalid_payload_returns_message_and_errors(admin_client):
    resp = admin_client.post("/api/schools", json={"name": "X", "type": "university"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["message"].startswith("Validation error")
    assert {tuple(e["path"]) for e in body["errors"]} >= {("code",), ("type",)}


def test_get_missing_school_is_404(teacher_client):
    resp = teacher_client.get("/api/schools/12")
    assert resp.status_code == 404
    assert resp.get_json() == {"message": "School not found"}


def test_update_is_partial(admin_client, school_payload):
    school_id = admin_client.post("/api/schools", json=school_payload).get_json()["id"]

    resp = admin_client.put(f"/api/schools/{school_id}", json={"status": "inactive"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "inactive"
    assert body["name"] == "X"
    assert body["id"] == school_id


def test_update_cannot_overwrite_id(admin_client, school_payload):
    school_id = admin_client.post("/api/schools", json=school_payload).get_json()["id"]

    resp = admin_client.put(f"/api/schools/{school_id}", json={"id": 50})

    assert resp.status_code == 400
    assert admin_client.get(f"/api/schools/{school_id}").status_code == 200


def test_update_missing_school_is_404(admin_client):
    assert admin_client.put("/api/schools/3", json={"name": "Y"}).status_code == 404


def test_delete_twice_gives_404_second_time(admin_client, school_payload):
    school_id = admin_client.post("/api/schools", json=school_payload).get_json()["id"]

    first = admin_client.delete(f"/api/schools/{school_id}")
    second = admin_client.delete(f"/api/schools/{school_id}")

    assert first.status_code == 200
    assert first.get_json() == {"message": "School deleted successfully"}
    assert second.status_code == 404


def test_unexpected_failure_is_a_generic_500(admin_client, api, monkeypatch):
    def boom():
        raise RuntimeError("store exploded at 0xdeadbeef")

    monkeypatch.setattr(api.school_service, "list_all", boom)

    resp = admin_client.get("/api/schools")

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to fetch schools"}
