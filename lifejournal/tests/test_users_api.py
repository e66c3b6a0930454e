import pytest

from lifejournal.core.store.keys import user_key

pytestmark = pytest.mark.integration


def test_get_own_profile(client, writer):
    resp = client.get("/api/user", headers=writer["headers"])
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["id"] == writer["user_id"]
    assert "passwordHash" not in user


def test_get_profile_by_email_query(client, writer):
    resp = client.get("/api/user?email=Writer@Example.com", headers=writer["headers"])
    assert resp.status_code == 200


def test_get_other_profile_is_forbidden(client, writer, other_writer):
    resp = client.get("/api/user?email=other@example.com", headers=writer["headers"])
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "forbidden"


def test_get_profile_missing_record(client, store, writer):
    store.set(user_key("writer@example.com"), None)
    resp = client.get("/api/user", headers=writer["headers"])
    assert resp.status_code == 404


def test_update_profile_merges_fields(client, store, writer):
    resp = client.put(
        "/api/user",
        json={"email": "writer@example.com", "updates": {"name": "Renamed", "plan": "pro"}},
        headers=writer["headers"],
    )
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["name"] == "Renamed"
    assert user["plan"] == "pro"
    assert user["settings"]["notifications"] is True
    assert store.get(user_key("writer@example.com"))["passwordHash"]


def test_update_profile_without_email_uses_caller(client, writer):
    resp = client.put(
        "/api/user",
        json={"updates": {"settings": {"notifications": False}}},
        headers=writer["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["user"]["settings"] == {"notifications": False}


def test_update_cannot_change_email_or_credentials(client, store, writer):
    resp = client.put(
        "/api/user",
        json={"updates": {"email": "hijack@example.com", "passwordHash": "x", "name": "Still Me"}},
        headers=writer["headers"],
    )
    assert resp.status_code == 200
    assert resp.get_json()["user"]["email"] == "writer@example.com"
    assert store.get(user_key("hijack@example.com")) is None
    assert store.get(user_key("writer@example.com"))["passwordHash"].startswith("$2")


def test_update_other_user_is_forbidden(client, writer, other_writer):
    resp = client.put(
        "/api/user",
        json={"email": "other@example.com", "updates": {"name": "Nope"}},
        headers=writer["headers"],
    )
    assert resp.status_code == 403


def test_update_rejects_unknown_plan(client, writer):
    resp = client.put("/api/user", json={"updates": {"plan": "platinum"}}, headers=writer["headers"])
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_update_requires_token(client):
    resp = client.put("/api/user", json={"updates": {"name": "x"}})
    assert resp.status_code == 401


@pytest.mark.parametrize("name", ["", "   "])
def test_update_with_blank_name_keeps_existing(client, writer, name):
    resp = client.put("/api/user", json={"updates": {"name": name, "plan": "pro"}}, headers=writer["headers"])
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["name"] == "Writer"
    assert user["plan"] == "pro"


def test_update_strips_name(client, writer):
    resp = client.put("/api/user", json={"updates": {"name": "  Jo  "}}, headers=writer["headers"])
    assert resp.get_json()["user"]["name"] == "Jo"
