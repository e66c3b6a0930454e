import pytest

from lifejournal.core.store.keys import goals_key

pytestmark = pytest.mark.integration


def _create_goal(client, writer, **fields):
    payload = {"title": "Run a half marathon", "category": "health", "targetDate": "2026-12-31"}
    payload.update(fields)
    return client.post("/api/goals", json=payload, headers=writer["headers"])


def test_create_goal_defaults(client, writer):
    resp = _create_goal(client, writer)
    assert resp.status_code == 201
    goal = resp.get_json()["goal"]
    assert goal["id"]
    assert goal["userId"] == writer["user_id"]
    assert goal["status"] == "active"
    assert goal["progress"] == 0
    assert goal["priority"] == "medium"
    assert goal["targetDate"] == "2026-12-31"
    assert goal["createdAt"] == goal["updatedAt"]


@pytest.mark.parametrize(
    "fields",
    [{"title": ""}, {"category": "astrology"}, {"priority": "urgent"}, {"progress": 120}, {"targetDate": "someday"}],
)
def test_create_goal_validation(client, writer, fields):
    resp = _create_goal(client, writer, **fields)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"


def test_list_goals_newest_first(client, writer):
    first = _create_goal(client, writer, title="first").get_json()["goal"]
    second = _create_goal(client, writer, title="second").get_json()["goal"]
    resp = client.get("/api/goals", headers=writer["headers"])
    assert resp.get_json()["goals"] == [second, first]


def test_goals_are_private(client, writer, other_writer):
    _create_goal(client, writer)
    assert client.get("/api/goals", headers=other_writer["headers"]).get_json()["goals"] == []
    forbidden = client.get(f"/api/goals?userId={writer['user_id']}", headers=other_writer["headers"])
    assert forbidden.status_code == 403


def test_update_goal_merges_fields_in_place(client, writer):
    older = _create_goal(client, writer, title="older").get_json()["goal"]
    newer = _create_goal(client, writer, title="newer").get_json()["goal"]

    resp = client.put(
        "/api/goals",
        json={"goalId": older["id"], "updates": {"description": "Sub 2 hours", "status": "completed", "progress": 30}},
        headers=writer["headers"],
    )
    assert resp.status_code == 200
    updated = resp.get_json()["goal"]
    assert updated["id"] == older["id"]
    assert updated["title"] == "older"
    assert updated["description"] == "Sub 2 hours"
    assert updated["status"] == "completed"
    assert updated["progress"] == 30
    assert updated["createdAt"] == older["createdAt"]

    goals = client.get("/api/goals", headers=writer["headers"]).get_json()["goals"]
    assert [goal["id"] for goal in goals] == [newer["id"], older["id"]]


def test_update_goal_can_clear_target_date(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.put(
        "/api/goals",
        json={"goalId": goal["id"], "updates": {"targetDate": None}},
        headers=writer["headers"],
    )
    assert resp.get_json()["goal"]["targetDate"] is None


def test_update_unknown_goal(client, writer):
    resp = client.put(
        "/api/goals",
        json={"goalId": "missing", "updates": {"title": "x"}},
        headers=writer["headers"],
    )
    assert resp.status_code == 404
    assert resp.get_json() == {"ok": False, "error": "not_found"}


def test_update_requires_goal_id(client, writer):
    resp = client.put("/api/goals", json={"updates": {"title": "x"}}, headers=writer["headers"])
    assert resp.status_code == 400


def test_update_goal_rejects_blank_title(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.put(
        "/api/goals",
        json={"goalId": goal["id"], "updates": {"title": "   "}},
        headers=writer["headers"],
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "validation_error"
    stored = client.get("/api/goals", headers=writer["headers"]).get_json()["goals"][0]
    assert stored["title"] == "Run a half marathon"


def test_update_goal_strips_title(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.put(
        "/api/goals",
        json={"goalId": goal["id"], "updates": {"title": "  Run a full marathon  "}},
        headers=writer["headers"],
    )
    assert resp.get_json()["goal"]["title"] == "Run a full marathon"


@pytest.mark.parametrize(
    "progress,expected,status",
    [(40, 40, "active"), (100, 100, "completed"), (150, 100, "completed"), (-5, 0, "active")],
)
def test_progress_update_clamps_and_sets_status(client, writer, progress, expected, status):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.patch(
        f"/api/goals/{goal['id']}/progress",
        json={"progress": progress},
        headers=writer["headers"],
    )
    assert resp.status_code == 200
    updated = resp.get_json()["goal"]
    assert updated["progress"] == expected
    assert updated["status"] == status


def test_progress_below_100_reopens_completed_goal(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    url = f"/api/goals/{goal['id']}/progress"
    client.patch(url, json={"progress": 100}, headers=writer["headers"])
    resp = client.patch(url, json={"progress": 80}, headers=writer["headers"])
    assert resp.get_json()["goal"]["status"] == "active"


def test_progress_unknown_goal(client, writer):
    resp = client.patch("/api/goals/missing/progress", json={"progress": 10}, headers=writer["headers"])
    assert resp.status_code == 404


def test_delete_goal(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.delete(f"/api/goals?goalId={goal['id']}", headers=writer["headers"])
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}
    assert client.get("/api/goals", headers=writer["headers"]).get_json()["goals"] == []


def test_delete_goal_id_from_body(client, writer):
    goal = _create_goal(client, writer).get_json()["goal"]
    resp = client.delete("/api/goals", json={"goalId": goal["id"]}, headers=writer["headers"])
    assert resp.status_code == 200
    assert client.get("/api/goals", headers=writer["headers"]).get_json()["goals"] == []


def test_delete_unknown_goal_leaves_list_unchanged(client, store, writer):
    _create_goal(client, writer)
    before = store.get(goals_key(writer["user_id"]))
    resp = client.delete("/api/goals?goalId=missing", headers=writer["headers"])
    assert resp.status_code == 200
    assert store.get(goals_key(writer["user_id"])) == before


def test_delete_requires_goal_id(client, writer):
    resp = client.delete("/api/goals", headers=writer["headers"])
    assert resp.status_code == 400
