import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifejournal import create_app


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no app or store)")
    config.addinivalue_line("markers", "integration: Integration tests (app + memory store)")


@pytest.fixture()
def app():
    """Per-test app; the memory store is created fresh with each app."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return app.extensions["kv_store"]


@pytest.fixture()
def signup(client):
    """Register a user through the API and return its id, record and auth headers."""

    def _signup(email: str = "writer@example.com", password: str = "secret123", name: str = "Writer") -> dict:
        resp = client.post(
            "/api/auth",
            json={"action": "signup", "email": email, "password": password, "name": name},
        )
        assert resp.status_code == 201, resp.get_json()
        body = resp.get_json()
        return {
            "user": body["user"],
            "user_id": body["user"]["id"],
            "token": body["access_token"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }

    return _signup


@pytest.fixture()
def writer(signup):
    return signup()


@pytest.fixture()
def other_writer(signup):
    return signup(email="other@example.com", name="Other Writer")
