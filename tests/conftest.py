"""
Shared fixtures: every test gets its own app on a private in-memory SQLite
database, a fixed signing secret and the cheapest bcrypt cost.
"""

import pytest
from fastapi.testclient import TestClient

from nexora.application import create_app
from nexora.settings import Settings

TEST_SECRET = "test-secret-key"


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, database_url="sqlite://", bcrypt_rounds=4)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.db.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client):
    """Register a user and return the ``{user, token}`` body."""

    def _register(name="Alice", email="alice@example.com", password="s3cret-pass", position=None):
        body = {"name": name, "email": email, "password": password}
        if position is not None:
            body["position"] = position
        r = client.post("/api/auth/register", json=body)
        assert r.status_code == 200, r.text
        return r.json()

    return _register


@pytest.fixture
def alice(register):
    return register()


@pytest.fixture
def bob(register):
    return register(name="Bob", email="bob@example.com", password="hunter2-pass")
