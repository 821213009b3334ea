"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app


@pytest.fixture
def app():
    """Create a fresh app with an empty store."""
    return create_app(Settings(seed_demo_users=False))


@pytest.fixture
def client(app):
    """Create test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store(app):
    """The store owned by the test app."""
    return app.state.user_store


@pytest.fixture
def anshul():
    """A valid user payload."""
    return {"name": "Anshul", "age": 21, "isMarried": False}
