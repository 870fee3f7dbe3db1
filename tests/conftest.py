"""Pytest fixtures and configuration for gymtracker tests."""

import pytest
import uuid
from datetime import datetime, timedelta

import jwt
from fastapi.testclient import TestClient

from gymtracker.api.app import create_app
from gymtracker.config import Settings
from gymtracker.database.memory_store import MemoryStore
from gymtracker.models.gym_class import GymClassCreate


@pytest.fixture
def test_user_id():
    """Subject injected by the demo identity."""
    return "demo-user-123"


@pytest.fixture
def settings(test_user_id):
    """Demo-mode settings independent of the process environment."""
    return Settings(auth_mode="demo", demo_user_id=test_user_id, demo_user_email="demo@example.com")


@pytest.fixture
def store():
    """A fresh, empty record store for each test."""
    return MemoryStore()


@pytest.fixture
def sample_class_base():
    """Base create payload that tests can override."""
    return {
        "date": "2024-03-01",
        "attendance": 5,
        "notes": "leg day",
    }


@pytest.fixture
def sample_class_input(sample_class_base):
    """Create a sample GymClassCreate object for testing."""
    return GymClassCreate(**sample_class_base)


@pytest.fixture
def app(settings, store):
    """Application wired to the test store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def test_client(app):
    """Create a FastAPI test client for the demo-identity app."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def other_user_id():
    """A second owner for isolation checks."""
    return f"other-{uuid.uuid4()}"


@pytest.fixture
def jwt_secret():
    """Signing secret for jwt-mode tests."""
    return "test-secret"


@pytest.fixture
def issue_token(jwt_secret):
    """Return a function that signs HS256 bearer tokens for tests."""
    def _issue(user_id, email=None, expires_in=timedelta(hours=1), secret=None):
        payload = {"sub": user_id, "iat": datetime.utcnow(), "exp": datetime.utcnow() + expires_in}
        if email:
            payload["email"] = email
        return jwt.encode(payload, secret or jwt_secret, algorithm="HS256")
    return _issue
