"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from flightops.api.app import app
from flightops.api.deps import get_current_user, get_db
from tests.persistence.fake_firestore import FakeFirestoreClient

TEST_USER_ID = "api-test-user"


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def test_app(fake_client):
    """FastAPI app with dependency overrides for testing."""
    # Override auth to return a fixed test user
    app.dependency_overrides[get_current_user] = lambda: TEST_USER_ID
    app.dependency_overrides[get_db] = lambda: fake_client
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
