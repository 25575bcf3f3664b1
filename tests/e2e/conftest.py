"""Shared fixtures for end-to-end tests."""

import pytest
from fastapi.testclient import TestClient

from devconnect.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client on a fresh app with mocked components."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register a user and return auth headers for them."""

    def _register(name: str = "Ada", email: str | None = None) -> dict[str, str]:
        response = client.post(
            "/users",
            json={
                "name": name,
                "email": email or f"{name.lower()}@example.com",
                "password": "secret123",
            },
        )
        assert response.status_code == 200, response.text
        return {"x-auth-token": response.json()["token"]}

    return _register
