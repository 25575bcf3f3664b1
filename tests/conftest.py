"""Test configuration and fixtures."""

import logfire
import pytest

from devconnect.config import AuthSettings

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(jwt_secret="test-secret", jwt_expiry_seconds=3600)
