"""Token issuing service."""

import logfire

from devconnect.config import AuthSettings
from devconnect.util import jwt

from .base import Service


class JWTService(Service):
    """Issues and checks access tokens with the configured secret."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Sign a token for a user who just registered or logged in."""
        token = jwt.create_token(user_id, self.auth_settings)
        logfire.info("Token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> jwt.TokenPayload:
        """Decode a token presented by a client.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return jwt.verify_token(token, self.auth_settings)
        except jwt.JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise
