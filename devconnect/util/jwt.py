"""Signed access tokens.

Tokens are HS256 JWTs whose claims name the account as
``{"user": {"id": ...}}`` next to the standard ``iat`` and ``exp``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from devconnect.config import AuthSettings


class JWTError(Exception):
    """A token could not be accepted."""


class TokenSubject(BaseModel):
    id: str


class TokenPayload(BaseModel):
    """Decoded token claims."""

    user: TokenSubject
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> str:
        return self.user.id


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id``, valid for ``settings.jwt_expiry_seconds``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user": {"id": user_id},
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.jwt_expiry_seconds),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then return the claims.

    Raises:
        JWTError: If the token can't be trusted or names no user
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError:
        raise JWTError("Token carries no user")
