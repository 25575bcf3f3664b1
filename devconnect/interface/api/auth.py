"""Authentication dependency for protected routes."""

import logfire
from fastapi import HTTPException, Request, status

from devconnect.application.usecase.common import CallerContext
from devconnect.config import AuthSettings
from devconnect.domain.service import JWTService
from devconnect.domain.value import UserId, parse_uuid
from devconnect.util.jwt import JWTError


def _extract_token(request: Request, header: str) -> str | None:
    token = request.headers.get(header)
    if token:
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


async def require_caller(request: Request) -> CallerContext:
    """Verify the request's token and return the caller.

    Use as ``caller: CallerContext = Depends(require_caller)``.

    Raises:
        HTTPException: 401 if the token is missing or not valid
    """
    container = request.state.dishka_container
    auth_settings = await container.get(AuthSettings)
    jwt_service = await container.get(JWTService)

    token = _extract_token(request, auth_settings.token_header)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )

    try:
        payload = jwt_service.verify_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        )

    user_id = parse_uuid(payload.user_id)
    if user_id is None:
        logfire.warn("Token carries a malformed user id")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is not valid",
        )

    return CallerContext(user_id=UserId(user_id))
