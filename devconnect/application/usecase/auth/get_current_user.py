"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.service import UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    caller: CallerContext


class GetCurrentUserResponse(BaseModel):
    """The caller's account, without the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the caller's user record.

        Raises:
            NotFoundError: If the account behind the token no longer exists
        """
        user = await self.user_service.get_by_id(request.caller.user_id)

        return GetCurrentUserResponse(
            id=str(user.id),
            name=user.name,
            email=user.email,
            avatar=user.avatar,
            created_at=user.created_at,
        )
