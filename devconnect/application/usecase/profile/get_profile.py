"""Profile read use cases."""

import logfire
from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.error import NotFoundError
from devconnect.domain.service import ProfileService, UserService
from devconnect.domain.value import UserId, parse_uuid

from .response import ProfileResponse


class GetMyProfileRequest(BaseModel):
    """Get the caller's own profile."""

    caller: CallerContext


class GetProfileByUserRequest(BaseModel):
    """Get a profile by its owner's ID."""

    user_id: str  # Raw path parameter, may be malformed


class ListProfilesResponse(BaseModel):
    """All profiles."""

    profiles: list[ProfileResponse]


class GetMyProfileUseCase:
    """Use case for reading the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize get my profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetMyProfileRequest) -> ProfileResponse:
        """Load the caller's profile.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = request.caller.user_id
        profile = await self.profile_service.require_for_user(user_id)
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)


class GetProfileByUserUseCase:
    """Use case for reading any user's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: GetProfileByUserRequest) -> ProfileResponse:
        """Load a profile by owner.

        Raises:
            NotFoundError: If the ID is malformed or the user has no profile
        """
        parsed = parse_uuid(request.user_id)
        if parsed is None:
            logfire.warn("Malformed user id", user_id=request.user_id)
            raise NotFoundError("Profile", request.user_id)

        user_id = UserId(parsed)
        profile = await self.profile_service.require_for_user(user_id)
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)


class ListProfilesUseCase:
    """Use case for listing every profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self) -> ListProfilesResponse:
        profiles = await self.profile_service.list_profiles()
        users = await self.user_service.get_users_by_ids([p.user_id for p in profiles])

        return ListProfilesResponse(
            profiles=[
                ProfileResponse.from_domain(profile, users.get(profile.user_id))
                for profile in profiles
            ]
        )
