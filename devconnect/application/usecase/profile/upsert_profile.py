"""Upsert profile use case."""

import logfire
from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.service import ProfileService, UserService
from devconnect.domain.value import ProfileFields

from .response import ProfileResponse


class UpsertProfileRequest(BaseModel):
    """Create or overwrite the caller's profile."""

    caller: CallerContext
    fields: ProfileFields


class UpsertProfileUseCase:
    """Use case for creating or updating the caller's profile."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize upsert profile use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: UpsertProfileRequest) -> ProfileResponse:
        """Execute upsert flow.

        Every editable field of an existing profile is replaced, so fields
        missing from the request are cleared. Experience and education are
        kept.

        Args:
            request: Caller and submitted fields

        Returns:
            The saved profile
        """
        user_id = request.caller.user_id

        with logfire.span("upsert_profile.execute", user_id=str(user_id)):
            profile = await self.profile_service.upsert(user_id, request.fields)
            user = await self.user_service.get_user_by_id(user_id)
            return ProfileResponse.from_domain(profile, user)
