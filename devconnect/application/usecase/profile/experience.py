"""Experience use cases."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.model import Experience
from devconnect.domain.service import ProfileService, UserService
from devconnect.domain.value import ExperienceId

from .response import ProfileResponse


class AddExperienceRequest(BaseModel):
    """Add an experience entry to the caller's profile."""

    caller: CallerContext
    title: str
    company: str
    location: str | None = None
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class RemoveExperienceRequest(BaseModel):
    """Remove an experience entry from the caller's profile."""

    caller: CallerContext
    experience_id: str  # Raw path parameter


class AddExperienceUseCase:
    """Use case for adding work experience."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        """Initialize add experience use case.

        Args:
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddExperienceRequest) -> ProfileResponse:
        """Put a new entry at the front of the caller's experience.

        Raises:
            NotFoundError: If the caller has no profile
        """
        entry = Experience(
            id=ExperienceId(uuid4()),
            title=request.title,
            company=request.company,
            location=request.location,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        user_id = request.caller.user_id
        profile = await self.profile_service.add_experience(user_id, entry)
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)


class RemoveExperienceUseCase:
    """Use case for removing work experience."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveExperienceRequest) -> ProfileResponse:
        """Remove an entry by id; an unknown id leaves the profile as is.

        Raises:
            NotFoundError: If the caller has no profile
        """
        user_id = request.caller.user_id
        profile = await self.profile_service.remove_experience(
            user_id, request.experience_id
        )
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)
