"""Education use cases."""

from datetime import date
from uuid import uuid4

from pydantic import BaseModel

from devconnect.application.usecase.common import CallerContext
from devconnect.domain.model import Education
from devconnect.domain.service import ProfileService, UserService
from devconnect.domain.value import EducationId

from .response import ProfileResponse


class AddEducationRequest(BaseModel):
    """Add an education entry to the caller's profile."""

    caller: CallerContext
    school: str
    degree: str
    fieldofstudy: str
    from_date: date
    to_date: date | None = None
    current: bool = False
    description: str | None = None


class RemoveEducationRequest(BaseModel):
    """Remove an education entry from the caller's profile."""

    caller: CallerContext
    education_id: str


class AddEducationUseCase:
    """Use case for adding education."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: AddEducationRequest) -> ProfileResponse:
        """Put a new entry at the front of the caller's education.

        Raises:
            NotFoundError: If the caller has no profile
        """
        entry = Education(
            id=EducationId(uuid4()),
            school=request.school,
            degree=request.degree,
            fieldofstudy=request.fieldofstudy,
            from_date=request.from_date,
            to_date=request.to_date,
            current=request.current,
            description=request.description,
        )
        user_id = request.caller.user_id
        profile = await self.profile_service.add_education(user_id, entry)
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)


class RemoveEducationUseCase:
    """Use case for removing education."""

    def __init__(
        self, profile_service: ProfileService, user_service: UserService
    ) -> None:
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: RemoveEducationRequest) -> ProfileResponse:
        user_id = request.caller.user_id
        profile = await self.profile_service.remove_education(
            user_id, request.education_id
        )
        user = await self.user_service.get_user_by_id(user_id)
        return ProfileResponse.from_domain(profile, user)
