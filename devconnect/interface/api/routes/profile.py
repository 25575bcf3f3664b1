"""Profile routes."""

from datetime import date
from typing import Annotated, Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from devconnect.adapter.github import GithubError
from devconnect.application.usecase.common import CallerContext, MessageResponse
from devconnect.application.usecase.profile import (
    AddEducationRequest,
    AddEducationUseCase,
    AddExperienceRequest,
    AddExperienceUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListGithubReposRequest,
    ListGithubReposUseCase,
    ListProfilesUseCase,
    ProfileResponse,
    RemoveEducationRequest,
    RemoveEducationUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
    UpsertProfileRequest,
    UpsertProfileUseCase,
)
from devconnect.domain.error import NotFoundError
from devconnect.domain.value import ProfileFields, SocialNetwork
from devconnect.interface.api.auth import require_caller
from devconnect.interface.api.validation import blank_to, required

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)

NO_PROFILE = "There is no profile for this user"


def _server_error(action: str, e: Exception) -> HTTPException:
    logfire.error(f"Unexpected error {action}", error=str(e))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Server error",
    )


def _no_profile(e: NotFoundError) -> HTTPException:
    logfire.warn("Caller has no profile", error=str(e))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NO_PROFILE)


class ProfileAPIRequest(BaseModel):
    """API request for creating or updating the caller's profile."""

    status: Annotated[str, BeforeValidator(required("Status is required"))] = Field(
        default=None, validate_default=True
    )
    skills: Annotated[
        str | list[str], BeforeValidator(required("Skills are required"))
    ] = Field(default=None, validate_default=True)
    company: str | None = None
    location: str | None = None
    website: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_fields(self) -> ProfileFields:
        return ProfileFields(
            company=self.company,
            location=self.location,
            website=self.website,
            bio=self.bio,
            skills=self.skills,
            status=self.status,
            githubusername=self.githubusername,
            social={
                network: getattr(self, network.value) for network in SocialNetwork
            },
        )


class ExperienceAPIRequest(BaseModel):
    """API request for adding an experience entry."""

    model_config = ConfigDict(populate_by_name=True)

    title: Annotated[str, BeforeValidator(required("Title is required"))] = Field(
        default=None, validate_default=True
    )
    company: Annotated[str, BeforeValidator(required("Company is required"))] = (
        Field(default=None, validate_default=True)
    )
    from_date: Annotated[
        date, BeforeValidator(required("From date is required"))
    ] = Field(default=None, alias="from", validate_default=True)
    to_date: Annotated[date | None, BeforeValidator(blank_to(None))] = Field(
        default=None, alias="to"
    )
    location: str | None = None
    current: Annotated[bool, BeforeValidator(blank_to(False))] = False
    description: str | None = None


class EducationAPIRequest(BaseModel):
    """API request for adding an education entry."""

    model_config = ConfigDict(populate_by_name=True)

    school: Annotated[str, BeforeValidator(required("School is required"))] = Field(
        default=None, validate_default=True
    )
    degree: Annotated[str, BeforeValidator(required("Degree is required"))] = Field(
        default=None, validate_default=True
    )
    fieldofstudy: Annotated[
        str, BeforeValidator(required("Field of study is required"))
    ] = Field(default=None, validate_default=True)
    from_date: Annotated[
        date, BeforeValidator(required("From date is required"))
    ] = Field(default=None, alias="from", validate_default=True)
    to_date: Annotated[date | None, BeforeValidator(blank_to(None))] = Field(
        default=None, alias="to"
    )
    current: Annotated[bool, BeforeValidator(blank_to(False))] = False
    description: str | None = None


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Get the caller's profile."""
    try:
        return await get_my_profile_use_case.execute(GetMyProfileRequest(caller=caller))
    except NotFoundError as e:
        raise _no_profile(e)
    except Exception as e:
        raise _server_error("loading own profile", e)


@router.post("", response_model=ProfileResponse)
async def upsert_profile(
    request: ProfileAPIRequest,
    upsert_profile_use_case: FromDishka[UpsertProfileUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Create or update the caller's profile.

    Every listed field is overwritten; fields left out are cleared.
    """
    try:
        return await upsert_profile_use_case.execute(
            UpsertProfileRequest(caller=caller, fields=request.to_fields())
        )
    except Exception as e:
        raise _server_error("saving profile", e)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
) -> list[ProfileResponse]:
    """List every profile."""
    try:
        result = await list_profiles_use_case.execute()
        return result.profiles
    except Exception as e:
        raise _server_error("listing profiles", e)


@router.get("/user/{user_id}", response_model=ProfileResponse)
async def get_profile_by_user(
    user_id: str,
    get_profile_by_user_use_case: FromDishka[GetProfileByUserUseCase],
) -> ProfileResponse:
    """Get a user's profile.

    Unknown and malformed IDs both answer 400 "Profile not found".
    """
    try:
        return await get_profile_by_user_use_case.execute(
            GetProfileByUserRequest(user_id=user_id)
        )
    except NotFoundError as e:
        logfire.warn("Profile lookup failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Profile not found",
        )
    except Exception as e:
        raise _server_error("loading profile", e)


@router.delete("", response_model=MessageResponse)
async def delete_account(
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    caller: CallerContext = Depends(require_caller),
) -> MessageResponse:
    """Delete the caller's posts, profile and account."""
    try:
        return await delete_account_use_case.execute(
            DeleteAccountRequest(caller=caller)
        )
    except Exception as e:
        raise _server_error("deleting account", e)


@router.put("/experience", response_model=ProfileResponse)
async def add_experience(
    request: ExperienceAPIRequest,
    add_experience_use_case: FromDishka[AddExperienceUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Add an experience entry to the front of the caller's list."""
    try:
        return await add_experience_use_case.execute(
            AddExperienceRequest(
                caller=caller,
                title=request.title,
                company=request.company,
                location=request.location,
                from_date=request.from_date,
                to_date=request.to_date,
                current=request.current,
                description=request.description,
            )
        )
    except NotFoundError as e:
        raise _no_profile(e)
    except Exception as e:
        raise _server_error("adding experience", e)


@router.delete("/experience/{experience_id}", response_model=ProfileResponse)
async def remove_experience(
    experience_id: str,
    remove_experience_use_case: FromDishka[RemoveExperienceUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Remove an experience entry; an unknown id changes nothing."""
    try:
        return await remove_experience_use_case.execute(
            RemoveExperienceRequest(caller=caller, experience_id=experience_id)
        )
    except NotFoundError as e:
        raise _no_profile(e)
    except Exception as e:
        raise _server_error("removing experience", e)


@router.put("/education", response_model=ProfileResponse)
async def add_education(
    request: EducationAPIRequest,
    add_education_use_case: FromDishka[AddEducationUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Add an education entry to the front of the caller's list."""
    try:
        return await add_education_use_case.execute(
            AddEducationRequest(
                caller=caller,
                school=request.school,
                degree=request.degree,
                fieldofstudy=request.fieldofstudy,
                from_date=request.from_date,
                to_date=request.to_date,
                current=request.current,
                description=request.description,
            )
        )
    except NotFoundError as e:
        raise _no_profile(e)
    except Exception as e:
        raise _server_error("adding education", e)


@router.delete("/education/{education_id}", response_model=ProfileResponse)
async def remove_education(
    education_id: str,
    remove_education_use_case: FromDishka[RemoveEducationUseCase],
    caller: CallerContext = Depends(require_caller),
) -> ProfileResponse:
    """Remove an education entry; an unknown id changes nothing."""
    try:
        return await remove_education_use_case.execute(
            RemoveEducationRequest(caller=caller, education_id=education_id)
        )
    except NotFoundError as e:
        raise _no_profile(e)
    except Exception as e:
        raise _server_error("removing education", e)


@router.get("/github/{username}")
async def list_github_repos(
    username: str,
    list_github_repos_use_case: FromDishka[ListGithubReposUseCase],
) -> list[dict[str, Any]]:
    """Latest public repositories of a GitHub user, as GitHub returns them."""
    try:
        return await list_github_repos_use_case.execute(
            ListGithubReposRequest(username=username)
        )
    except GithubError as e:
        logfire.warn("GitHub lookup failed", username=username, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No Github profile found",
        )
    except Exception as e:
        raise _server_error("listing GitHub repositories", e)
