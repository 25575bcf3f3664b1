"""Profile use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .education import (
    AddEducationRequest,
    AddEducationUseCase,
    RemoveEducationRequest,
    RemoveEducationUseCase,
)
from .experience import (
    AddExperienceRequest,
    AddExperienceUseCase,
    RemoveExperienceRequest,
    RemoveExperienceUseCase,
)
from .get_profile import (
    GetMyProfileRequest,
    GetMyProfileUseCase,
    GetProfileByUserRequest,
    GetProfileByUserUseCase,
    ListProfilesResponse,
    ListProfilesUseCase,
)
from .github_repos import ListGithubReposRequest, ListGithubReposUseCase
from .response import (
    EducationResponse,
    ExperienceResponse,
    ProfileResponse,
    UserSummary,
)
from .upsert_profile import UpsertProfileRequest, UpsertProfileUseCase

__all__ = [
    "AddEducationRequest",
    "AddEducationUseCase",
    "AddExperienceRequest",
    "AddExperienceUseCase",
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "EducationResponse",
    "ExperienceResponse",
    "GetMyProfileRequest",
    "GetMyProfileUseCase",
    "GetProfileByUserRequest",
    "GetProfileByUserUseCase",
    "ListGithubReposRequest",
    "ListGithubReposUseCase",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileResponse",
    "RemoveEducationRequest",
    "RemoveEducationUseCase",
    "RemoveExperienceRequest",
    "RemoveExperienceUseCase",
    "UpsertProfileRequest",
    "UpsertProfileUseCase",
    "UserSummary",
]
