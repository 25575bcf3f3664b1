"""Profile domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from devconnect.domain.error import NotFoundError
from devconnect.domain.model import Education, Experience, MissingKeyPolicy, Profile
from devconnect.domain.repository import ProfileRepository
from devconnect.domain.value import (
    ProfileFields,
    ProfileId,
    SocialLinks,
    SocialNetwork,
    UserId,
    parse_uuid,
)
from devconnect.util.url import normalize_url

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations.

    Every mutation is a read-modify-write of the whole profile document.
    """

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_for_user(self, user_id: UserId) -> Profile | None:
        """Get the profile owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_for_user", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_user(user_id)
            if not profile:
                logfire.info("Profile not found", user_id=str(user_id))
            return profile

    async def require_for_user(self, user_id: UserId) -> Profile:
        """Get the profile owned by a user.

        Raises:
            NotFoundError: If the user has no profile
        """
        profile = await self.get_for_user(user_id)
        if not profile:
            raise NotFoundError("Profile", str(user_id))
        return profile

    async def list_profiles(self) -> list[Profile]:
        """List every profile."""
        with logfire.span("profile_service.list_profiles"):
            return await self.profile_repository.find_all()

    async def upsert(self, user_id: UserId, fields: ProfileFields) -> Profile:
        """Create the user's profile, or overwrite its editable fields.

        Every editable field is replaced, so a field left out of ``fields``
        ends up empty. Experience and education are kept.

        Args:
            user_id: Owner's user ID
            fields: Submitted profile fields

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.upsert", user_id=str(user_id)):
            values = {
                "company": fields.company,
                "location": fields.location,
                "website": normalize_url(fields.website),
                "bio": fields.bio,
                "skills": self.parse_skills(fields.skills),
                "status": fields.status,
                "githubusername": fields.githubusername,
                "social": self.build_social_links(fields.social),
            }

            existing = await self.profile_repository.find_by_user(user_id)
            if existing:
                profile = existing.model_copy(update=values)
                logfire.info("Updating profile", profile_id=str(profile.id))
            else:
                profile = Profile(
                    id=ProfileId(uuid4()),
                    user_id=user_id,
                    created_at=datetime.now(),
                    **values,
                )
                logfire.info("Creating profile", profile_id=str(profile.id))

            return await self.profile_repository.save(profile)

    async def add_experience(self, user_id: UserId, entry: Experience) -> Profile:
        """Put an experience entry at the front of the user's list.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.add_experience",
            user_id=str(user_id),
            experience_id=str(entry.id),
        ):
            profile = await self.require_for_user(user_id)
            experience = profile.experience_entries().prepend(entry)
            updated = profile.model_copy(update={"experience": experience.to_list()})
            return await self.profile_repository.save(updated)

    async def remove_experience(self, user_id: UserId, experience_id: str) -> Profile:
        """Remove an experience entry by id.

        An id that matches nothing (or isn't a valid id at all) leaves the
        list unchanged; the profile is saved and returned either way.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.remove_experience",
            user_id=str(user_id),
            experience_id=experience_id,
        ):
            profile = await self.require_for_user(user_id)
            entries = profile.experience_entries()
            remaining = entries.remove(
                parse_uuid(experience_id), missing=MissingKeyPolicy.IGNORE
            )
            if len(remaining) == len(entries):
                logfire.info("No experience entry to remove", experience_id=experience_id)
            updated = profile.model_copy(update={"experience": remaining.to_list()})
            return await self.profile_repository.save(updated)

    async def add_education(self, user_id: UserId, entry: Education) -> Profile:
        """Put an education entry at the front of the user's list.

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.add_education",
            user_id=str(user_id),
            education_id=str(entry.id),
        ):
            profile = await self.require_for_user(user_id)
            education = profile.education_entries().prepend(entry)
            updated = profile.model_copy(update={"education": education.to_list()})
            return await self.profile_repository.save(updated)

    async def remove_education(self, user_id: UserId, education_id: str) -> Profile:
        """Remove an education entry by id (no-op when nothing matches).

        Raises:
            NotFoundError: If the user has no profile
        """
        with logfire.span(
            "profile_service.remove_education",
            user_id=str(user_id),
            education_id=education_id,
        ):
            profile = await self.require_for_user(user_id)
            entries = profile.education_entries()
            remaining = entries.remove(
                parse_uuid(education_id), missing=MissingKeyPolicy.IGNORE
            )
            if len(remaining) == len(entries):
                logfire.info("No education entry to remove", education_id=education_id)
            updated = profile.model_copy(update={"education": remaining.to_list()})
            return await self.profile_repository.save(updated)

    async def delete_for_user(self, user_id: UserId) -> bool:
        """Delete the user's profile.

        Returns:
            True if a profile existed
        """
        with logfire.span("profile_service.delete_for_user", user_id=str(user_id)):
            return await self.profile_repository.delete_by_user(user_id)

    @staticmethod
    def parse_skills(skills: str | list[str]) -> list[str]:
        """Turn submitted skills into a list.

        A list is kept as given. A string is split on commas and every
        trimmed segment gets a single leading space, so "js, node" becomes
        [" js", " node"]. Stored profiles and the client rely on that shape.
        """
        if isinstance(skills, list):
            return skills
        return [" " + skill.strip() for skill in skills.split(",")]

    @staticmethod
    def build_social_links(links: dict[SocialNetwork, str | None]) -> SocialLinks:
        """Normalize submitted social links; missing or bad links become ""."""
        return SocialLinks(
            **{network.value: normalize_url(links.get(network)) for network in SocialNetwork}
        )
