"""Unit tests for ProfileService."""

from datetime import date
from uuid import uuid4

import pytest

from devconnect.domain.error import NotFoundError
from devconnect.domain.model import Education, Experience
from devconnect.domain.service import ProfileService
from devconnect.domain.value import (
    EducationId,
    ExperienceId,
    ProfileFields,
    SocialNetwork,
    UserId,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_experience(title: str = "Developer") -> Experience:
    return Experience(
        id=ExperienceId(uuid4()),
        title=title,
        company="Acme",
        from_date=date(2020, 1, 1),
    )


def make_education(school: str = "State University") -> Education:
    return Education(
        id=EducationId(uuid4()),
        school=school,
        degree="BSc",
        fieldofstudy="Computer Science",
        from_date=date(2014, 9, 1),
        to_date=date(2018, 6, 1),
    )


class TestParseSkills:
    """Tests for skills parsing."""

    def test_string_is_split_trimmed_and_space_prefixed(self):
        assert ProfileService.parse_skills("js, node") == [" js", " node"]

    def test_extra_whitespace_is_trimmed(self):
        assert ProfileService.parse_skills("  python ,go  ,rust") == [
            " python",
            " go",
            " rust",
        ]

    def test_list_is_kept_as_given(self):
        assert ProfileService.parse_skills(["js", "node"]) == ["js", "node"]


class TestBuildSocialLinks:
    """Tests for social link normalization."""

    def test_missing_links_become_empty(self):
        links = ProfileService.build_social_links(
            {SocialNetwork.TWITTER: "twitter.com/dev"}
        )

        assert links.twitter == "https://twitter.com/dev"
        assert links.youtube == ""
        assert links.instagram == ""


class TestProfileService:
    """Tests for ProfileService."""

    @pytest.mark.asyncio
    async def test_upsert_creates_profile(self, unit_env):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        profile = await service.upsert(
            user_id, ProfileFields(status="dev", skills="js, node")
        )

        assert profile.user_id == user_id
        assert profile.skills == [" js", " node"]
        assert profile.website == ""
        assert await service.get_for_user(user_id) == profile

    @pytest.mark.asyncio
    async def test_upsert_twice_keeps_only_second_fields_and_entries(self, unit_env):
        """Fields left out of the second upsert are cleared; experience stays."""
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())

        first = await service.upsert(
            user_id,
            ProfileFields(
                status="dev",
                skills="js",
                company="Acme",
                website="www.Example.com/",
                bio="Hi",
            ),
        )
        await service.add_experience(user_id, make_experience())

        second = await service.upsert(
            user_id, ProfileFields(status="lead", skills=["go"], location="Berlin")
        )

        assert second.id == first.id
        assert second.created_at == first.created_at
        assert second.status == "lead"
        assert second.skills == ["go"]
        assert second.location == "Berlin"
        assert second.company is None
        assert second.bio is None
        assert second.website == ""
        assert len(second.experience) == 1

    @pytest.mark.asyncio
    async def test_upsert_normalizes_website(self, unit_env):
        service = await unit_env.get(ProfileService)

        profile = await service.upsert(
            UserId(uuid4()),
            ProfileFields(status="dev", skills="js", website="http://WWW.Example.com/"),
        )

        assert profile.website == "https://example.com"

    @pytest.mark.asyncio
    async def test_add_experience_inserts_at_front(self, unit_env):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await service.upsert(user_id, ProfileFields(status="dev", skills="js"))

        older = make_experience("Junior")
        newer = make_experience("Senior")
        await service.add_experience(user_id, older)
        profile = await service.add_experience(user_id, newer)

        assert [e.title for e in profile.experience] == ["Senior", "Junior"]

    @pytest.mark.asyncio
    async def test_add_experience_without_profile_raises(self, unit_env):
        service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await service.add_experience(UserId(uuid4()), make_experience())

    @pytest.mark.asyncio
    async def test_remove_experience_by_id(self, unit_env):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await service.upsert(user_id, ProfileFields(status="dev", skills="js"))
        keep = make_experience("Keep")
        drop = make_experience("Drop")
        await service.add_experience(user_id, keep)
        await service.add_experience(user_id, drop)

        profile = await service.remove_experience(user_id, str(drop.id))

        assert [e.id for e in profile.experience] == [keep.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("experience_id", [str(uuid4()), "not-an-id"])
    async def test_remove_unknown_experience_is_noop(self, unit_env, experience_id):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await service.upsert(user_id, ProfileFields(status="dev", skills="js"))
        first = make_experience("First")
        last = make_experience("Last")
        await service.add_experience(user_id, last)
        await service.add_experience(user_id, first)

        profile = await service.remove_experience(user_id, experience_id)

        assert [e.title for e in profile.experience] == ["First", "Last"]

    @pytest.mark.asyncio
    async def test_education_add_and_remove(self, unit_env):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await service.upsert(user_id, ProfileFields(status="dev", skills="js"))
        school = make_education("School")
        college = make_education("College")

        await service.add_education(user_id, school)
        profile = await service.add_education(user_id, college)
        assert [e.school for e in profile.education] == ["College", "School"]

        profile = await service.remove_education(user_id, str(uuid4()))
        assert len(profile.education) == 2

        profile = await service.remove_education(user_id, str(school.id))
        assert [e.school for e in profile.education] == ["College"]

    @pytest.mark.asyncio
    async def test_delete_for_user(self, unit_env):
        service = await unit_env.get(ProfileService)
        user_id = UserId(uuid4())
        await service.upsert(user_id, ProfileFields(status="dev", skills="js"))

        assert await service.delete_for_user(user_id) is True
        assert await service.get_for_user(user_id) is None
        assert await service.delete_for_user(user_id) is False
