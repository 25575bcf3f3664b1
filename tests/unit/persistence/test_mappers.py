"""Unit tests for row/domain mappers."""

from datetime import date, datetime
from uuid import uuid4

from devconnect.domain.model import Comment, Experience, Like, Post, Profile
from devconnect.domain.value import (
    CommentId,
    ExperienceId,
    LikeId,
    PostId,
    ProfileId,
    SocialLinks,
    UserId,
)
from devconnect.persistence.mappers import (
    post_to_dict,
    profile_to_dict,
    row_to_post,
    row_to_profile,
)


class TestProfileMapper:
    """Tests for profile mapping."""

    def test_embedded_lists_are_stored_as_json(self):
        experience = Experience(
            id=ExperienceId(uuid4()),
            title="Developer",
            company="Acme",
            from_date=date(2020, 1, 1),
        )
        profile = Profile(
            id=ProfileId(uuid4()),
            user_id=UserId(uuid4()),
            status="dev",
            skills=[" js"],
            social=SocialLinks(twitter="https://twitter.com/dev"),
            experience=[experience],
            created_at=datetime(2024, 1, 1, 12, 0),
        )

        data = profile_to_dict(profile)

        assert data["experience"][0]["from"] == "2020-01-01"
        assert data["experience"][0]["id"] == str(experience.id)
        assert data["social"]["twitter"] == "https://twitter.com/dev"

        # JSONB columns come back decoded, UUID columns as UUIDs
        loaded = row_to_profile(data)
        assert loaded == profile

    def test_missing_json_columns_default_to_empty(self):
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "status": "dev",
            "website": None,
            "skills": None,
            "social": None,
            "experience": None,
            "education": None,
            "created_at": datetime.now(),
        }

        profile = row_to_profile(row)

        assert profile.website == ""
        assert profile.skills == []
        assert profile.experience == []
        assert profile.social == SocialLinks()


class TestPostMapper:
    """Tests for post mapping."""

    def test_likes_and_comments_survive_a_round_trip(self):
        user_id = UserId(uuid4())
        post = Post(
            id=PostId(uuid4()),
            user_id=user_id,
            text="Hello",
            likes=[Like(id=LikeId(uuid4()), user_id=user_id)],
            comments=[
                Comment(
                    id=CommentId(uuid4()),
                    user_id=user_id,
                    text="Nice",
                    created_at=datetime(2024, 1, 1, 12, 0),
                )
            ],
            created_at=datetime(2024, 1, 1, 11, 0),
        )

        data = post_to_dict(post)

        assert data["likes"][0]["user_id"] == str(user_id)
        assert row_to_post(data) == post
