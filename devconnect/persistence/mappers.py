"""Mappers for converting between database rows and domain models.

Embedded lists are stored as JSON (aliases included, so experience entries
keep their "from"/"to" keys) and validated back into domain models on load.
"""

from typing import Any, Dict
from uuid import UUID

from devconnect.domain.model import Comment, Education, Experience, Like, Post, Profile, User
from devconnect.domain.value import PostId, ProfileId, SocialLinks, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        avatar=row.get("avatar"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict (JSONB columns already decoded)

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        company=row.get("company"),
        location=row.get("location"),
        website=row.get("website") or "",
        bio=row.get("bio"),
        skills=list(row.get("skills") or []),
        status=row["status"],
        githubusername=row.get("githubusername"),
        social=SocialLinks.model_validate(row.get("social") or {}),
        experience=[Experience.model_validate(e) for e in row.get("experience") or []],
        education=[Education.model_validate(e) for e in row.get("education") or []],
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    data = profile.model_dump(exclude={"social", "experience", "education"})
    data["social"] = profile.social.model_dump(mode="json")
    data["experience"] = [
        e.model_dump(mode="json", by_alias=True) for e in profile.experience
    ]
    data["education"] = [
        e.model_dump(mode="json", by_alias=True) for e in profile.education
    ]
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict (JSONB columns already decoded)

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        text=row["text"],
        name=row.get("name"),
        avatar=row.get("avatar"),
        likes=[Like.model_validate(like) for like in row.get("likes") or []],
        comments=[Comment.model_validate(c) for c in row.get("comments") or []],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump(exclude={"likes", "comments"})
    data["likes"] = [like.model_dump(mode="json") for like in post.likes]
    data["comments"] = [c.model_dump(mode="json") for c in post.comments]
    return data
