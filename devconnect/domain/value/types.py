"""Domain value objects for devconnect."""

from enum import Enum

from pydantic import Field

from devconnect.domain.value.common import ValueObject


class SocialNetwork(str, Enum):
    """Networks a profile can link to."""

    YOUTUBE = "youtube"
    TWITTER = "twitter"
    FACEBOOK = "facebook"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"


class SocialLinks(ValueObject):
    """Social links of a profile.

    Every link is either a normalized https URL or an empty string.
    """

    youtube: str = ""
    twitter: str = ""
    facebook: str = ""
    linkedin: str = ""
    instagram: str = ""


class ProfileFields(ValueObject):
    """Owner-editable profile fields, as accepted by an upsert.

    Skills may arrive either as a comma separated string or as a list.
    """

    company: str | None = None
    location: str | None = None
    website: str | None = None
    bio: str | None = None
    skills: str | list[str]
    status: str
    githubusername: str | None = None
    social: dict[SocialNetwork, str | None] = Field(default_factory=dict)
