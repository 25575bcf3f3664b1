"""Profile aggregate root.

One profile per user. Experience and education are embedded lists ordered
newest-first by insertion; each entry carries its own id so it can be
removed individually.
"""

from datetime import date, datetime

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.model.keyed_list import KeyedList
from devconnect.domain.value import (
    EducationId,
    ExperienceId,
    ProfileId,
    SocialLinks,
    UserId,
)


class Experience(DomainModel):
    """Work experience entry."""

    id: ExperienceId
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class Education(DomainModel):
    """Education entry."""

    id: EducationId
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(default=None, alias="to")
    current: bool = False
    description: str | None = None


class Profile(DomainModel):
    """Developer profile."""

    id: ProfileId
    user_id: UserId
    company: str | None = None
    location: str | None = None
    website: str = ""
    bio: str | None = None
    skills: list[str] = Field(default_factory=list)
    status: str
    githubusername: str | None = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def experience_entries(self) -> KeyedList[Experience]:
        """Experience as a keyed list."""
        return KeyedList(self.experience)

    def education_entries(self) -> KeyedList[Education]:
        """Education as a keyed list."""
        return KeyedList(self.education)
