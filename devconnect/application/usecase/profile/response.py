"""Profile response models."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from devconnect.domain.model import Education, Experience, Profile, User


class UserSummary(BaseModel):
    """Public part of a user, embedded in profiles."""

    id: str
    name: str
    avatar: str | None

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=str(user.id), name=user.name, avatar=user.avatar)


class ExperienceResponse(BaseModel):
    """Experience entry as returned to clients."""

    id: str
    title: str
    company: str
    location: str | None
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Experience) -> "ExperienceResponse":
        return cls(
            id=str(entry.id),
            title=entry.title,
            company=entry.company,
            location=entry.location,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class EducationResponse(BaseModel):
    """Education entry as returned to clients."""

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(serialization_alias="from")
    to_date: date | None = Field(serialization_alias="to")
    current: bool
    description: str | None

    @classmethod
    def from_domain(cls, entry: Education) -> "EducationResponse":
        return cls(
            id=str(entry.id),
            school=entry.school,
            degree=entry.degree,
            fieldofstudy=entry.fieldofstudy,
            from_date=entry.from_date,
            to_date=entry.to_date,
            current=entry.current,
            description=entry.description,
        )


class ProfileResponse(BaseModel):
    """Profile document with its owner populated."""

    id: str
    user: UserSummary | None  # None if the owner's account is gone
    company: str | None
    location: str | None
    website: str
    bio: str | None
    skills: list[str]
    status: str
    githubusername: str | None
    social: dict[str, str]
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    created_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile, user: User | None) -> "ProfileResponse":
        return cls(
            id=str(profile.id),
            user=UserSummary.from_user(user) if user else None,
            company=profile.company,
            location=profile.location,
            website=profile.website,
            bio=profile.bio,
            skills=profile.skills,
            status=profile.status,
            githubusername=profile.githubusername,
            social=profile.social.model_dump(),
            experience=[ExperienceResponse.from_domain(e) for e in profile.experience],
            education=[EducationResponse.from_domain(e) for e in profile.education],
            created_at=profile.created_at,
        )
