"""User aggregate root.

Users register with an email and password and own at most one profile.
"""

from datetime import datetime

from pydantic import Field

from devconnect.domain.model.common import DomainModel
from devconnect.domain.value import UserId


class User(DomainModel):
    """User account."""

    id: UserId
    name: str = Field(min_length=1)
    email: str
    password_hash: str
    avatar: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
