"""In-memory profile repository for testing."""

from typing import List, Optional

from devconnect.domain.model import Profile
from devconnect.domain.repository import ProfileRepository
from devconnect.domain.value import ProfileId, UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        return next(
            (p for p in self._profiles.values() if p.user_id == user_id), None
        )

    async def find_all(self) -> List[Profile]:
        return sorted(self._profiles.values(), key=lambda p: p.created_at)

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile
        return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        profile = await self.find_by_user(user_id)
        if not profile:
            return False
        del self._profiles[profile.id]
        return True
