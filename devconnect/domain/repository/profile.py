"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devconnect.domain.model.profile import Profile
from devconnect.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    Profiles are looked up by their owner; there is at most one per user.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Profile]:
        """Return every profile, oldest first."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or replace the whole document).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> bool:
        """Delete the profile owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            True if a profile was deleted
        """
        pass
