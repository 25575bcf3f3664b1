"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devconnect.domain.model.user import User
from devconnect.domain.value import UserId


class UserRepository(ABC):
    """Stores user accounts; emails are unique and kept lowercase."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> List[User]:
        """Load every account among ``user_ids`` in one round trip."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Look up an account by its normalized email."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new account or overwrite an existing one with the same id."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Remove an account; False when there was nothing to remove."""
        pass
