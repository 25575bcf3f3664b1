"""In-memory user repository for testing."""

from typing import List, Optional

from devconnect.domain.model import User
from devconnect.domain.repository import UserRepository
from devconnect.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> List[User]:
        return [self._users[i] for i in dict.fromkeys(user_ids) if i in self._users]

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None
