"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devconnect.domain.model.post import Post
from devconnect.domain.value import PostId, UserId


class PostRepository(ABC):
    """Stores post documents.

    Likes and comments live inside the post, so ``save`` writes them back
    whole and the last writer wins.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Every post, newest ``created_at`` first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Remove a post; False when it didn't exist."""
        pass

    @abstractmethod
    async def delete_by_author(self, user_id: UserId) -> int:
        """Remove every post a user wrote and return how many there were."""
        pass
