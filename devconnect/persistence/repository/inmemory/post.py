"""In-memory post repository for testing."""

from typing import List, Optional

from devconnect.domain.model import Post
from devconnect.domain.repository import PostRepository
from devconnect.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_all(self) -> List[Post]:
        # Newest first
        return sorted(self._posts.values(), key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def delete_by_author(self, user_id: UserId) -> int:
        doomed = [pid for pid, p in self._posts.items() if p.user_id == user_id]
        for post_id in doomed:
            del self._posts[post_id]
        return len(doomed)
