"""Integration tests for PostgresPostRepository.

These run against the database at DATABASE__URL, migrated to head, and are
skipped when it isn't configured.
"""

import os
from datetime import datetime
from uuid import uuid4

import pytest

from devconnect.domain.model import Comment, Like, Post
from devconnect.domain.repository import PostRepository
from devconnect.domain.value import CommentId, LikeId, PostId, UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="PostgreSQL not configured"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def make_post(user_id: UserId) -> Post:
    return Post(
        id=PostId(uuid4()),
        user_id=user_id,
        text="Hello",
        name="Ada",
        avatar=None,
        created_at=datetime.now(),
    )


class TestPostRepositoryIntegration:
    """Likes and comments survive a JSONB round trip."""

    @pytest.mark.asyncio
    async def test_save_then_update_embedded_lists(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        author = UserId(uuid4())
        post = await post_repo.save(make_post(author))

        updated = post.model_copy(
            update={
                "likes": [Like(id=LikeId(uuid4()), user_id=author)],
                "comments": [
                    Comment(
                        id=CommentId(uuid4()),
                        user_id=author,
                        text="First",
                        name="Ada",
                        avatar=None,
                        created_at=datetime.now(),
                    )
                ],
            }
        )
        await post_repo.save(updated)

        found = await post_repo.find_by_id(post.id)
        assert found is not None
        assert found.likes == updated.likes
        assert [c.text for c in found.comments] == ["First"]

        assert await post_repo.delete_by_author(author) == 1
        assert await post_repo.find_by_id(post.id) is None
