"""Unit tests for PostService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from devconnect.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from devconnect.domain.model import Comment, Post
from devconnect.domain.repository import PostRepository
from devconnect.domain.service import PostService
from devconnect.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_post(author_id: UserId, text: str = "Hello world", **kwargs) -> Post:
    return Post(
        id=PostId(uuid4()),
        user_id=author_id,
        text=text,
        name="Author",
        **kwargs,
    )


def make_comment(user_id: UserId, text: str = "Nice post") -> Comment:
    return Comment(id=CommentId(uuid4()), user_id=user_id, text=text, name="Commenter")


class TestPostService:
    """Tests for PostService."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, unit_env):
        service = await unit_env.get(PostService)
        author = UserId(uuid4())
        now = datetime.now()
        old = await service.save_post(
            make_post(author, "old", created_at=now - timedelta(hours=1))
        )
        new = await service.save_post(make_post(author, "new", created_at=now))

        posts = await service.list_posts()

        assert [p.id for p in posts] == [new.id, old.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [str(uuid4()), "garbage"])
    async def test_require_post_missing_or_malformed(self, unit_env, post_id):
        service = await unit_env.get(PostService)

        assert await service.get_post_by_id(post_id) is None
        with pytest.raises(NotFoundError):
            await service.require_post(post_id)

    @pytest.mark.asyncio
    async def test_delete_post_by_author(self, unit_env):
        service = await unit_env.get(PostService)
        author = UserId(uuid4())
        post = await service.save_post(make_post(author))

        await service.delete_post(str(post.id), author)

        assert await service.get_post_by_id(str(post.id)) is None

    @pytest.mark.asyncio
    async def test_delete_post_by_non_author_keeps_post(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await service.delete_post(str(post.id), UserId(uuid4()))

        assert await service.get_post_by_id(str(post.id)) is not None

    @pytest.mark.asyncio
    async def test_delete_by_author_only_removes_their_posts(self, unit_env):
        service = await unit_env.get(PostService)
        author, other = UserId(uuid4()), UserId(uuid4())
        await service.save_post(make_post(author))
        await service.save_post(make_post(author))
        kept = await service.save_post(make_post(other))

        assert await service.delete_by_author(author) == 2
        assert [p.id for p in await service.list_posts()] == [kept.id]

    @pytest.mark.asyncio
    async def test_like_prepends_and_rejects_second_like(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))
        alice, bob = UserId(uuid4()), UserId(uuid4())

        await service.like(str(post.id), alice)
        likes = await service.like(str(post.id), bob)
        assert [like.user_id for like in likes] == [bob, alice]

        with pytest.raises(BusinessRuleViolationError, match="Post already liked"):
            await service.like(str(post.id), alice)

        post_repo = await unit_env.get(PostRepository)
        stored = await post_repo.find_by_id(post.id)
        assert len(stored.likes) == 2

    @pytest.mark.asyncio
    async def test_unlike(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))
        alice, bob = UserId(uuid4()), UserId(uuid4())
        await service.like(str(post.id), alice)
        await service.like(str(post.id), bob)

        likes = await service.unlike(str(post.id), alice)

        assert [like.user_id for like in likes] == [bob]

    @pytest.mark.asyncio
    async def test_unlike_never_liked_post(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))

        with pytest.raises(
            BusinessRuleViolationError, match="Post has not yet been liked"
        ):
            await service.unlike(str(post.id), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_like_missing_post(self, unit_env):
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.like(str(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_add_comment_prepends(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))
        first = make_comment(UserId(uuid4()), "first")
        second = make_comment(UserId(uuid4()), "second")

        await service.add_comment(str(post.id), first)
        comments = await service.add_comment(str(post.id), second)

        assert [c.text for c in comments] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_delete_comment_removes_exactly_the_matching_entry(self, unit_env):
        """Deleting one of several comments by the same author keeps the others."""
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))
        author = UserId(uuid4())
        older = make_comment(author, "older")
        newer = make_comment(author, "newer")
        await service.add_comment(str(post.id), older)
        await service.add_comment(str(post.id), newer)

        comments = await service.delete_comment(str(post.id), str(older.id), author)

        assert [c.id for c in comments] == [newer.id]

    @pytest.mark.asyncio
    async def test_delete_comment_by_non_author(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))
        comment = make_comment(UserId(uuid4()))
        await service.add_comment(str(post.id), comment)

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(str(post.id), str(comment.id), UserId(uuid4()))

        stored = await service.require_post(str(post.id))
        assert [c.id for c in stored.comments] == [comment.id]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("comment_id", [str(uuid4()), "garbage"])
    async def test_delete_missing_comment(self, unit_env, comment_id):
        service = await unit_env.get(PostService)
        post = await service.save_post(make_post(UserId(uuid4())))

        with pytest.raises(NotFoundError) as exc_info:
            await service.delete_comment(str(post.id), comment_id, UserId(uuid4()))

        assert exc_info.value.resource == "Comment"
