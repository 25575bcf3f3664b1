"""Unit tests for UserService."""

from unittest.mock import patch
from uuid import uuid4

import pytest

from devconnect.domain.error import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from devconnect.domain.service import UserService
from devconnect.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_sets_gravatar(self, unit_env):
        service = await unit_env.get(UserService)

        user = await service.register("Ada", "Ada@Example.com", "secret123")

        assert user.email == "ada@example.com"
        assert user.password_hash != "secret123"
        assert user.avatar.startswith("//www.gravatar.com/avatar/")
        assert user.avatar.endswith("?s=200&r=pg&d=mm")

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, unit_env):
        service = await unit_env.get(UserService)
        await service.register("Ada", "ada@example.com", "secret123")

        with pytest.raises(AlreadyExistsError, match="User already exists"):
            await service.register("Other", "ADA@example.com", "secret456")

    @pytest.mark.asyncio
    async def test_authenticate(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("Ada", "ada@example.com", "secret123")

        assert (await service.authenticate("ada@example.com", "secret123")).id == user.id

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("ada@example.com", "wrong")
        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("nobody@example.com", "secret123")

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        service = await unit_env.get(UserService)
        user = await service.register("Ada", "ada@example.com", "secret123")

        assert await service.delete(user.id) is True
        with pytest.raises(NotFoundError):
            await service.get_by_id(user.id)

    def test_gravatar_url_is_stable(self):
        assert UserService.gravatar_url(" Ada@Example.com ") == UserService.gravatar_url(
            "ada@example.com"
        )

    @pytest.mark.asyncio
    async def test_get_users_by_ids_loads_in_one_call(self, unit_env):
        service = await unit_env.get(UserService)
        ada = await service.register("Ada", "ada@example.com", "secret123")
        bob = await service.register("Bob", "bob@example.com", "secret123")
        unknown = UserId(uuid4())

        with patch.object(
            service.user_repository,
            "find_by_id",
            side_effect=AssertionError("looked up one at a time"),
        ), patch.object(
            service.user_repository,
            "find_by_ids",
            wraps=service.user_repository.find_by_ids,
        ) as find_by_ids:
            users = await service.get_users_by_ids([ada.id, bob.id, ada.id, unknown])

        find_by_ids.assert_awaited_once_with([ada.id, bob.id, unknown])
        assert users == {ada.id: ada, bob.id: bob}

    @pytest.mark.asyncio
    async def test_get_users_by_ids_empty(self, unit_env):
        service = await unit_env.get(UserService)

        assert await service.get_users_by_ids([]) == {}
