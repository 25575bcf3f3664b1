"""User domain service."""

import hashlib
from datetime import datetime
from uuid import uuid4

import logfire

from devconnect.domain.error import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
)
from devconnect.domain.model import User
from devconnect.domain.repository import UserRepository
from devconnect.domain.value import UserId
from devconnect.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None if it doesn't exist."""
        return await self.user_repository.find_by_id(user_id)

    async def get_users_by_ids(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users at once.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of the IDs that exist to their users
        """
        users = await self.user_repository.find_by_ids(list(dict.fromkeys(user_ids)))
        return {user.id: user for user in users}

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(self._normalize_email(email))

    async def register(self, name: str, email: str, password: str) -> User:
        """Create a new user account.

        Args:
            name: Display name
            email: Email address (unique)
            password: Plain-text password, stored as a bcrypt hash

        Returns:
            Created user

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        email = self._normalize_email(email)

        with logfire.span("user_service.register"):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email")
                raise AlreadyExistsError("User already exists")

            user = User(
                id=UserId(uuid4()),
                name=name,
                email=email,
                password_hash=hash_password(password),
                avatar=self.gravatar_url(email),
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Args:
            email: Email address
            password: Plain-text password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(self._normalize_email(email))
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt")
                raise InvalidCredentialsError()
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user account record.

        Args:
            user_id: User ID

        Returns:
            True if the user existed
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            deleted = await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id), existed=deleted)
            return deleted

    @staticmethod
    def gravatar_url(email: str) -> str:
        """Gravatar avatar URL for an email (200px, PG rated, mystery-man default)."""
        digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
        return f"//www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"

    @staticmethod
    def _normalize_email(email: str) -> str:
        return email.strip().lower()
