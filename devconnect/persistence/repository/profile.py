"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devconnect.domain.model import Profile
from devconnect.domain.repository import ProfileRepository
from devconnect.domain.value import UserId
from devconnect.persistence.mappers import profile_to_dict, row_to_profile
from devconnect.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository.

    The profile row is the document: saving writes every column, embedded
    lists included.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[Profile]:
        with logfire.span("profile_repository.find_by_user", user_id=str(user_id)):
            stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_profile(dict(row)) if row else None

    async def find_all(self) -> List[Profile]:
        with logfire.span("profile_repository.find_all"):
            stmt = select(profiles_table).order_by(profiles_table.c.created_at)
            result = await self.session.execute(stmt)
            return [row_to_profile(dict(row)) for row in result.mappings().all()]

    async def save(self, profile: Profile) -> Profile:
        with logfire.span("profile_repository.save", profile_id=str(profile.id)):
            profile_dict = profile_to_dict(profile)

            exists = await self.session.scalar(
                select(profiles_table.c.id).where(profiles_table.c.id == profile.id)
            )
            if exists:
                stmt = (
                    update(profiles_table)
                    .where(profiles_table.c.id == profile.id)
                    .values(**profile_dict)
                )
            else:
                stmt = insert(profiles_table).values(**profile_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return profile

    async def delete_by_user(self, user_id: UserId) -> bool:
        with logfire.span("profile_repository.delete_by_user", user_id=str(user_id)):
            stmt = delete(profiles_table).where(profiles_table.c.user_id == user_id)
            result = await self.session.execute(stmt)
            return result.rowcount > 0
